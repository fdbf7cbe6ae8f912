"""Decoding of reaction response bodies and encoding of create payloads."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from github_reactions.core.exceptions import MalformedResponseError
from github_reactions.core.github.models import Reaction, ReactionContent, ReactionRollup


def decode_reaction(raw: Any) -> Reaction:
    """Decode one reaction object.

    Raises ``MalformedResponseError`` when ``id`` or ``content`` is missing,
    or when ``content`` is not one of the known values.  An unknown content
    is never mapped onto a known one.
    """
    if not isinstance(raw, dict):
        raise MalformedResponseError(
            f"Expected a reaction object, got {type(raw).__name__}."
        )
    try:
        return Reaction.model_validate(raw)
    except ValidationError as exc:
        raise MalformedResponseError(f"Malformed reaction: {exc}") from exc


def decode_reaction_list(raw: Any) -> list[Reaction]:
    """Decode an array of reaction objects, keeping the server's order."""
    if not isinstance(raw, list):
        raise MalformedResponseError(
            f"Expected a list of reactions, got {type(raw).__name__}."
        )
    return [decode_reaction(item) for item in raw]


def decode_rollup(raw: Any) -> ReactionRollup:
    """Decode the ``reactions`` summary object embedded in issues and comments."""
    if not isinstance(raw, dict):
        raise MalformedResponseError(
            f"Expected a reaction rollup object, got {type(raw).__name__}."
        )
    try:
        return ReactionRollup.model_validate(raw)
    except ValidationError as exc:
        raise MalformedResponseError(f"Malformed reaction rollup: {exc}") from exc


def encode_create_payload(content: str | ReactionContent) -> dict[str, str]:
    """Build the POST body for creating a reaction."""
    return {"content": ReactionContent.parse(content).value}
