"""MCP server exposing GitHub reaction tools for LLM consumption."""

from __future__ import annotations

from fastmcp import FastMCP

from github_reactions.core.config import ClientConfig
from github_reactions.core.github.client import ReactionClient
from github_reactions.core.github.models import Reaction
from github_reactions.core.github.paths import parse_parent

mcp = FastMCP(name="github-reactions")

_reaction_client: ReactionClient | None = None


def _get_reaction_client() -> ReactionClient:
    global _reaction_client
    if _reaction_client is None:
        config = ClientConfig.from_env()
        if not config.token:
            raise ValueError("GITHUB_TOKEN environment variable is required")
        _reaction_client = ReactionClient(config)
    return _reaction_client


def reaction_to_dict(reaction: Reaction) -> dict:
    return {
        "id": reaction.id,
        "content": reaction.content.value,
        "user": reaction.user.login if reaction.user is not None else None,
        "created_at": reaction.created_at.isoformat() if reaction.created_at else None,
        "was_already_present": reaction.was_already_present,
    }


@mcp.tool
async def list_reactions(
    parent: str,
    content: str | None = None,
    page: int | None = None,
    per_page: int | None = None,
) -> list[dict]:
    """List reactions on a GitHub issue, comment, discussion or release.

    Args:
        parent: Parent path, e.g. "octo/hello/issues/12",
            "octo/hello/pulls/comments/7" or "orgs/acme/teams/core/discussions/3".
        content: Only reactions of this content ("+1", "-1", "laugh",
            "confused", "heart", "hooray", "rocket", "eyes").
        page: Page number, starting at 1.
        per_page: Results per page, 1-100.
    """
    client = _get_reaction_client()
    reactions = await client.list_reactions(parse_parent(parent), content, page, per_page)
    return [reaction_to_dict(r) for r in reactions]


@mcp.tool
async def add_reaction(parent: str, content: str) -> dict:
    """Add a reaction to a GitHub issue, comment, discussion or release."""
    client = _get_reaction_client()
    reaction = await client.create_reaction(parse_parent(parent), content)
    return reaction_to_dict(reaction)


@mcp.tool
async def delete_reaction(parent: str, reaction_id: int) -> str:
    """Delete a reaction by ID from its parent resource."""
    client = _get_reaction_client()
    await client.delete_reaction(parse_parent(parent), reaction_id)
    return f"Deleted reaction {reaction_id}."
