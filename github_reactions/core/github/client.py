"""GitHub reactions API client."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from github_reactions.core.config import ClientConfig
from github_reactions.core.exceptions import (
    ApiError,
    InvalidArgumentError,
    MalformedResponseError,
    NotFoundError,
    TransportError,
)
from github_reactions.core.github.codec import (
    decode_reaction,
    decode_reaction_list,
    encode_create_payload,
)
from github_reactions.core.github.models import ParentResource, Reaction, ReactionContent
from github_reactions.core.github.paths import reaction_path, reactions_path
from github_reactions.core.utils.http import create_async_client

logger = logging.getLogger(__name__)

_MAX_PER_PAGE = 100

Timeout = float | httpx.Timeout | None


class ReactionClient:
    """Async client for listing, creating and deleting reactions.

    Parameters
    ----------
    config:
        Immutable client settings (token, API root, default timeout).
        Defaults to ``ClientConfig()``, i.e. anonymous access to github.com.
    **client_kwargs:
        Extra keyword arguments for the underlying ``httpx.AsyncClient``,
        e.g. ``transport=`` in tests.
    """

    def __init__(self, config: ClientConfig | None = None, **client_kwargs: Any) -> None:
        self._config = config or ClientConfig()
        self._client_kwargs = client_kwargs
        self._client: httpx.AsyncClient | None = None

    @property
    def config(self) -> ClientConfig:
        return self._config

    # -- lifecycle ----------------------------------------------------------

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = create_async_client(self._config, **self._client_kwargs)
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> ReactionClient:
        await self._get_client()
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    # -- low-level request helpers ------------------------------------------

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        timeout: Timeout = None,
    ) -> httpx.Response:
        """Send one request and return the raw response, whatever its status.

        This is the raw-body escape hatch; the typed operations below are
        built on it.  Connection-level failures raise ``TransportError``.
        """
        client = await self._get_client()
        extra: dict[str, Any] = {}
        if timeout is not None:
            extra["timeout"] = timeout

        try:
            response = await client.request(method, path, params=params, json=json, **extra)
        except httpx.TransportError as exc:
            raise TransportError(f"{method} '{path}' failed: {exc}") from exc

        logger.debug("%s %s -> %d", method, path, response.status_code)
        return response

    @staticmethod
    def _raise_for_status(response: httpx.Response, method: str, path: str) -> None:
        status = response.status_code
        body = response.text
        if status == 401:
            raise ApiError(
                status,
                body,
                "Authentication token is invalid.",
                is_fatal=True,
            )
        if status == 404:
            raise NotFoundError(status, body, f"{method} '{path}' failed: not found.")
        raise ApiError(
            status,
            body,
            f"{method} '{path}' failed: {status}. Response content: {body}",
        )

    @staticmethod
    def _json(response: httpx.Response, path: str) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponseError(
                f"Response from '{path}' is not valid JSON: {exc}"
            ) from exc

    # -- public API ---------------------------------------------------------

    async def list_reactions(
        self,
        parent: ParentResource,
        content: str | ReactionContent | None = None,
        page: int | None = None,
        per_page: int | None = None,
        *,
        timeout: Timeout = None,
    ) -> list[Reaction]:
        """List the reactions on *parent*, in the order the server returns them.

        ``content`` restricts the result server-side.  ``page`` and
        ``per_page`` are sent only when given; out-of-range values raise
        ``InvalidArgumentError`` rather than being clamped.
        """
        params: dict[str, Any] = {}
        if content is not None:
            params["content"] = ReactionContent.parse(content).value
        if page is not None:
            if isinstance(page, bool) or not isinstance(page, int) or page < 1:
                raise InvalidArgumentError(f"page must be an integer >= 1, got {page!r}")
            params["page"] = page
        if per_page is not None:
            if (
                isinstance(per_page, bool)
                or not isinstance(per_page, int)
                or not 1 <= per_page <= _MAX_PER_PAGE
            ):
                raise InvalidArgumentError(
                    f"per_page must be an integer between 1 and {_MAX_PER_PAGE}, "
                    f"got {per_page!r}"
                )
            params["per_page"] = per_page

        path = reactions_path(parent)
        response = await self.request("GET", path, params=params or None, timeout=timeout)
        if response.status_code != 200:
            self._raise_for_status(response, "GET", path)

        return decode_reaction_list(self._json(response, path))

    async def create_reaction(
        self,
        parent: ParentResource,
        content: str | ReactionContent,
        *,
        timeout: Timeout = None,
    ) -> Reaction:
        """React to *parent* with *content*.

        201 means the reaction was created; 200 means the user had already
        reacted this way, reported as ``was_already_present=True``.
        """
        payload = encode_create_payload(content)
        path = reactions_path(parent)

        response = await self.request("POST", path, json=payload, timeout=timeout)
        if response.status_code not in (200, 201):
            self._raise_for_status(response, "POST", path)

        reaction = decode_reaction(self._json(response, path))
        if response.status_code == 200:
            reaction = reaction.model_copy(update={"was_already_present": True})
        return reaction

    async def delete_reaction(
        self,
        parent: ParentResource,
        reaction_id: int,
        *,
        timeout: Timeout = None,
    ) -> None:
        """Delete one reaction from *parent*.

        Raises ``NotFoundError`` on 404, so callers wanting idempotent
        deletes can catch exactly that.
        """
        path = reaction_path(parent, reaction_id)

        response = await self.request("DELETE", path, timeout=timeout)
        if response.status_code != 204:
            self._raise_for_status(response, "DELETE", path)
