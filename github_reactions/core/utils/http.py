"""Shared httpx client configuration."""

from __future__ import annotations

from typing import Any

import httpx

from github_reactions.core.config import ClientConfig


def build_headers(config: ClientConfig) -> dict[str, str]:
    """Headers sent with every GitHub API request."""
    headers = {
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": config.api_version,
        "User-Agent": config.user_agent,
    }
    if config.token:
        headers["Authorization"] = f"Bearer {config.token}"
    return headers


def create_async_client(config: ClientConfig, **kwargs: Any) -> httpx.AsyncClient:
    """Create a pre-configured httpx.AsyncClient with HTTP/2 support.

    The caller is responsible for using this within an async context manager
    or calling ``aclose()`` when done.
    """
    return httpx.AsyncClient(
        base_url=config.base_url,
        headers=build_headers(config),
        http2=True,
        timeout=httpx.Timeout(config.timeout),
        follow_redirects=True,
        **kwargs,
    )
