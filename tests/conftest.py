"""Shared fixtures."""

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from github_reactions.core.config import ClientConfig
from github_reactions.core.github.client import ReactionClient
from tests.helpers import RecordingTransport


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(token="ghp_test", base_url="https://api.github.test/")


@pytest.fixture
def make_client(config: ClientConfig) -> Callable[..., tuple[ReactionClient, RecordingTransport]]:
    """Build a ``ReactionClient`` whose requests are answered by *handler*."""

    def _make(
        handler: Callable[[httpx.Request], httpx.Response],
    ) -> tuple[ReactionClient, RecordingTransport]:
        transport = RecordingTransport(handler)
        return ReactionClient(config, transport=transport), transport

    return _make
