"""Client configuration."""

from __future__ import annotations

import os

from pydantic import BaseModel, ValidationError, field_validator

from github_reactions.core.exceptions import InvalidArgumentError

DEFAULT_BASE_URL = "https://api.github.com/"
DEFAULT_TIMEOUT = 30.0
DEFAULT_API_VERSION = "2022-11-28"
DEFAULT_USER_AGENT = "github-reactions"


class ClientConfig(BaseModel):
    """Immutable settings a ``ReactionClient`` is built from.

    Parameters
    ----------
    token:
        Personal access token sent as a bearer token.  Anonymous requests
        are made when it is ``None`` (listing public reactions still works).
    base_url:
        API root; GitHub Enterprise Server users point this at
        ``https://<host>/api/v3/``.
    timeout:
        Default per-request timeout in seconds.  Individual calls may
        override it.
    """

    model_config = {"frozen": True}

    token: str | None = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    api_version: str = DEFAULT_API_VERSION

    @field_validator("base_url")
    @classmethod
    def _normalize_base_url(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {value!r}")
        return value.rstrip("/") + "/"

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("timeout must be positive")
        return value

    @classmethod
    def from_env(cls, **overrides: object) -> ClientConfig:
        """Build a config from ``GITHUB_TOKEN``, ``GITHUB_API_URL`` and ``GITHUB_TIMEOUT``.

        Keyword arguments whose value is not ``None`` take precedence over
        the environment.  Invalid values raise ``InvalidArgumentError``.
        """
        values: dict[str, object] = {}
        token = os.environ.get("GITHUB_TOKEN")
        if token:
            values["token"] = token
        base_url = os.environ.get("GITHUB_API_URL")
        if base_url:
            values["base_url"] = base_url
        timeout = os.environ.get("GITHUB_TIMEOUT")
        if timeout:
            values["timeout"] = timeout

        values.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return cls.model_validate(values)
        except ValidationError as exc:
            raise InvalidArgumentError(f"Invalid client configuration: {exc}") from exc
