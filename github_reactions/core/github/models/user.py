"""User model."""

from __future__ import annotations

from pydantic import BaseModel


class User(BaseModel):
    """The GitHub account a reaction belongs to."""

    model_config = {"frozen": True}

    login: str
    id: int
    node_id: str | None = None
    avatar_url: str | None = None
    html_url: str | None = None
    type: str | None = None
    site_admin: bool = False
