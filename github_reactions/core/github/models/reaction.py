"""Reaction model and the fixed set of reaction contents."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from github_reactions.core.exceptions import InvalidArgumentError
from github_reactions.core.github.models.user import User


class ReactionContent(str, Enum):
    PLUS_ONE = "+1"
    MINUS_ONE = "-1"
    LAUGH = "laugh"
    CONFUSED = "confused"
    HEART = "heart"
    HOORAY = "hooray"
    ROCKET = "rocket"
    EYES = "eyes"

    @classmethod
    def try_parse(cls, value: str | ReactionContent | None) -> ReactionContent | None:
        """Return the member whose wire value is *value*, or ``None``."""
        if isinstance(value, ReactionContent):
            return value
        for member in cls:
            if member.value == value:
                return member
        return None

    @classmethod
    def parse(cls, value: str | ReactionContent) -> ReactionContent:
        """Parse a wire value, raising ``InvalidArgumentError`` on anything unknown."""
        result = cls.try_parse(value)
        if result is None:
            raise InvalidArgumentError(
                f"Invalid reaction content: {value!r}. Choose from: "
                + ", ".join(c.value for c in cls)
            )
        return result

    def __str__(self) -> str:
        return self.value


class Reaction(BaseModel):
    model_config = {"frozen": True}

    id: int = Field(strict=True)
    node_id: str | None = None
    user: User | None = None
    content: ReactionContent
    created_at: datetime | None = None

    # True when a create call found the reaction already in place (HTTP 200).
    was_already_present: bool = False

    @property
    def created_at_timestamp(self) -> int | None:
        """Creation time in epoch milliseconds."""
        if self.created_at is None:
            return None
        return int(self.created_at.timestamp() * 1000)
