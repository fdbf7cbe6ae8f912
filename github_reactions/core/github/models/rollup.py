"""Reaction rollup model.

GitHub embeds a ``reactions`` summary object in issues, comments and
releases.  Its count keys include ``+1`` and ``-1``, which are not valid
Python identifiers, so they are remapped before validation.
"""

from __future__ import annotations

from pydantic import BaseModel, model_validator

from github_reactions.core.github.models.reaction import ReactionContent

_FIELD_BY_CONTENT = {
    ReactionContent.PLUS_ONE: "plus_one",
    ReactionContent.MINUS_ONE: "minus_one",
    ReactionContent.LAUGH: "laugh",
    ReactionContent.CONFUSED: "confused",
    ReactionContent.HEART: "heart",
    ReactionContent.HOORAY: "hooray",
    ReactionContent.ROCKET: "rocket",
    ReactionContent.EYES: "eyes",
}


class ReactionRollup(BaseModel):
    model_config = {"frozen": True}

    url: str | None = None
    total_count: int = 0
    plus_one: int = 0
    minus_one: int = 0
    laugh: int = 0
    confused: int = 0
    heart: int = 0
    hooray: int = 0
    rocket: int = 0
    eyes: int = 0

    def count_for(self, content: ReactionContent) -> int:
        return getattr(self, _FIELD_BY_CONTENT[content])

    @model_validator(mode="before")
    @classmethod
    def _from_api(cls, data: dict) -> dict:  # type: ignore[override]
        if not isinstance(data, dict) or "plus_one" in data:
            return data

        result = {
            "url": data.get("url"),
            "total_count": data.get("total_count") or 0,
        }
        for content, field_name in _FIELD_BY_CONTENT.items():
            result[field_name] = data.get(content.value) or 0
        return result
