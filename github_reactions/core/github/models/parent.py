"""Parent resources a reaction can be attached to.

Each variant carries exactly the identifiers its REST path needs.  Models
are strict: an owner given as an int, or an issue number given as a
string, is rejected instead of being coerced.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import AfterValidator, BaseModel, Field


def _not_dot_segment(value: str) -> str:
    # Dot segments survive percent-encoding and are normalised away by httpx.
    if value in (".", ".."):
        raise ValueError(f"{value!r} is not a valid name")
    return value


_Name = Annotated[str, Field(min_length=1), AfterValidator(_not_dot_segment)]
_Number = Annotated[int, Field(gt=0)]


class _Parent(BaseModel):
    model_config = {"frozen": True, "strict": True}


class Issue(_Parent):
    kind: Literal["issue"] = "issue"
    owner: _Name
    repo: _Name
    issue_number: _Number


class IssueComment(_Parent):
    kind: Literal["issue_comment"] = "issue_comment"
    owner: _Name
    repo: _Name
    comment_id: _Number


class CommitComment(_Parent):
    kind: Literal["commit_comment"] = "commit_comment"
    owner: _Name
    repo: _Name
    comment_id: _Number


class PullRequestReviewComment(_Parent):
    kind: Literal["pull_request_review_comment"] = "pull_request_review_comment"
    owner: _Name
    repo: _Name
    comment_id: _Number


class Release(_Parent):
    kind: Literal["release"] = "release"
    owner: _Name
    repo: _Name
    release_id: _Number


class TeamDiscussion(_Parent):
    kind: Literal["team_discussion"] = "team_discussion"
    org: _Name
    team_slug: _Name
    discussion_number: _Number


class TeamDiscussionComment(_Parent):
    kind: Literal["team_discussion_comment"] = "team_discussion_comment"
    org: _Name
    team_slug: _Name
    discussion_number: _Number
    comment_number: _Number


ParentResource = Annotated[
    Union[
        Issue,
        IssueComment,
        CommitComment,
        PullRequestReviewComment,
        Release,
        TeamDiscussion,
        TeamDiscussionComment,
    ],
    Field(discriminator="kind"),
]
