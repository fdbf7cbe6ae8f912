"""GitHub data models."""

from github_reactions.core.github.models.parent import (
    CommitComment,
    Issue,
    IssueComment,
    ParentResource,
    PullRequestReviewComment,
    Release,
    TeamDiscussion,
    TeamDiscussionComment,
)
from github_reactions.core.github.models.reaction import Reaction, ReactionContent
from github_reactions.core.github.models.rollup import ReactionRollup
from github_reactions.core.github.models.user import User

__all__ = [
    "CommitComment",
    "Issue",
    "IssueComment",
    "ParentResource",
    "PullRequestReviewComment",
    "Reaction",
    "ReactionContent",
    "ReactionRollup",
    "Release",
    "TeamDiscussion",
    "TeamDiscussionComment",
    "User",
]
