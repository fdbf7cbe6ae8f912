"""Sample payloads and a recording mock transport shared by the tests."""

from __future__ import annotations

from typing import Callable

import httpx

from github_reactions.core.github.models import (
    CommitComment,
    Issue,
    IssueComment,
    PullRequestReviewComment,
    Release,
    TeamDiscussion,
    TeamDiscussionComment,
)


# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------


def make_user_json(login: str = "octocat", user_id: int = 1) -> dict:
    return {
        "login": login,
        "id": user_id,
        "node_id": "MDQ6VXNlcjE=",
        "avatar_url": f"https://github.com/images/{login}.gif",
        "html_url": f"https://github.com/{login}",
        "type": "User",
        "site_admin": False,
    }


def make_reaction_json(
    reaction_id: int = 1,
    content: str = "heart",
    user: dict | None = None,
    created_at: str = "2016-05-20T20:09:31Z",
) -> dict:
    return {
        "id": reaction_id,
        "node_id": "MDg6UmVhY3Rpb24x",
        "user": user if user is not None else make_user_json(),
        "content": content,
        "created_at": created_at,
    }


ALL_PARENTS = [
    Issue(owner="octo", repo="hello", issue_number=12),
    IssueComment(owner="octo", repo="hello", comment_id=34),
    CommitComment(owner="octo", repo="hello", comment_id=56),
    PullRequestReviewComment(owner="octo", repo="hello", comment_id=78),
    Release(owner="octo", repo="hello", release_id=90),
    TeamDiscussion(org="acme", team_slug="core", discussion_number=3),
    TeamDiscussionComment(org="acme", team_slug="core", discussion_number=3, comment_number=4),
]


# ---------------------------------------------------------------------------
# Mock transport
# ---------------------------------------------------------------------------


class RecordingTransport(httpx.MockTransport):
    """``httpx.MockTransport`` that keeps every request it was asked to send."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


