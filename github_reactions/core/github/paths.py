"""REST paths for the reaction endpoints of each parent resource."""

from __future__ import annotations

import re
from urllib.parse import quote as url_quote
from urllib.parse import unquote

from pydantic import ValidationError

from github_reactions.core.exceptions import InvalidArgumentError
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

_REACTIONS_TEMPLATES: dict[type, str] = {
    Issue: "repos/{owner}/{repo}/issues/{issue_number}/reactions",
    IssueComment: "repos/{owner}/{repo}/issues/comments/{comment_id}/reactions",
    CommitComment: "repos/{owner}/{repo}/comments/{comment_id}/reactions",
    PullRequestReviewComment: "repos/{owner}/{repo}/pulls/comments/{comment_id}/reactions",
    Release: "repos/{owner}/{repo}/releases/{release_id}/reactions",
    TeamDiscussion: (
        "orgs/{org}/teams/{team_slug}/discussions/{discussion_number}/reactions"
    ),
    TeamDiscussionComment: (
        "orgs/{org}/teams/{team_slug}/discussions/{discussion_number}"
        "/comments/{comment_number}/reactions"
    ),
}

# Order matters: the more specific repository forms must be tried before
# ``issues/{n}``, which would otherwise never see ``issues/comments/{n}``.
_REPO = r"(?:repos/)?(?P<owner>[^/]+)/(?P<repo>[^/]+)"
_ORG_TEAM = r"orgs/(?P<org>[^/]+)/teams/(?P<team_slug>[^/]+)"
_PARENT_PATTERNS: list[tuple[re.Pattern[str], type]] = [
    (re.compile(rf"^{_REPO}/issues/comments/(?P<comment_id>\d+)$"), IssueComment),
    (re.compile(rf"^{_REPO}/pulls/comments/(?P<comment_id>\d+)$"), PullRequestReviewComment),
    (re.compile(rf"^{_REPO}/issues/(?P<issue_number>\d+)$"), Issue),
    (re.compile(rf"^{_REPO}/comments/(?P<comment_id>\d+)$"), CommitComment),
    (re.compile(rf"^{_REPO}/releases/(?P<release_id>\d+)$"), Release),
    (
        re.compile(
            rf"^{_ORG_TEAM}/discussions/(?P<discussion_number>\d+)"
            r"/comments/(?P<comment_number>\d+)$"
        ),
        TeamDiscussionComment,
    ),
    (re.compile(rf"^{_ORG_TEAM}/discussions/(?P<discussion_number>\d+)$"), TeamDiscussion),
]

_NAME_FIELDS = frozenset({"owner", "repo", "org", "team_slug"})


def _segment(value: str | int) -> str:
    return url_quote(str(value), safe="")


def reactions_path(parent: ParentResource) -> str:
    """Path shared by the list and create operations of *parent*."""
    template = _REACTIONS_TEMPLATES.get(type(parent))
    if template is None:
        raise InvalidArgumentError(f"Unsupported parent resource: {parent!r}")

    fields = {
        name: _segment(value)
        for name, value in parent.model_dump(exclude={"kind"}).items()
    }
    return template.format(**fields)


def reaction_path(parent: ParentResource, reaction_id: int) -> str:
    """Path addressing a single reaction, used by delete."""
    if isinstance(reaction_id, bool) or not isinstance(reaction_id, int) or reaction_id <= 0:
        raise InvalidArgumentError(f"Invalid reaction id: {reaction_id!r}")
    return f"{reactions_path(parent)}/{reaction_id}"


def parse_parent(text: str) -> ParentResource:
    """Parse a parent path such as ``octo/hello/issues/12`` into its variant.

    A leading slash, a ``repos/`` prefix and a trailing ``/reactions`` are all
    optional, so both the API path and the short form are accepted.  Names
    are percent-decoded, so the output of ``reactions_path`` parses back to
    the same parent.
    """
    candidate = text.strip().strip("/")
    if candidate.endswith("/reactions"):
        candidate = candidate[: -len("/reactions")]

    for pattern, parent_cls in _PARENT_PATTERNS:
        m = pattern.match(candidate)
        if m is None:
            continue
        values: dict[str, str | int] = {
            name: unquote(raw) if name in _NAME_FIELDS else int(raw)
            for name, raw in m.groupdict().items()
        }
        try:
            return parent_cls(**values)
        except ValidationError as exc:
            raise InvalidArgumentError(f"Invalid parent resource {text!r}: {exc}") from exc

    raise InvalidArgumentError(f"Unrecognised parent resource: {text!r}")
