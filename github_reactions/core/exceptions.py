"""Custom exceptions for github-reactions."""

from __future__ import annotations


class GitHubReactionsError(Exception):
    """Base exception for all github-reactions errors.

    Attributes:
        is_fatal: If True, the error is unrecoverable and the user should be
                  prompted to take corrective action (e.g. invalid token).
    """

    def __init__(
        self,
        message: str,
        is_fatal: bool = False,
        *args: object,
    ) -> None:
        super().__init__(message, *args)
        self.is_fatal = is_fatal


class TransportError(GitHubReactionsError):
    """Raised when the request never produced an HTTP response (DNS, TCP, TLS, timeout)."""


class ApiError(GitHubReactionsError):
    """Raised for an HTTP status the called operation does not accept.

    The server's status code and raw body are kept verbatim so callers can
    inspect validation or rate-limit details.
    """

    def __init__(
        self,
        status_code: int,
        body: str,
        message: str | None = None,
        is_fatal: bool = False,
    ) -> None:
        super().__init__(
            message or f"GitHub API responded with {status_code}: {body}",
            is_fatal,
        )
        self.status_code = status_code
        self.body = body


class NotFoundError(ApiError):
    """Raised on 404, e.g. when deleting a reaction that is already gone."""


class MalformedResponseError(GitHubReactionsError):
    """Raised when a successful response body does not decode into the expected shape."""


class InvalidArgumentError(GitHubReactionsError, ValueError):
    """Raised when an argument is rejected before any request is sent."""
