"""CLI application - main entry point with all commands."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any, Coroutine

import click
from rich.console import Console
from rich.markup import escape

from github_reactions.core.exceptions import GitHubReactionsError

if TYPE_CHECKING:
    from github_reactions.core.github.client import ReactionClient
    from github_reactions.core.github.models import ParentResource, Reaction, ReactionContent

console = Console()


class ParentParamType(click.ParamType):
    """Click parameter type for a reaction's parent resource path."""

    name = "parent"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> ParentResource:
        from github_reactions.core.github.paths import parse_parent

        try:
            return parse_parent(value)
        except GitHubReactionsError as exc:
            self.fail(str(exc), param, ctx)


class ContentParamType(click.ParamType):
    """Click parameter type for reaction content."""

    name = "content"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> ReactionContent:
        from github_reactions.core.github.models import ReactionContent

        try:
            return ReactionContent.parse(value)
        except GitHubReactionsError as exc:
            self.fail(str(exc), param, ctx)


PARENT = ParentParamType()
CONTENT = ContentParamType()

# Common options
token_option = click.option(
    "-t", "--token", envvar="GITHUB_TOKEN", default=None, help="GitHub token."
)
api_url_option = click.option(
    "--api-url", envvar="GITHUB_API_URL", default=None, help="GitHub API root URL."
)
timeout_option = click.option(
    "--timeout", type=float, default=None, help="Request timeout in seconds."
)


def _run(coro: Coroutine[Any, Any, None]) -> None:
    try:
        asyncio.run(coro)
    except GitHubReactionsError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc


def _make_client(token: str | None, api_url: str | None) -> ReactionClient:
    from github_reactions.core.config import ClientConfig
    from github_reactions.core.github.client import ReactionClient

    return ReactionClient(ClientConfig.from_env(token=token, base_url=api_url))


def _format_reaction(reaction: Reaction) -> str:
    login = reaction.user.login if reaction.user is not None else "ghost"
    created = reaction.created_at.isoformat() if reaction.created_at else "-"
    return f"{reaction.id} | {reaction.content.value:<8} | {login} | {created}"


@click.group()
@click.version_option(package_name="github-reactions")
def cli() -> None:
    """GitHub Reactions - list, add and remove reactions."""


@cli.command("contents")
def contents() -> None:
    """List accepted reaction contents."""
    from github_reactions.core.github.models import ReactionContent

    for content in ReactionContent:
        console.print(content.value, markup=False)


@cli.command("list")
@token_option
@api_url_option
@timeout_option
@click.argument("parent", type=PARENT)
@click.option("-c", "--content", type=CONTENT, default=None, help="Only this reaction content.")
@click.option("--page", type=int, default=None, help="Page number (>= 1).")
@click.option("--per-page", type=int, default=None, help="Results per page (1-100).")
def list_reactions(
    token: str | None,
    api_url: str | None,
    timeout: float | None,
    parent: ParentResource,
    content: ReactionContent | None,
    page: int | None,
    per_page: int | None,
) -> None:
    """List reactions on PARENT (e.g. octo/hello/issues/12)."""

    async def _list() -> None:
        async with _make_client(token, api_url) as client:
            reactions = await client.list_reactions(
                parent, content, page, per_page, timeout=timeout
            )
            for reaction in reactions:
                console.print(_format_reaction(reaction), markup=False)

    _run(_list())


@cli.command("add")
@token_option
@api_url_option
@timeout_option
@click.argument("parent", type=PARENT)
@click.argument("content", type=CONTENT)
def add_reaction(
    token: str | None,
    api_url: str | None,
    timeout: float | None,
    parent: ParentResource,
    content: ReactionContent,
) -> None:
    """React to PARENT with CONTENT."""

    async def _add() -> None:
        async with _make_client(token, api_url) as client:
            reaction = await client.create_reaction(parent, content, timeout=timeout)
            status = "Already present" if reaction.was_already_present else "Created"
            console.print(f"{status}: {_format_reaction(reaction)}", markup=False)

    _run(_add())


@cli.command("remove")
@token_option
@api_url_option
@timeout_option
@click.argument("parent", type=PARENT)
@click.argument("reaction_id", type=click.IntRange(min=1))
def remove_reaction(
    token: str | None,
    api_url: str | None,
    timeout: float | None,
    parent: ParentResource,
    reaction_id: int,
) -> None:
    """Delete reaction REACTION_ID from PARENT."""

    async def _remove() -> None:
        async with _make_client(token, api_url) as client:
            await client.delete_reaction(parent, reaction_id, timeout=timeout)
            console.print(f"Deleted: {reaction_id}")

    _run(_remove())
