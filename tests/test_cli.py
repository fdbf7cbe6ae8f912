"""Tests for the command line interface."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from github_reactions.cli.app import cli
from github_reactions.core.exceptions import NotFoundError
from github_reactions.core.github.models import Issue, Reaction, ReactionContent
from tests.helpers import make_reaction_json

_CLIENT = "github_reactions.core.github.client.ReactionClient"


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("GITHUB_TOKEN", "GITHUB_API_URL", "GITHUB_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


class TestContents:
    def test_lists_all_contents(self, runner):
        result = runner.invoke(cli, ["contents"])
        assert result.exit_code == 0
        assert result.output.split() == [c.value for c in ReactionContent]


class TestList:
    def test_prints_reactions(self, runner):
        reactions = [Reaction.model_validate(make_reaction_json(5, "heart"))]
        with patch(f"{_CLIENT}.list_reactions", new_callable=AsyncMock, return_value=reactions) as mock:
            result = runner.invoke(cli, ["list", "octo/hello/issues/12", "--per-page", "10"])
        assert result.exit_code == 0, result.output
        assert "5 | heart" in result.output
        assert "octocat" in result.output
        args, kwargs = mock.call_args
        assert args == (Issue(owner="octo", repo="hello", issue_number=12), None, None, 10)
        assert kwargs == {"timeout": None}

    def test_content_filter(self, runner):
        with patch(f"{_CLIENT}.list_reactions", new_callable=AsyncMock, return_value=[]) as mock:
            result = runner.invoke(cli, ["list", "octo/hello/issues/12", "-c", "+1"])
        assert result.exit_code == 0
        assert mock.call_args[0][1] is ReactionContent.PLUS_ONE

    def test_bad_parent(self, runner):
        result = runner.invoke(cli, ["list", "octo/hello/wiki/1"])
        assert result.exit_code == 2
        assert "Unrecognised parent resource" in result.output

    def test_bad_content(self, runner):
        result = runner.invoke(cli, ["list", "octo/hello/issues/1", "-c", "thumbs"])
        assert result.exit_code == 2
        assert "Invalid reaction content" in result.output

    def test_bad_api_url_reported(self, runner):
        result = runner.invoke(cli, ["list", "octo/hello/issues/1", "--api-url", "ftp://x"])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "Invalid client configuration" in result.output

    def test_bad_timeout_env_reported(self, runner, monkeypatch):
        monkeypatch.setenv("GITHUB_TIMEOUT", "abc")
        result = runner.invoke(cli, ["list", "octo/hello/issues/1"])
        assert result.exit_code == 1
        assert "Invalid client configuration" in result.output


class TestAdd:
    def test_created(self, runner):
        reaction = Reaction.model_validate(make_reaction_json(8, "rocket"))
        with patch(f"{_CLIENT}.create_reaction", new_callable=AsyncMock, return_value=reaction):
            result = runner.invoke(cli, ["add", "octo/hello/releases/3", "rocket"])
        assert result.exit_code == 0
        assert result.output.startswith("Created: 8 | rocket")

    def test_already_present(self, runner):
        reaction = Reaction.model_validate(
            {**make_reaction_json(8, "rocket"), "was_already_present": True}
        )
        with patch(f"{_CLIENT}.create_reaction", new_callable=AsyncMock, return_value=reaction):
            result = runner.invoke(cli, ["add", "octo/hello/releases/3", "rocket"])
        assert result.exit_code == 0
        assert "Already present" in result.output


class TestRemove:
    def test_deleted(self, runner):
        with patch(f"{_CLIENT}.delete_reaction", new_callable=AsyncMock, return_value=None) as mock:
            result = runner.invoke(
                cli, ["remove", "orgs/acme/teams/core/discussions/3", "42", "--timeout", "2"]
            )
        assert result.exit_code == 0
        assert "Deleted: 42" in result.output
        assert mock.call_args[1] == {"timeout": 2.0}

    def test_not_found_exits_1(self, runner):
        error = NotFoundError(404, "{}", "DELETE 'x' failed: not found.")
        with patch(f"{_CLIENT}.delete_reaction", new_callable=AsyncMock, side_effect=error):
            result = runner.invoke(cli, ["remove", "octo/hello/issues/1", "42"])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_reaction_id_must_be_positive(self, runner):
        result = runner.invoke(cli, ["remove", "octo/hello/issues/1", "0"])
        assert result.exit_code == 2
