"""Entry point for ``python -m github_reactions.mcp``."""

from __future__ import annotations

import click


@click.command()
@click.option(
    "--transport",
    type=click.Choice(["stdio", "http"], case_sensitive=False),
    default="stdio",
    help="MCP transport.",
)
@click.option("--port", type=click.IntRange(1, 65535), default=8000, help="Port for http.")
def main(transport: str, port: int) -> None:
    """Serve the reaction tools over MCP."""
    from github_reactions.mcp.server import mcp

    if transport.lower() == "http":
        mcp.run(transport="http", port=port)
    else:
        mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
