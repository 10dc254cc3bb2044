"""CLI for the Roblox directory tree (server, MCP tools, queries)."""

import json
from datetime import UTC, datetime
from typing import Annotated

import typer
from loguru import logger

from roblox_directory_tree.client import ServerUnavailableError, TreeClient
from roblox_directory_tree.config import DEFAULT_HOST, DEFAULT_PORT
from roblox_directory_tree.core.search.searcher import search_tree
from roblox_directory_tree.core.tree.render import render_text
from roblox_directory_tree.logging_config import configure_logging

app = typer.Typer(help="Live directory tree of a Roblox Studio project.")

ServerOption = Annotated[
    str | None,
    typer.Option("--server", "-s", help="Tree server URL (default: $DIRECTORY_TREE_SERVER)"),
]


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


@app.command()
def serve(
    host: str = typer.Option(DEFAULT_HOST, "--host", "-H", help="Interface to bind"),
    port: int = typer.Option(DEFAULT_PORT, "--port", "-p", help="Port Studio publishes to"),
) -> None:
    """Start the HTTP server that Roblox Studio publishes to."""
    from roblox_directory_tree.server.app import run_http_server

    run_http_server(host=host, port=port)


@app.command()
def mcp() -> None:
    """Start the MCP server (stdio transport)."""
    from roblox_directory_tree.mcp.server import run_mcp_server

    run_mcp_server()


def _client(server: str | None) -> TreeClient:
    return TreeClient(server)


@app.command()
def tree(
    server: ServerOption = None,
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Print the current project tree."""
    try:
        snapshot = _client(server).fetch_tree()
    except ServerUnavailableError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e

    if output_json:
        typer.echo(json.dumps(snapshot.to_dict(), indent=2, ensure_ascii=False))
    else:
        typer.echo(render_text(snapshot), nl=False)


@app.command()
def search(
    query: str = typer.Argument(..., help="Name or partial dotted path"),
    server: ServerOption = None,
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Search the project tree by name or path."""
    if not query:
        typer.echo("No search query provided.")
        raise typer.Exit(1)

    try:
        snapshot = _client(server).fetch_tree()
    except ServerUnavailableError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e

    results = search_tree(snapshot, query)
    if output_json:
        data = {"query": query, "count": len(results), "results": [r.to_dict() for r in results]}
        typer.echo(json.dumps(data, indent=2, ensure_ascii=False))
        return

    typer.echo(f"Found {len(results)} results for {query!r}:\n")
    for r in results:
        suffix = f"  ({r.line_count} lines)" if r.line_count else ""
        typer.echo(f"  {r.name} [{r.class_name}]{suffix}")
        typer.echo(f"    path={r.path}")


@app.command()
def status(server: ServerOption = None) -> None:
    """Show whether Studio is currently publishing."""
    try:
        data = _client(server).fetch_status()
    except ServerUnavailableError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e

    typer.echo(f"Game: {data.get('name', 'Unknown')}")
    typer.echo(f"Studio connected: {'Yes' if data.get('connected') else 'No'}")
    last_update = data.get("lastUpdate") or 0
    if last_update:
        dt = datetime.fromtimestamp(last_update / 1000, tz=UTC)
        typer.echo(f"Last update: {dt:%Y-%m-%d %H:%M:%S} UTC")
    else:
        typer.echo("Last update: never")
