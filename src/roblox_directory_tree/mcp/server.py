"""MCP server exposing the Roblox project tree to assistants."""

import json
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from loguru import logger
from mcp.server.fastmcp import Context, FastMCP

from roblox_directory_tree.client import ServerUnavailableError, TreeClient
from roblox_directory_tree.core.search.searcher import search_tree
from roblox_directory_tree.core.tree.render import render_text
from roblox_directory_tree.protocols import TreeSourceProtocol

NOT_CONNECTED_TEXT = """\
Not connected

Make sure:
1. The tree server is running (roblox-tree serve)
2. The Roblox Studio plugin is connected to it"""

# --- Core functions (testable without MCP context) ---


def project_structure(source: TreeSourceProtocol, *, output_format: str = "text") -> str:
    """Get the whole project tree as rendered text or JSON.

    Args:
        output_format: "text" (box-drawing tree) or "json".
    """
    if output_format not in ("text", "json"):
        msg = f"Unknown format {output_format!r}, expected 'text' or 'json'"
        raise ValueError(msg)
    snapshot = source.fetch_tree()
    if output_format == "json":
        return json.dumps(snapshot.to_dict(), indent=2, ensure_ascii=False)
    return render_text(snapshot)


def project_search(source: TreeSourceProtocol, *, query: str) -> str:
    """Search scripts, modules and folders by name or dotted path.

    Args:
        query: Name or partial path, matched case-insensitively.
    """
    if not query:
        msg = "No search query provided."
        raise ValueError(msg)

    results = search_tree(source.fetch_tree(), query)
    if not results:
        return f'No results for "{query}"'

    lines = [f'Found {len(results)} result(s) for "{query}":', ""]
    for i, r in enumerate(results, start=1):
        lines.append(f"{i}. {r.name} [{r.class_name}]")
        lines.append(f"   Path: {r.path}")
        if r.line_count:
            lines.append(f"   Lines: {r.line_count}")
        lines.append("")
    return "\n".join(lines) + "\n"


def connection_check(source: TreeSourceProtocol) -> str:
    """Report whether the server is up and Studio is publishing.

    Never raises for an unreachable server; returns guidance instead.
    """
    try:
        status = source.fetch_status()
        snapshot = source.fetch_tree()
    except ServerUnavailableError as e:
        logger.debug("Connection check failed: {}", e)
        return NOT_CONNECTED_TEXT

    return (
        "Server running\n"
        f"Game: {snapshot.name or 'Unknown'}\n"
        f"Studio connected: {'Yes' if status.get('connected') else 'No'}\n"
        f"Containers: {len(snapshot.containers)}"
    )


# --- MCP Server Setup ---


@dataclass
class ServerContext:
    """Shared resources for the MCP server lifetime."""

    source: TreeSourceProtocol


@asynccontextmanager
async def server_lifespan(_server: FastMCP) -> AsyncIterator[ServerContext]:
    """Create the HTTP client used by every tool call."""
    client = TreeClient()
    logger.debug("MCP tools reading from {}", client.base_url)
    try:
        yield ServerContext(source=client)
    finally:
        client.sess.close()


mcp_server = FastMCP(
    "roblox-directory-tree",
    instructions="""\
Live view of the Roblox Studio project open in the editor.

1. Call get_roblox_project_structure to see every container, script, module
   and folder with its class and line count.
2. Use search_roblox_project to locate things by name or dotted path
   (e.g. "ReplicatedStorage.Data").
3. If results look empty, call check_roblox_connection: Studio may not be
   publishing yet.
""",
    lifespan=server_lifespan,
)


def _ctx(mcp_ctx: Context) -> ServerContext:
    return mcp_ctx.request_context.lifespan_context  # type: ignore[return-value]


# --- MCP Tool Wrappers ---


@mcp_server.tool()
async def get_roblox_project_structure(ctx: Context, format: str = "text") -> str:  # noqa: A002
    """Get the complete directory tree of the Roblox Studio project.

    Shows all scripts, modules and folders with their types and line counts.

    Args:
        format: Output format, "text" (default) or "json".
    """
    return project_structure(_ctx(ctx).source, output_format=format)


@mcp_server.tool()
async def search_roblox_project(ctx: Context, query: str) -> str:
    """Search for scripts, modules, or folders by name in the Roblox project.

    Args:
        query: Name or partial path to search for.
    """
    return project_search(_ctx(ctx).source, query=query)


@mcp_server.tool()
async def check_roblox_connection(ctx: Context) -> str:
    """Check if Roblox Studio is connected and the server is running."""
    return connection_check(_ctx(ctx).source)


def run_mcp_server() -> None:
    """Run the MCP server with stdio transport."""
    from roblox_directory_tree.logging_config import configure_logging

    configure_logging(verbose=False)
    mcp_server.run(transport="stdio")
