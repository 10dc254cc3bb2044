"""Tests for MCP tool core functions."""

import asyncio
import json

import pytest

from roblox_directory_tree.client import ServerUnavailableError
from roblox_directory_tree.mcp.server import (
    NOT_CONNECTED_TEXT,
    connection_check,
    mcp_server,
    project_search,
    project_structure,
)
from roblox_directory_tree.models.node import Node, Snapshot
from roblox_directory_tree.protocols import TreeSourceProtocol
from tests.unit.fakes import FakeTreeSource


def test_fake_source_satisfies_protocol() -> None:
    assert isinstance(FakeTreeSource(), TreeSourceProtocol)


def test_project_structure_text(game_snapshot: Snapshot) -> None:
    text = project_structure(FakeTreeSource(game_snapshot))
    assert text.startswith("=====================================\n  ROBLOX PROJECT STRUCTURE\n")
    assert "ReplicatedStorage [service] (2 children)" in text


def test_project_structure_json(game_snapshot: Snapshot) -> None:
    text = project_structure(FakeTreeSource(game_snapshot), output_format="json")
    assert json.loads(text) == game_snapshot.to_dict()


def test_project_structure_rejects_unknown_format(game_snapshot: Snapshot) -> None:
    with pytest.raises(ValueError, match="Unknown format"):
        project_structure(FakeTreeSource(game_snapshot), output_format="yaml")


def test_project_structure_propagates_unreachable_server() -> None:
    with pytest.raises(ServerUnavailableError):
        project_structure(FakeTreeSource(reachable=False))


def test_project_search_formats_results(game_snapshot: Snapshot) -> None:
    text = project_search(FakeTreeSource(game_snapshot), query="data")
    assert text == (
        'Found 1 result(s) for "data":\n'
        "\n"
        "1. DataService [module]\n"
        "   Path: ReplicatedStorage.DataService\n"
        "   Lines: 42\n"
        "\n"
    )


def test_project_search_omits_lines_for_folders(game_snapshot: Snapshot) -> None:
    text = project_search(FakeTreeSource(game_snapshot), query="shared")
    assert "1. Shared [folder]\n   Path: ReplicatedStorage.Shared\n\n" in text
    assert "2. Util [module]" in text


def test_project_search_no_results(game_snapshot: Snapshot) -> None:
    assert project_search(FakeTreeSource(game_snapshot), query="zzz") == 'No results for "zzz"'


def test_project_search_requires_query(game_snapshot: Snapshot) -> None:
    source = FakeTreeSource(game_snapshot)
    with pytest.raises(ValueError, match="No search query"):
        project_search(source, query="")
    assert source.calls == []


def test_project_search_accepts_space_query() -> None:
    snapshot = Snapshot(
        name="G",
        containers=(Node(name="Main Menu", class_name="folder"),),
    )
    text = project_search(FakeTreeSource(snapshot), query=" ")
    assert text.startswith('Found 1 result(s) for " ":\n\n1. Main Menu [folder]\n')


def test_connection_check_reports_state(game_snapshot: Snapshot) -> None:
    source = FakeTreeSource(game_snapshot, status={"connected": True, "lastUpdate": 1, "name": "x"})
    assert connection_check(source) == (
        "Server running\nGame: MyGame\nStudio connected: Yes\nContainers: 2"
    )


def test_connection_check_stale_studio(game_snapshot: Snapshot) -> None:
    source = FakeTreeSource(game_snapshot, status={"connected": False})
    assert "Studio connected: No" in connection_check(source)


def test_connection_check_unreachable_returns_guidance() -> None:
    assert connection_check(FakeTreeSource(reachable=False)) == NOT_CONNECTED_TEXT


async def _tool_names() -> set[str]:
    return {tool.name for tool in await mcp_server.list_tools()}


def test_mcp_server_registers_tools() -> None:
    assert asyncio.run(_tool_names()) == {
        "get_roblox_project_structure",
        "search_roblox_project",
        "check_roblox_connection",
    }
