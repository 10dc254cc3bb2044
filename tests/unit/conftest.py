"""Shared test fixtures."""

import copy
import json
from collections.abc import Iterator
from typing import Any

import pytest

from roblox_directory_tree.core.sync.gateway import SyncGateway
from roblox_directory_tree.core.sync.parser import snapshot_from_dict
from roblox_directory_tree.models.node import Snapshot
from tests.unit.fakes import FakeClock

GAME_PAYLOAD: dict[str, Any] = {
    "name": "MyGame",
    "timestamp": 1700000000,
    "containers": [
        {
            "name": "ReplicatedStorage",
            "className": "service",
            "childCount": 2,
            "children": [
                {
                    "name": "DataService",
                    "className": "module",
                    "path": "ReplicatedStorage.DataService",
                    "lineCount": 42,
                },
                {
                    "name": "Shared",
                    "className": "folder",
                    "children": [
                        {"name": "Util", "className": "module", "lineCount": 10},
                    ],
                },
            ],
        },
        {
            "name": "ServerScriptService",
            "className": "service",
            "children": [
                {"name": "Main", "className": "script", "lineCount": 5},
            ],
        },
    ],
}


@pytest.fixture
def game_payload() -> dict[str, Any]:
    """A fresh copy of the sample payload, safe to mutate."""
    return copy.deepcopy(GAME_PAYLOAD)


@pytest.fixture
def game_snapshot() -> Snapshot:
    return snapshot_from_dict(copy.deepcopy(GAME_PAYLOAD))


@pytest.fixture
def game_bytes() -> bytes:
    return json.dumps(GAME_PAYLOAD).encode("utf-8")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(start=1_000_000.0)


@pytest.fixture
def gateway(clock: FakeClock) -> Iterator[SyncGateway]:
    """A gateway with an isolated model, driven by the fake clock."""
    gw = SyncGateway(clock=clock)
    yield gw
    gw.close()
