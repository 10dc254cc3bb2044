"""Fake implementations for testing the tree server and tools."""

from typing import Any

from roblox_directory_tree.client import ServerUnavailableError
from roblox_directory_tree.models.node import Snapshot


class FakeClock:
    """Manually advanced clock, callable like ``time.time``."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeTreeSource:
    """In-memory stand-in for TreeClient.

    Serves a fixed snapshot and status, or raises ServerUnavailableError
    when constructed with ``reachable=False``. Records every call.
    """

    def __init__(
        self,
        snapshot: Snapshot | None = None,
        *,
        status: dict[str, Any] | None = None,
        reachable: bool = True,
    ) -> None:
        self.snapshot = snapshot or Snapshot(name="Waiting for Roblox Studio...")
        self.status = status or {"connected": False, "lastUpdate": 0, "name": self.snapshot.name}
        self.reachable = reachable
        self.calls: list[str] = []

    def _check(self) -> None:
        if not self.reachable:
            msg = "Server not running at http://localhost:21326"
            raise ServerUnavailableError(msg)

    def fetch_tree(self) -> Snapshot:
        self.calls.append("tree")
        self._check()
        return self.snapshot

    def fetch_status(self) -> dict[str, Any]:
        self.calls.append("status")
        self._check()
        return self.status
