"""In-memory holder of the most recently published snapshot."""

import threading
import time
from collections.abc import Callable
from typing import NamedTuple

from roblox_directory_tree.config import WAITING_NAME
from roblox_directory_tree.models.node import Snapshot


class TreeState(NamedTuple):
    """A snapshot together with the local time it arrived (0 = never)."""

    snapshot: Snapshot
    arrived_at: float


def placeholder_snapshot() -> Snapshot:
    """Snapshot served before Studio has published anything."""
    return Snapshot(name=WAITING_NAME, containers=(), timestamp=0)


class TreeModel:
    """Current snapshot plus its arrival time, replaced wholesale on install.

    Both values live in one ``TreeState`` that is swapped as a single
    reference, so readers see either the old pair or the new pair.
    """

    def __init__(self, *, clock: Callable[[], float] = time.time) -> None:
        self.clock = clock
        self._lock = threading.Lock()
        self._state = TreeState(placeholder_snapshot(), 0.0)

    def install(self, snapshot: Snapshot) -> TreeState:
        """Replace the current snapshot, stamping the local arrival time."""
        with self._lock:
            self._state = TreeState(snapshot, self.clock())
            return self._state

    def state(self) -> TreeState:
        return self._state

    def current(self) -> Snapshot:
        return self._state.snapshot

    def last_arrival(self) -> float:
        return self._state.arrived_at
