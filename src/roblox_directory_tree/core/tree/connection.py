"""Derive publisher liveness from the last snapshot arrival."""

import time
from collections.abc import Callable

from roblox_directory_tree.config import FRESHNESS_WINDOW
from roblox_directory_tree.core.tree.model import TreeModel


def is_fresh(arrived_at: float, now: float, window: float) -> bool:
    """Check whether a publish at ``arrived_at`` is still within ``window``.

    Args:
        arrived_at: Local arrival time of the last publish (0 = never).
        now: Current time, same clock.
        window: Freshness window in seconds.

    Returns:
        True if the publisher should be considered connected.
    """
    if not arrived_at:
        return False
    return (now - arrived_at) < window


class ConnectionTracker:
    """Point-in-time "is Studio publishing?" check. No background timers."""

    def __init__(
        self,
        model: TreeModel,
        *,
        window: float = FRESHNESS_WINDOW,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._model = model
        self.window = window
        self._clock = clock

    def is_connected(self) -> bool:
        return self.is_fresh_since(self._model.last_arrival())

    def is_fresh_since(self, arrived_at: float) -> bool:
        """Freshness of an arrival time already read from the model."""
        return is_fresh(arrived_at, self._clock(), self.window)
