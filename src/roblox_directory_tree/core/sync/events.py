"""Fire-and-forget notification of newly installed snapshots."""

import threading
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor

from loguru import logger

from roblox_directory_tree.models.node import Snapshot

SnapshotCallback = Callable[[Snapshot], None]


class SnapshotEvents:
    """Observer channel with zero or more subscribers.

    Deliveries run on a single worker thread: subscribers see snapshots in
    publish order and the publisher never waits on them.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._subscribers: list[SnapshotCallback] = []
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="snapshot-events")
        self._closed = False

    def subscribe(self, callback: SnapshotCallback) -> Callable[[], None]:
        """Register ``callback``; returns a function that unregisters it."""
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def emit(self, snapshot: Snapshot) -> None:
        """Queue delivery of ``snapshot`` to the current subscribers."""
        with self._lock:
            if self._closed:
                logger.debug("Event channel closed, dropping snapshot {!r}", snapshot.name)
                return
            subscribers = tuple(self._subscribers)
            if subscribers:
                self._executor.submit(self._deliver, subscribers, snapshot)

    @staticmethod
    def _deliver(subscribers: tuple[SnapshotCallback, ...], snapshot: Snapshot) -> None:
        for callback in subscribers:
            try:
                callback(snapshot)
            except Exception:
                logger.exception("Snapshot subscriber {!r} failed", callback)

    def close(self) -> None:
        """Finish pending deliveries and stop the worker."""
        with self._lock:
            self._closed = True
        self._executor.shutdown(wait=True)
