"""Boundary between transports and the in-memory tree."""

import time
from collections.abc import Callable

from loguru import logger

from roblox_directory_tree.config import FRESHNESS_WINDOW
from roblox_directory_tree.core.search.searcher import search_tree
from roblox_directory_tree.core.sync.events import SnapshotCallback, SnapshotEvents
from roblox_directory_tree.core.sync.parser import parse_snapshot
from roblox_directory_tree.core.tree.connection import ConnectionTracker
from roblox_directory_tree.core.tree.model import TreeModel
from roblox_directory_tree.core.tree.render import render_text
from roblox_directory_tree.models.node import ConnectionStatus, MatchRecord, Snapshot


class SyncGateway:
    """Accept published snapshots and answer queries about the current one.

    Collaborators are injectable. By default the gateway builds its own
    model and tracker on one shared clock, plus a private event channel.
    A default tracker reads the model's clock, so an injected model and
    its freshness checks never disagree about the time.
    """

    def __init__(
        self,
        model: TreeModel | None = None,
        *,
        tracker: ConnectionTracker | None = None,
        events: SnapshotEvents | None = None,
        clock: Callable[[], float] = time.time,
        window: float = FRESHNESS_WINDOW,
    ) -> None:
        self.model = model or TreeModel(clock=clock)
        self.tracker = tracker or ConnectionTracker(
            self.model, window=window, clock=self.model.clock
        )
        self.events = events or SnapshotEvents()

    def publish(self, raw: bytes | str) -> Snapshot:
        """Validate and install a published snapshot.

        Args:
            raw: Request body from the publisher.

        Returns:
            The installed snapshot.

        Raises:
            SnapshotParseError: If ``raw`` is malformed. The current
                snapshot is left untouched.
        """
        snapshot = parse_snapshot(raw)
        self.model.install(snapshot)
        logger.debug(
            "Installed snapshot {!r} ({} containers)", snapshot.name, len(snapshot.containers)
        )
        self.events.emit(snapshot)
        return snapshot

    def get_current(self) -> Snapshot:
        return self.model.current()

    def get_connection_status(self) -> ConnectionStatus:
        # One read of the model keeps lastUpdate and name from the same publish.
        state = self.model.state()
        return ConnectionStatus(
            connected=self.tracker.is_fresh_since(state.arrived_at),
            last_update=state.arrived_at,
            name=state.snapshot.name,
        )

    def render_text(self) -> str:
        return render_text(self.model.current())

    def search(self, query: str) -> list[MatchRecord]:
        return search_tree(self.model.current(), query)

    def subscribe(self, callback: SnapshotCallback) -> Callable[[], None]:
        """Be told about each newly installed snapshot, off the publish path."""
        return self.events.subscribe(callback)

    def close(self) -> None:
        self.events.close()
