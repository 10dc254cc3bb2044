"""Live Roblox Studio directory tree: sync server, queries and assistant tools."""

__version__ = "1.0.0"

from roblox_directory_tree.core.sync.gateway import SyncGateway  # noqa: E402
from roblox_directory_tree.core.sync.parser import SnapshotParseError  # noqa: E402
from roblox_directory_tree.models.node import MatchRecord, Node, Snapshot  # noqa: E402

__all__ = ["MatchRecord", "Node", "Snapshot", "SnapshotParseError", "SyncGateway", "__version__"]
