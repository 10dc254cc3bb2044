"""Protocols for dependency injection in the query tools."""

from typing import Any, Protocol, runtime_checkable

from roblox_directory_tree.models.node import Snapshot


@runtime_checkable
class TreeSourceProtocol(Protocol):
    """Something that can hand out the current tree and connection status."""

    def fetch_tree(self) -> Snapshot:
        """Return the current snapshot."""
        ...

    def fetch_status(self) -> dict[str, Any]:
        """Return the status payload (``connected``, ``lastUpdate``, ``name``)."""
        ...
