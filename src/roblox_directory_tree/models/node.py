"""Domain models for the published project hierarchy."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Node:
    """A single object in the published hierarchy."""

    name: str
    class_name: str
    path: str | None = None
    line_count: int | None = None
    child_count: int | None = None
    icon: str | None = None
    children: tuple["Node", ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Return the wire (JSON) form, omitting absent optional keys."""
        data: dict[str, Any] = {"name": self.name, "className": self.class_name}
        if self.path is not None:
            data["path"] = self.path
        if self.line_count is not None:
            data["lineCount"] = self.line_count
        if self.child_count is not None:
            data["childCount"] = self.child_count
        if self.icon is not None:
            data["icon"] = self.icon
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


@dataclass(frozen=True)
class Snapshot:
    """One full publish of the project hierarchy."""

    name: str
    containers: tuple[Node, ...] = ()
    timestamp: float = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "timestamp": self.timestamp,
            "containers": [c.to_dict() for c in self.containers],
        }


@dataclass(frozen=True)
class MatchRecord:
    """A search hit: the node and its dotted path from the container root."""

    name: str
    path: str
    class_name: str
    line_count: int | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "path": self.path, "className": self.class_name}
        if self.line_count is not None:
            data["lineCount"] = self.line_count
        return data


@dataclass(frozen=True)
class ConnectionStatus:
    """Point-in-time publisher liveness."""

    connected: bool
    last_update: float
    name: str

    def to_dict(self) -> dict[str, Any]:
        # lastUpdate goes over the wire in epoch milliseconds.
        return {
            "connected": self.connected,
            "lastUpdate": int(self.last_update * 1000),
            "name": self.name,
        }
