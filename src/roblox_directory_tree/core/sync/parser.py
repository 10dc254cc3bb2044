"""Validate published JSON into immutable snapshot models."""

import json
from typing import Any

from roblox_directory_tree.config import MAX_TREE_DEPTH
from roblox_directory_tree.models.node import Node, Snapshot


class SnapshotParseError(ValueError):
    """Published payload does not describe a valid snapshot."""


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _check_text(value: str, key: str, where: str) -> str:
    # Lone surrogates survive json.loads but cannot be written back out as UTF-8.
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        msg = f"{where}: '{key}' is not valid UTF-8 text"
        raise SnapshotParseError(msg) from e
    return value


def _optional_str(raw: dict[str, Any], key: str, where: str) -> str | None:
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        msg = f"{where}: '{key}' must be a string"
        raise SnapshotParseError(msg)
    return _check_text(value, key, where)


def _optional_count(raw: dict[str, Any], key: str, where: str) -> int | None:
    value = raw.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        msg = f"{where}: '{key}' must be a non-negative integer, got {value!r}"
        raise SnapshotParseError(msg)
    return value


def _parse_node(raw: Any, where: str, depth: int) -> Node:
    if depth > MAX_TREE_DEPTH:
        msg = f"{where}: tree is nested deeper than {MAX_TREE_DEPTH} levels"
        raise SnapshotParseError(msg)
    if not isinstance(raw, dict):
        msg = f"{where}: node must be an object"
        raise SnapshotParseError(msg)

    name = raw.get("name")
    if not isinstance(name, str) or not name:
        msg = f"{where}: 'name' must be a non-empty string"
        raise SnapshotParseError(msg)
    class_name = raw.get("className")
    if not isinstance(class_name, str):
        msg = f"{where}: 'className' must be a string"
        raise SnapshotParseError(msg)

    raw_children = raw.get("children")
    if raw_children is None:
        raw_children = []
    elif not isinstance(raw_children, list):
        msg = f"{where}: 'children' must be an array"
        raise SnapshotParseError(msg)

    return Node(
        name=_check_text(name, "name", where),
        class_name=_check_text(class_name, "className", where),
        path=_optional_str(raw, "path", where),
        line_count=_optional_count(raw, "lineCount", where),
        child_count=_optional_count(raw, "childCount", where),
        icon=_optional_str(raw, "icon", where),
        children=tuple(
            _parse_node(child, f"{where}.children[{i}]", depth + 1)
            for i, child in enumerate(raw_children)
        ),
    )


def snapshot_from_dict(data: Any) -> Snapshot:
    """Convert decoded JSON into a Snapshot, validating its shape.

    Unknown keys are ignored.

    Raises:
        SnapshotParseError: If a required field is missing or mistyped, or
            the tree is nested deeper than ``MAX_TREE_DEPTH``.
    """
    if not isinstance(data, dict):
        msg = "snapshot must be a JSON object"
        raise SnapshotParseError(msg)

    name = data.get("name")
    if not isinstance(name, str):
        msg = "snapshot 'name' must be a string"
        raise SnapshotParseError(msg)

    timestamp = data.get("timestamp", 0)
    if timestamp is None:
        timestamp = 0
    elif not _is_number(timestamp):
        msg = f"snapshot 'timestamp' must be a number, got {timestamp!r}"
        raise SnapshotParseError(msg)

    containers = data.get("containers")
    if not isinstance(containers, list):
        msg = "snapshot 'containers' must be an array"
        raise SnapshotParseError(msg)

    return Snapshot(
        name=_check_text(name, "name", "snapshot"),
        timestamp=timestamp,
        containers=tuple(
            _parse_node(raw, f"containers[{i}]", 1) for i, raw in enumerate(containers)
        ),
    )


def parse_snapshot(raw: bytes | str) -> Snapshot:
    """Decode a published payload into a Snapshot.

    Args:
        raw: Request body as received from the publisher.

    Raises:
        SnapshotParseError: If the body is not JSON or not a valid snapshot.
    """
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as e:
        msg = f"Invalid JSON: {e}"
        raise SnapshotParseError(msg) from e
    return snapshot_from_dict(data)
