"""Render a snapshot as an ASCII box-drawing tree."""

import io

from roblox_directory_tree.models.node import Node, Snapshot

BANNER_RULE = "=" * 37
NO_DATA_LINE = "(No data - connect Roblox Studio first)"


def _node_line(node: Node) -> str:
    line = f"{node.name} [{node.class_name}]"
    if node.line_count:
        line += f" ({node.line_count} lines)"
    if node.child_count:
        line += f" ({node.child_count} children)"
    return line


def _write_node(out: io.StringIO, node: Node, prefix: str, is_last: bool) -> None:
    # Root containers are written with an empty prefix and no connector.
    connector = ("└── " if is_last else "├── ") if prefix else ""
    out.write(f"{prefix}{connector}{_node_line(node)}\n")

    child_prefix = prefix + ("    " if is_last else "│   ")
    last_index = len(node.children) - 1
    for i, child in enumerate(node.children):
        _write_node(out, child, child_prefix, i == last_index)


def render_text(snapshot: Snapshot) -> str:
    """Render the whole snapshot as text for humans and assistants.

    The output depends only on the snapshot, so equal snapshots always
    render byte-identically.

    Args:
        snapshot: The snapshot to render.

    Returns:
        A banner naming the game followed by one subtree per container,
        each followed by a blank line; or a no-data line when the snapshot
        has no containers.
    """
    out = io.StringIO()
    out.write(f"{BANNER_RULE}\n")
    out.write("  ROBLOX PROJECT STRUCTURE\n")
    out.write(f"  Game: {snapshot.name or 'Unknown'}\n")
    out.write(f"{BANNER_RULE}\n\n")

    if not snapshot.containers:
        out.write(f"{NO_DATA_LINE}\n")
        return out.getvalue()

    last_index = len(snapshot.containers) - 1
    for i, container in enumerate(snapshot.containers):
        _write_node(out, container, "", i == last_index)
        out.write("\n")

    return out.getvalue()
