"""Substring search over node names and dotted paths."""

from roblox_directory_tree.models.node import MatchRecord, Node, Snapshot


def _search_node(node: Node, parent_path: str, needle: str, results: list[MatchRecord]) -> None:
    full_path = f"{parent_path}.{node.name}" if parent_path else node.name

    if needle in node.name.lower() or needle in full_path.lower():
        results.append(
            MatchRecord(
                name=node.name,
                path=full_path,
                class_name=node.class_name,
                line_count=node.line_count,
            )
        )

    # A match does not stop the descent.
    for child in node.children:
        _search_node(child, full_path, needle, results)


def search_tree(snapshot: Snapshot, query: str) -> list[MatchRecord]:
    """Find nodes whose name or dotted path contains ``query``.

    Matching is case-insensitive. Results come back in depth-first
    pre-order, containers first to last, with no ranking, deduplication
    or limit.

    Args:
        snapshot: Snapshot to search.
        query: Non-empty search text (callers validate emptiness).

    Returns:
        Match records in traversal order; empty when nothing matches.
    """
    needle = query.lower()
    results: list[MatchRecord] = []
    for container in snapshot.containers:
        _search_node(container, "", needle, results)
    return results
