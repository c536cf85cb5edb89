"""
Node model and tree navigation helpers.

Nodes are plain dictionaries carrying a string tag (ESTree's ``type``).
Nothing else about their shape is assumed: child nodes are discovered by
looking at field values, which keeps every helper here grammar-agnostic.
"""

from __future__ import annotations

from typing import Any, Iterator

from wayfarer.core.path import NodePath, PathStore, default_store

TAG_KEY = "type"


def is_node(value, tag_key: str = TAG_KEY) -> bool:
    """Check whether a value is a tagged node."""
    return isinstance(value, dict) and isinstance(value.get(tag_key), str)


def tag_of(node, tag_key: str = TAG_KEY) -> str | None:
    """Return the node's tag, or None for untagged values."""
    if is_node(node, tag_key):
        return node[tag_key]
    return None


def child_fields(node) -> Iterator[tuple[str, Any]]:
    """Yield (key, value) for fields that may hold nodes (dicts or lists)."""
    for key, value in node.items():
        if isinstance(value, (dict, list)):
            yield key, value


def children(node, tag_key: str = TAG_KEY) -> Iterator[dict]:
    """Yield the tagged nodes directly below a node, in field order."""
    for _, value in child_fields(node):
        if isinstance(value, list):
            for item in value:
                if is_node(item, tag_key):
                    yield item
        elif is_node(value, tag_key):
            yield value


def iter_tree(node, order: str = "pre", tag_key: str = TAG_KEY) -> Iterator[dict]:
    """
    Iterate tagged nodes without touching path metadata.

    Args:
        node: Root node to start from
        order: "pre" for pre-order, "post" for post-order, "bfs" for breadth-first
    """
    if order == "pre":
        yield node
        for child in children(node, tag_key):
            yield from iter_tree(child, order, tag_key)
    elif order == "post":
        for child in children(node, tag_key):
            yield from iter_tree(child, order, tag_key)
        yield node
    elif order == "bfs":
        queue = [node]
        while queue:
            current = queue.pop(0)
            yield current
            queue.extend(children(current, tag_key))
    else:
        raise ValueError(f"Unknown order: {order}")


def path_of(node, paths: PathStore | None = None) -> NodePath | None:
    """Return the path metadata recorded for a node, if it was walked."""
    return (paths if paths is not None else default_store).get(node)


def ancestors(node, max_depth: int | None = None, paths: PathStore | None = None) -> Iterator:
    """Yield ancestors from parent up to root (or up to max_depth levels)."""
    if paths is None:
        paths = default_store
    path = paths.get(node)
    current = path.parent if path else None
    depth = 0
    while current is not None:
        if max_depth is not None and depth >= max_depth:
            break
        yield current
        path = paths.get(current)
        current = path.parent if path else None
        depth += 1


def get_root(node, paths: PathStore | None = None) -> Any:
    """Walk up recorded parents to the root of the tree."""
    root = node
    for root in ancestors(node, paths=paths):
        pass
    return root
