"""
Path metadata kept beside the tree.

Every node the walker visits gets one ``NodePath`` record. Records live in
a ``PathStore`` keyed by node identity instead of on the nodes, so a walked
tree still serializes exactly as it was parsed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator


@dataclass(eq=False)
class NodePath:
    """
    Side record for a single node.

    ``parent`` is fixed when the record is created. The scope fields are
    filled in lazily by the resolver and only ever grow:
    ``scoped`` holds the node's own declarations, ``bindings`` everything
    visible inside it (closest scope wins), and ``scanned`` turns true once
    ``bindings`` reaches all the way to the program scope.
    """
    parent: Any = None
    scoped: dict[str, Any] | None = None
    bindings: dict[str, Any] | None = None
    scanned: bool = False

    def bind(self, name: str, declaration) -> None:
        """Record a binding unless a closer scope already claimed the name."""
        if self.bindings is None:
            self.bindings = {}
        self.bindings.setdefault(name, declaration)


@dataclass
class PathStore:
    """
    Identity-keyed table of NodePath records.

    The store holds a reference to each node next to its record so that
    ``id()`` values cannot be recycled while the record is alive. Call
    ``forget`` or ``clear`` once a tree is no longer needed.
    """
    _records: dict[int, tuple[Any, NodePath]] = field(default_factory=dict)

    def get(self, node) -> NodePath | None:
        entry = self._records.get(id(node))
        if entry is None or entry[0] is not node:
            return None
        return entry[1]

    def attach(self, node, parent=None) -> NodePath:
        """Return the node's record, creating it with ``parent`` if absent."""
        path = self.get(node)
        if path is None:
            path = NodePath(parent=parent)
            self._records[id(node)] = (node, path)
        return path

    def adopt(self, node, path: NodePath) -> None:
        """Hand an existing record over to a replacement node."""
        self._records[id(node)] = (node, path)

    def forget(self, root) -> int:
        """Drop the records of every node reachable from ``root``."""
        from wayfarer.core.tree import iter_tree

        dropped = 0
        for node in iter_tree(root):
            if self.get(node) is not None:
                del self._records[id(node)]
                dropped += 1
        return dropped

    def clear(self):
        self._records.clear()

    def __contains__(self, node) -> bool:
        return self.get(node) is not None

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[tuple[Any, NodePath]]:
        return iter(self._records.values())


# Process-wide store used when callers don't bring their own
default_store = PathStore()
