"""
Depth-first, tag-dispatched tree walker.

The walker visits every tagged node reachable from a root, calling the
visitor's "enter" handler before the node's children and its "exit"
handler after them. Handler return values (see ``wayfarer.core.outcome``)
are applied in place, so the tree the caller passed in is the tree that
comes back mutated.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from wayfarer.core.outcome import Signal, interpret
from wayfarer.core.path import NodePath, PathStore, default_store
from wayfarer.core.tree import TAG_KEY

logger = logging.getLogger(__name__)

ANY = "*"

# Returned by _visit when a node asked to be excised
_REMOVED = object()


@dataclass(frozen=True)
class Handler:
    """The enter/exit pair registered for one tag."""
    enter: Callable | None = None
    exit: Callable | None = None

    @classmethod
    def coerce(cls, entry) -> "Handler":
        """
        Normalize a visitor entry.

        Accepts a bare callable (used as "enter"), a dict with optional
        "enter"/"exit" keys, or any object exposing ``enter``/``exit``.
        """
        if isinstance(entry, Handler):
            return entry
        if isinstance(entry, dict):
            return cls(enter=entry.get("enter"), exit=entry.get("exit"))
        if hasattr(entry, "enter") or hasattr(entry, "exit"):
            return cls(enter=getattr(entry, "enter", None), exit=getattr(entry, "exit", None))
        if callable(entry):
            return cls(enter=entry)
        raise TypeError(f"Visitor entries must be callables or enter/exit pairs, got {entry!r}")


@dataclass
class WalkerConfig:
    """Configuration for a Walker."""
    # Field holding each node's tag
    tag_key: str = TAG_KEY
    # Visitor key whose handler runs for every tag
    wildcard: str = ANY


class Walker:
    """
    Walks node trees with a fixed visitor.

    Path metadata for every visited node is recorded in ``paths`` so the
    scope resolver can later climb from any node back to the root.
    """

    def __init__(
        self,
        visitor: dict | None = None,
        config: WalkerConfig | None = None,
        paths: PathStore | None = None,
    ):
        """
        Args:
            visitor: Mapping of tag -> handler or {"enter", "exit"} pair
            config: Tag/wildcard keys (defaults to ESTree's "type")
            paths: Store for path metadata (defaults to the shared store)
        """
        self.visitor = visitor or {}
        self.config = config or WalkerConfig()
        self.paths = paths if paths is not None else default_store
        self._handlers: dict[str, tuple[Handler, ...]] = {}

    def walk(self, node, state: Any = None, parent=None):
        """
        Walk ``node`` and return it, possibly replaced.

        Returns None if the root itself was removed.
        """
        if state is None:
            state = {}
        result = self._visit(node, state, parent)
        return None if result is _REMOVED else result

    def handlers_for(self, tag: str) -> tuple[Handler, ...]:
        """Concrete handler first, then the wildcard, for a tag."""
        handlers = self._handlers.get(tag)
        if handlers is None:
            handlers = tuple(
                Handler.coerce(self.visitor[key])
                for key in (tag, self.config.wildcard)
                if key in self.visitor
            )
            self._handlers[tag] = handlers
        return handlers

    def _visit(self, node, state, parent):
        if node is None:
            return None
        if isinstance(node, list):
            self._visit_list(node, state, parent)
            return node

        tag_key = self.config.tag_key
        if not isinstance(node, dict) or not isinstance(node.get(tag_key), str):
            return node

        tag = node[tag_key]
        # Resolved once: exit stays bound to the original tag after a Replace
        handlers = self.handlers_for(tag)
        path = self.paths.attach(node, parent)

        skip = False
        for handler in handlers:
            if handler.enter is None:
                continue
            outcome = interpret(handler.enter(node, state), tag, "enter", tag_key)
            if outcome.signal is Signal.SKIP:
                # Remaining enter handlers still see the node itself
                skip = True
            elif outcome.signal is Signal.REMOVE:
                logger.debug(f"Removed {tag} on enter")
                return _REMOVED
            elif outcome.signal is Signal.REPLACE:
                node = self._replace(node, outcome.node, path)

        if skip:
            return node

        self._visit_fields(node, state)

        for handler in handlers:
            if handler.exit is None:
                continue
            outcome = interpret(handler.exit(node, state), tag, "exit", tag_key)
            if outcome.signal is Signal.REMOVE:
                logger.debug(f"Removed {tag} on exit")
                return _REMOVED
            if outcome.signal is Signal.REPLACE:
                node = self._replace(node, outcome.node, path)

        return node

    def _visit_fields(self, node, state):
        # Snapshot keys: removed children delete their field
        for key in list(node):
            if key not in node:
                continue
            value = node[key]
            if not isinstance(value, (dict, list)):
                continue
            result = self._visit(value, state, node)
            if result is _REMOVED:
                del node[key]
            elif result is not value:
                node[key] = result

    def _visit_list(self, items: list, state, parent):
        i = 0
        while i < len(items):
            item = items[i]
            result = self._visit(item, state, parent)
            if result is _REMOVED:
                # The next element shifts into slot i
                del items[i]
                continue
            if result is not item:
                items[i] = result
            i += 1

    def _replace(self, old, new, path: NodePath):
        tag_key = self.config.tag_key
        logger.debug(f"Replaced {old[tag_key]} with {new[tag_key]}")
        self.paths.adopt(new, path)
        return new


def walk(
    node,
    visitor: dict | None = None,
    state: Any = None,
    parent=None,
    *,
    paths: PathStore | None = None,
    config: WalkerConfig | None = None,
):
    """
    Walk a tree with a visitor and return the (possibly replaced) root.

    Args:
        node: Root node, list of nodes, or any opaque value
        visitor: Mapping of tag -> handler or {"enter", "exit"} pair;
            the ANY key matches every tag in addition to its own handler
        state: Value passed to every handler call (a fresh dict if omitted)
        parent: Parent to record for ``node`` when walking a detached subtree
        paths: Store for path metadata (defaults to the shared store)
        config: Tag and wildcard keys

    Returns:
        The root after mutations, or None if it was removed
    """
    return Walker(visitor, config=config, paths=paths).walk(node, state, parent)
