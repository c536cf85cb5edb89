"""
Binding lookup over walked trees.

``lookup`` climbs from a node to the program root through the parent links
the walker recorded, merging each enclosing scope's declarations into a
single name -> declaring node dictionary. The closest declaration of a name
wins.

Every node on the way caches what it learned in its path record:
``scoped`` (its own declarations, computed once), ``bindings`` (all names
visible inside it, its own declarations included) and ``scanned`` (``bindings`` is complete). A later
lookup that reaches a scanned ancestor stops there and reuses its bindings
instead of climbing and rescanning.
"""

from __future__ import annotations

import logging

from wayfarer.core.path import NodePath, PathStore, default_store
from wayfarer.core.tree import tag_of
from wayfarer.exceptions import MissingPathError
from wayfarer.scope.declarations import ScopeRules, collect_scope

logger = logging.getLogger(__name__)


def _scope_of(node, path: NodePath, rules: ScopeRules) -> bool:
    """Fill ``path.scoped`` on first visit; return True for the program scope."""
    if path.scoped is None:
        path.scoped, terminal = collect_scope(node, rules)
        if path.bindings is None:
            path.bindings = {}
        if path.scoped:
            logger.debug(f"Scope {tag_of(node)} declares {list(path.scoped)}")
        return terminal
    return tag_of(node) in rules.program_tags


def lookup(
    node,
    target: str | None = None,
    *,
    paths: PathStore | None = None,
    rules: ScopeRules | None = None,
) -> dict[str, dict]:
    """
    Return every binding visible at ``node``, innermost scope first.

    Args:
        node: A node previously visited by ``walk`` (with the same store)
        target: Stop climbing as soon as this name has been bound
        paths: Store the tree was walked with (defaults to the shared store)
        rules: Which tags open scopes

    Returns:
        Mapping of identifier name -> declaring node. This is the node's
        own cached ``bindings`` dict, so it keeps growing with later lookups.

    Raises:
        MissingPathError: If ``node`` was never walked
    """
    paths = paths if paths is not None else default_store
    rules = rules or ScopeRules()

    path = paths.get(node)
    if path is None:
        raise MissingPathError(node, tag_of(node))

    if path.bindings is None:
        path.bindings = {}
    output = path.bindings
    if path.scanned:
        logger.debug(f"Lookup cache hit on {tag_of(node)}")
        return output

    # A scope node sees its own declarations
    terminal = _scope_of(node, path, rules)
    for name, declaration in path.scoped.items():
        path.bind(name, declaration)
    if terminal:
        path.scanned = True
        return output

    tracking = [path]
    current = path.parent

    while current is not None:
        if target is not None and target in output:
            break

        ancestor = paths.get(current)
        if ancestor is None:
            raise MissingPathError(current, tag_of(current))

        terminal = _scope_of(current, ancestor, rules)
        if not ancestor.scanned:
            tracking.append(ancestor)

        for name, declaration in ancestor.scoped.items():
            for record in tracking:
                record.bind(name, declaration)

        if ancestor.scanned:
            # Everything above is already merged into this ancestor
            logger.debug(f"Reusing resolved bindings of {tag_of(current)}")
            for record in tracking:
                for name, declaration in ancestor.bindings.items():
                    record.bind(name, declaration)
                record.scanned = True
            break

        if terminal:
            for record in tracking:
                record.scanned = True
            break

        current = ancestor.parent

    return output
