"""
Core primitives: node model, path metadata, mutation outcomes and the walker.
"""

from wayfarer.core.tree import (
    TAG_KEY,
    is_node,
    tag_of,
    children,
    iter_tree,
    path_of,
    ancestors,
    get_root,
)
from wayfarer.core.path import (
    NodePath,
    PathStore,
    default_store,
)
from wayfarer.core.outcome import (
    Signal,
    Outcome,
    Replace,
    CONTINUE,
    SKIP,
    REMOVE,
    interpret,
)
from wayfarer.core.walker import (
    ANY,
    Handler,
    Walker,
    WalkerConfig,
    walk,
)

__all__ = [
    # tree
    "TAG_KEY",
    "is_node",
    "tag_of",
    "children",
    "iter_tree",
    "path_of",
    "ancestors",
    "get_root",
    # path
    "NodePath",
    "PathStore",
    "default_store",
    # outcome
    "Signal",
    "Outcome",
    "Replace",
    "CONTINUE",
    "SKIP",
    "REMOVE",
    "interpret",
    # walker
    "ANY",
    "Handler",
    "Walker",
    "WalkerConfig",
    "walk",
]
