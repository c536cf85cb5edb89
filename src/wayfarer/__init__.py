"""
Wayfarer: a tag-dispatched tree walker with in-place mutation and a
lexical binding resolver for ESTree-style syntax trees.
"""

from wayfarer.core import (
    ANY,
    CONTINUE,
    REMOVE,
    SKIP,
    NodePath,
    PathStore,
    Replace,
    Walker,
    WalkerConfig,
    ancestors,
    get_root,
    iter_tree,
    path_of,
    walk,
)
from wayfarer.exceptions import MissingPathError, OutcomeError, WayfarerError
from wayfarer.scope import ScopeRules, identifiers, lookup

__version__ = "0.1.0"

__all__ = [
    "ANY",
    "CONTINUE",
    "REMOVE",
    "SKIP",
    "NodePath",
    "PathStore",
    "Replace",
    "Walker",
    "WalkerConfig",
    "ancestors",
    "get_root",
    "iter_tree",
    "path_of",
    "walk",
    "lookup",
    "identifiers",
    "ScopeRules",
    "WayfarerError",
    "OutcomeError",
    "MissingPathError",
]
