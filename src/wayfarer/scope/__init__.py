"""
Lexical scope resolution on top of walked trees.
"""

from wayfarer.scope.declarations import (
    ScopeRules,
    flatten,
    identifiers,
    binding_identifiers,
    collect_scope,
)
from wayfarer.scope.resolver import lookup

__all__ = [
    "ScopeRules",
    "flatten",
    "identifiers",
    "binding_identifiers",
    "collect_scope",
    "lookup",
]
