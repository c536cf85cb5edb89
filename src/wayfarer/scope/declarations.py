"""
Declared names and local scopes.

``identifiers`` answers "which names does this declaration introduce?".
``collect_scope`` uses it to build the dictionary of names a single node
declares for its own region, without looking into nested scopes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from wayfarer.core.tree import tag_of

logger = logging.getLogger(__name__)


def flatten(items: list, out: list) -> list:
    """Append every non-None leaf of a nested list to ``out``."""
    for item in items:
        if isinstance(item, list):
            flatten(item, out)
        elif item is not None:
            out.append(item)
    return out


def _collect(nodes) -> list[str]:
    out = []
    for node in nodes:
        names = identifiers(node)
        if isinstance(names, list):
            flatten(names, out)
        elif names:
            out.append(names)
    return out


def identifiers(node) -> str | list[str] | None:
    """
    Return the name(s) a declaration introduces.

    Single-name forms (identifiers, declarators, function and class
    declarations, import specifiers) return a string, or None when
    anonymous. Forms that may bind several names return a list.
    """
    if node is None:
        return None

    tag = tag_of(node)
    if tag in ("ExportNamedDeclaration", "ExportDefaultDeclaration"):
        declaration = node.get("declaration")
        if declaration is None:
            return []
        node = declaration
        tag = tag_of(node)

    if tag == "Identifier":
        return node["name"]
    if tag == "VariableDeclaration":
        return _collect(node["declarations"])
    if tag == "ImportDeclaration":
        return _collect(node["specifiers"])
    if tag in ("ImportSpecifier", "ImportDefaultSpecifier", "ImportNamespaceSpecifier"):
        return identifiers(node["local"])
    if tag in ("VariableDeclarator", "FunctionDeclaration", "FunctionExpression",
               "ClassDeclaration", "ClassExpression"):
        return identifiers(node.get("id"))
    if tag == "ObjectPattern":
        # The alias ({ foo: bar } binds bar), or the spread target
        return _collect(
            prop.get("value") if tag_of(prop) == "Property" else prop
            for prop in node["properties"]
        )
    if tag == "ArrayPattern":
        return _collect(node["elements"])
    if tag == "AssignmentPattern":
        return identifiers(node["left"])
    if tag == "RestElement":
        return identifiers(node["argument"])

    logger.warning(f"Could not find identifier for {tag!r}")
    return None


def binding_identifiers(pattern) -> list[dict]:
    """Return the Identifier nodes a parameter or pattern binds."""
    tag = tag_of(pattern)
    if tag == "Identifier":
        return [pattern]
    if tag == "AssignmentPattern":
        return binding_identifiers(pattern["left"])
    if tag == "RestElement":
        return binding_identifiers(pattern["argument"])
    if tag == "ArrayPattern":
        return [ident for item in pattern["elements"] if item for ident in binding_identifiers(item)]
    if tag == "ObjectPattern":
        out = []
        for prop in pattern["properties"]:
            target = prop.get("value") if tag_of(prop) == "Property" else prop
            out.extend(binding_identifiers(target))
        return out
    return []


@dataclass
class ScopeRules:
    """
    Which tags open a scope, and of what kind.

    Defaults cover ESTree. Override the tuples to adapt the resolver to a
    dialect (e.g. add "TSModuleBlock" to ``block_tags``).
    """

    DEFAULT_PROGRAM_TAGS: ClassVar[tuple[str, ...]] = ("Program",)
    DEFAULT_BLOCK_TAGS: ClassVar[tuple[str, ...]] = ("BlockStatement", "StaticBlock", "SwitchCase")
    DEFAULT_FUNCTION_TAGS: ClassVar[tuple[str, ...]] = (
        "FunctionDeclaration",
        "FunctionExpression",
        "ArrowFunctionExpression",
    )
    DEFAULT_LOOP_TAGS: ClassVar[tuple[str, ...]] = ("ForStatement", "ForInStatement", "ForOfStatement")
    DEFAULT_CATCH_TAGS: ClassVar[tuple[str, ...]] = ("CatchClause",)

    program_tags: tuple[str, ...] = DEFAULT_PROGRAM_TAGS
    block_tags: tuple[str, ...] = DEFAULT_BLOCK_TAGS
    function_tags: tuple[str, ...] = DEFAULT_FUNCTION_TAGS
    loop_tags: tuple[str, ...] = DEFAULT_LOOP_TAGS
    catch_tags: tuple[str, ...] = DEFAULT_CATCH_TAGS


def _declare_statement(statement, scoped: dict):
    """Bind the names a statement directly declares into ``scoped``."""
    tag = tag_of(statement)
    if tag in ("ExportNamedDeclaration", "ExportDefaultDeclaration"):
        statement = statement.get("declaration")
        tag = tag_of(statement)

    if tag == "VariableDeclaration":
        for declarator in statement["declarations"]:
            for name in flatten([identifiers(declarator)], []):
                scoped.setdefault(name, declarator)
    elif tag in ("FunctionDeclaration", "ClassDeclaration"):
        name = identifiers(statement)
        if name:
            scoped.setdefault(name, statement)
    elif tag == "ImportDeclaration":
        for specifier in statement["specifiers"]:
            name = identifiers(specifier)
            if name:
                scoped.setdefault(name, specifier)


def collect_scope(node, rules: ScopeRules | None = None) -> tuple[dict[str, dict], bool]:
    """
    Collect the names a node declares for its own region.

    Returns:
        (scoped, terminal) where ``scoped`` maps name -> declaring node and
        ``terminal`` is True for the outermost (program) scope
    """
    rules = rules or ScopeRules()
    tag = tag_of(node)
    scoped: dict[str, dict] = {}

    if tag in rules.program_tags or tag in rules.block_tags:
        body = node.get("consequent") if tag == "SwitchCase" else node.get("body")
        for statement in body or ():
            _declare_statement(statement, scoped)
    elif tag in rules.function_tags:
        name = identifiers(node.get("id"))
        if name:
            scoped[name] = node
        for param in node.get("params") or ():
            for ident in binding_identifiers(param):
                scoped.setdefault(ident["name"], ident)
    elif tag in rules.loop_tags:
        head = node.get("init") if tag == "ForStatement" else node.get("left")
        if tag_of(head) == "VariableDeclaration":
            _declare_statement(head, scoped)
    elif tag in rules.catch_tags:
        for ident in binding_identifiers(node.get("param")):
            scoped[ident["name"]] = ident

    return scoped, tag in rules.program_tags
