"""
Shared fixtures and ESTree node builders for the wayfarer test suite.

Trees are assembled by hand in the shape a JavaScript parser would emit
(field order included), so the suite needs no parser.
"""

import pytest

from wayfarer import PathStore


# ---------------------------------------------------------------------------
# Node builders
# ---------------------------------------------------------------------------

def ident(name):
    return {"type": "Identifier", "name": name}


def lit(value):
    return {"type": "Literal", "value": value}


def program(*body):
    return {"type": "Program", "sourceType": "module", "body": list(body)}


def block(*body):
    return {"type": "BlockStatement", "body": list(body)}


def declarator(target, init=None):
    if isinstance(target, str):
        target = ident(target)
    return {"type": "VariableDeclarator", "id": target, "init": init}


def var(kind, *declarators):
    return {"type": "VariableDeclaration", "declarations": list(declarators), "kind": kind}


def function(name, params, *body):
    return {
        "type": "FunctionDeclaration",
        "id": ident(name) if name else None,
        "params": [ident(p) if isinstance(p, str) else p for p in params],
        "body": block(*body),
        "generator": False,
        "async": False,
    }


def arrow(params, body):
    return {
        "type": "ArrowFunctionExpression",
        "id": None,
        "params": [ident(p) if isinstance(p, str) else p for p in params],
        "body": body,
        "expression": True,
        "async": False,
    }


def export(declaration):
    return {"type": "ExportNamedDeclaration", "declaration": declaration, "specifiers": [], "source": None}


def export_default(declaration):
    return {"type": "ExportDefaultDeclaration", "declaration": declaration}


def member(obj, prop):
    return {"type": "MemberExpression", "object": ident(obj), "property": ident(prop), "computed": False}


def binary(operator, left, right):
    return {"type": "BinaryExpression", "left": left, "operator": operator, "right": right}


def logical(operator, left, right):
    return {"type": "LogicalExpression", "left": left, "operator": operator, "right": right}


def call(callee, *args):
    return {"type": "CallExpression", "callee": callee, "arguments": list(args)}


def stmt(expression):
    return {"type": "ExpressionStatement", "expression": expression}


def assign(name, value):
    return {"type": "AssignmentExpression", "operator": "=", "left": ident(name), "right": value}


def if_(test, consequent, alternate=None):
    return {"type": "IfStatement", "test": test, "consequent": consequent, "alternate": alternate}


def ret(argument):
    return {"type": "ReturnStatement", "argument": argument}


def conditional(test, consequent, alternate):
    return {"type": "ConditionalExpression", "test": test, "consequent": consequent, "alternate": alternate}


def prop(name, value=None):
    return {
        "type": "Property",
        "key": ident(name),
        "value": value if value is not None else ident(name),
        "kind": "init",
        "computed": False,
        "method": False,
        "shorthand": value is None,
    }


def object_pattern(*properties):
    return {"type": "ObjectPattern", "properties": list(properties)}


def object_expr(*properties):
    return {"type": "ObjectExpression", "properties": list(properties)}


def import_(source, *specifiers):
    return {"type": "ImportDeclaration", "specifiers": list(specifiers), "source": lit(source)}


def import_named(imported, local=None):
    return {"type": "ImportSpecifier", "local": ident(local or imported), "imported": ident(imported)}


def import_default(local):
    return {"type": "ImportDefaultSpecifier", "local": ident(local)}


def import_namespace(local):
    return {"type": "ImportNamespaceSpecifier", "local": ident(local)}


def find_identifier(root, name, paths):
    """Walk ``root`` and return the last Identifier called ``name``."""
    from wayfarer import walk

    found = {}

    def grab(node, state):
        if node["name"] == name:
            state["node"] = node

    walk(root, {"Identifier": grab}, found, paths=paths)
    return found.get("node")


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def paths():
    """A private PathStore so tests never share metadata."""
    return PathStore()


@pytest.fixture
def api_program():
    """
    const API = 'https://...';
    function Hello(props) {
        var foobar = props.name || (API + '/hello');
    }
    """
    return program(
        var("const", declarator("API", lit("https://..."))),
        function(
            "Hello", ["props"],
            var("var", declarator(
                "foobar",
                logical("||", member("props", "name"), binary("+", ident("API"), lit("/hello"))),
            )),
        ),
    )


@pytest.fixture
def nested_program():
    """
    const API = 'https://...';
    function Hello(props) {
        const greet = str => 'Hello, ' + str;
        function say(str) {
            console.log('inner', str);
        }
        var foobar = props.name || (API + '/hello');
    }
    """
    return program(
        var("const", declarator("API", lit("https://..."))),
        function(
            "Hello", ["props"],
            var("const", declarator("greet", arrow(["str"], binary("+", lit("Hello, "), ident("str"))))),
            function("say", ["str"], stmt(call(member("console", "log"), lit("inner"), ident("str")))),
            var("var", declarator(
                "foobar",
                logical("||", member("props", "name"), binary("+", ident("API"), lit("/hello"))),
            )),
        ),
    )


@pytest.fixture
def sibling_program():
    """
    function Hello(props) {
        let { foo, bar } = greet();
        var hello = 'world';
        function init() {
            console.log({ hello });
        }
    }
    """
    return program(
        function(
            "Hello", ["props"],
            var("let", declarator(object_pattern(prop("foo"), prop("bar")), call(ident("greet")))),
            var("var", declarator("hello", lit("world"))),
            function("init", [], stmt(call(member("console", "log"), object_expr(prop("hello"))))),
        ),
    )


@pytest.fixture
def humanize_program():
    """
    let name = 'lukeed';
    if (HUMANIZE) name = 'Luke';
    """
    return program(
        var("let", declarator("name", lit("lukeed"))),
        if_(ident("HUMANIZE"), stmt(assign("name", lit("Luke")))),
    )


@pytest.fixture
def greeting_program():
    """
    const INFORMAL = true;
    export function testing(props) {
        let name = props.name || props.fullname;
        return INFORMAL ? whaddup(name) : greet(name);
    }
    """
    return program(
        var("const", declarator("INFORMAL", lit(True))),
        export(function(
            "testing", ["props"],
            var("let", declarator("name", logical("||", member("props", "name"), member("props", "fullname")))),
            ret(conditional(
                ident("INFORMAL"),
                call(ident("whaddup"), ident("name")),
                call(ident("greet"), ident("name")),
            )),
        )),
    )


@pytest.fixture
def disabled_program():
    """
    export function hello(props) {
        if (props.disabled) {
            var name = props.name || 'world';
            var verb = props.informal ? 'Yo' : 'Hello';
            return verb + ' , ' + name;
        }
    }
    """
    return program(
        export(function(
            "hello", ["props"],
            if_(member("props", "disabled"), block(
                var("var", declarator("name", logical("||", member("props", "name"), lit("world")))),
                var("var", declarator("verb", conditional(member("props", "informal"), lit("Yo"), lit("Hello")))),
                ret(binary("+", binary("+", ident("verb"), lit(" , ")), ident("name"))),
            )),
        )),
    )
