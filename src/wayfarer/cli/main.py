"""
Main CLI entry point.

Works on ESTree trees stored as JSON (e.g. the output of
``acorn --ecma2022 --module`` or ``meriyah``).
"""

import json
import logging
from collections import Counter

import click

from wayfarer import __version__


def _setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def _load_tree(path: str):
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise click.ClickException(f"{path} is not valid JSON: {exc}") from exc


@click.group()
@click.version_option(version=__version__)
def main():
    """Wayfarer: walk, prune and resolve bindings in ESTree JSON trees."""
    pass


@main.command()
@click.argument("tree", type=click.Path(exists=True, dir_okay=False))
@click.option("--tag", "-t", "tags", multiple=True, help="Only count these node types")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
def count(tree, tags, verbose):
    """Count nodes per type."""
    from wayfarer import ANY, PathStore, walk

    _setup_logging(verbose)
    logger = logging.getLogger(__name__)

    root = _load_tree(tree)
    counts = Counter()

    def tally(node, state):
        state[node["type"]] += 1

    walk(root, {ANY: tally}, counts, paths=PathStore())
    logger.debug(f"Visited {sum(counts.values())} nodes in {tree}")

    for name, n in sorted(counts.items()):
        if not tags or name in tags:
            click.echo(f"{name}\t{n}")


@main.command()
@click.argument("tree", type=click.Path(exists=True, dir_okay=False))
@click.option("--tag", "-t", "tags", multiple=True, required=True, help="Node type to remove")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Output file (default: stdout)")
@click.option("--indent", default=2, type=int, help="JSON indentation")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
def prune(tree, tags, output, indent, verbose):
    """Remove every node of the given types."""
    from wayfarer import ANY, REMOVE, PathStore, walk

    _setup_logging(verbose)
    logger = logging.getLogger(__name__)

    root = _load_tree(tree)
    removed = Counter()

    def cut(node, state):
        if node["type"] in tags:
            state[node["type"]] += 1
            return REMOVE

    result = walk(root, {ANY: cut}, removed, paths=PathStore())
    for name, n in sorted(removed.items()):
        logger.debug(f"Removed {n} {name} node(s)")

    text = json.dumps(result, indent=indent)
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        logger.info(f"Wrote {output}")
    else:
        click.echo(text)


@main.command()
@click.argument("tree", type=click.Path(exists=True, dir_okay=False))
@click.argument("name")
@click.option("--target", help="Stop resolving once this name is bound")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
def bindings(tree, name, target, verbose):
    """List the bindings visible at the first identifier called NAME."""
    from wayfarer import SKIP, PathStore, lookup, walk

    _setup_logging(verbose)

    root = _load_tree(tree)
    paths = PathStore()
    found = []

    def find(node, state):
        if not state and node["name"] == name:
            state.append(node)
            return SKIP

    walk(root, {"Identifier": find}, found, paths=paths)
    if not found:
        raise click.ClickException(f"No identifier named {name!r} in {tree}")

    for binding, declaration in lookup(found[0], target, paths=paths).items():
        click.echo(f"{binding}\t{declaration['type']}")


if __name__ == "__main__":
    main()
