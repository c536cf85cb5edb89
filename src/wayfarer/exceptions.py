"""
Exception types raised by the walker and the scope resolver.
"""


class WayfarerError(Exception):
    """Base class for all wayfarer errors."""


class OutcomeError(WayfarerError, TypeError):
    """A visitor handler returned something that is not a mutation outcome."""

    def __init__(self, tag: str, phase: str, value):
        self.tag = tag
        self.phase = phase
        self.value = value
        super().__init__(
            f"{phase} handler for {tag!r} returned {value!r}; expected None, "
            f"CONTINUE, SKIP, REMOVE, Replace(node) or a tagged node"
        )


class MissingPathError(WayfarerError, LookupError):
    """A node was handed to ``lookup`` before the walker ever visited it."""

    def __init__(self, node, tag: str | None = None):
        self.node = node
        label = repr(tag) if tag else type(node).__name__
        super().__init__(
            f"No path metadata for {label} node; walk() the tree containing it "
            f"(with the same PathStore) before calling lookup()"
        )
