"""
Mutation outcomes returned by visitor handlers.

A handler steers the traversal through its return value:
- None / CONTINUE: carry on
- SKIP: keep the node but don't descend into it
- REMOVE: excise the node from its field or list
- Replace(node), or a bare tagged node: substitute and carry on with it

Anything else is rejected instead of being guessed at.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from wayfarer.core.tree import TAG_KEY, is_node
from wayfarer.exceptions import OutcomeError


class Signal(Enum):
    """Control signals a handler may return."""
    CONTINUE = auto()
    SKIP = auto()
    REMOVE = auto()
    REPLACE = auto()


CONTINUE = Signal.CONTINUE
SKIP = Signal.SKIP
REMOVE = Signal.REMOVE


@dataclass(frozen=True)
class Replace:
    """Explicit form of a replacement outcome."""
    node: Any


@dataclass(frozen=True)
class Outcome:
    """A handler result after interpretation."""
    signal: Signal
    node: Any = None


_CONTINUE = Outcome(Signal.CONTINUE)
_SKIP = Outcome(Signal.SKIP)
_REMOVE = Outcome(Signal.REMOVE)


def interpret(value, tag: str, phase: str = "enter", tag_key: str = TAG_KEY) -> Outcome:
    """
    Turn a handler's return value into an Outcome.

    Args:
        value: Whatever the handler returned
        tag: Tag of the node being visited (for error messages)
        phase: "enter" or "exit"
        tag_key: Field holding the node tag

    Raises:
        OutcomeError: If the value is not a recognised outcome
    """
    if value is None or value is Signal.CONTINUE:
        return _CONTINUE
    if value is Signal.SKIP:
        # Children were already visited by the time exit runs
        return _CONTINUE if phase == "exit" else _SKIP
    if value is Signal.REMOVE:
        return _REMOVE
    if isinstance(value, Replace):
        if not is_node(value.node, tag_key):
            raise OutcomeError(tag, phase, value)
        return Outcome(Signal.REPLACE, value.node)
    if is_node(value, tag_key):
        return Outcome(Signal.REPLACE, value)
    raise OutcomeError(tag, phase, value)
