"""
Pair: the immutable two-slot cell.

Every other structure in this package is built from pairs.

Operations:
    - cons(a, b)   -> new Pair
    - car(p)       -> first slot
    - cdr(p)       -> second slot
    - is_pair(v)   -> was v built by cons?
    - to_string(p) -> "(<first>, <second>)", nested pairs rendered recursively

ARCHITECTURAL RULE:
    Pairs hold references, never copies.
    Two pairs are the same pair only if they are the same object.
"""

from dataclasses import dataclass
from typing import Any

from conspairs.errors import InvalidArgument


@dataclass(frozen=True, eq=False, repr=False)
class Pair:
    """
    Immutable cons cell.

    Properties:
        first: Value held in the first slot (any value, including a Pair)
        second: Value held in the second slot (any value, including a Pair)

    IMPORTANT:
        eq=False keeps comparison by identity.
        Structural comparison of lists lives in conspairs.lists.is_equal.
    """

    first: Any
    second: Any

    def __str__(self) -> str:
        return to_string(self)

    def __repr__(self) -> str:
        return f"Pair{to_string(self)}"


def cons(a: Any, b: Any) -> Pair:
    """Build a new pair holding a and b."""
    return Pair(a, b)


def is_pair(value: Any) -> bool:
    return isinstance(value, Pair)


def _check_pair(value: Any) -> None:
    if not is_pair(value):
        raise InvalidArgument(f"Argument must be pair, but it was '{value}'")


def car(p: Pair) -> Any:
    """
    Return the first slot of a pair.

    Raises:
        InvalidArgument: If p is not a pair
    """
    _check_pair(p)
    return p.first


def cdr(p: Pair) -> Any:
    """
    Return the second slot of a pair.

    Raises:
        InvalidArgument: If p is not a pair
    """
    _check_pair(p)
    return p.second


def _render_slot(value: Any) -> str:
    if is_pair(value):
        return to_string(value)
    return str(value)


def to_string(p: Pair) -> str:
    """
    Render a pair as "(<first>, <second>)".

    Example:
        to_string(cons(1, cons(2, 3)))  ->  "(1, (2, 3))"

    The chain of second slots is walked iteratively, so a long
    right-nested chain does not exhaust the stack.
    """
    _check_pair(p)
    parts = []
    depth = 0
    current = p
    while is_pair(current):
        parts.append("(" + _render_slot(current.first) + ", ")
        depth += 1
        current = current.second
    parts.append(str(current))
    parts.append(")" * depth)
    return "".join(parts)


__all__ = ["Pair", "cons", "car", "cdr", "is_pair", "to_string"]
