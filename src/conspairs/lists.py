"""
Persistent singly-linked lists built from pairs.

A list is a value that is either:
    - EMPTY (the canonical terminal marker), or
    - a Pair whose second slot is itself a list.

Every operation validates its list arguments once, on entry, and then
walks the pairs directly. Walks are iterative, so long lists never hit
the recursion limit.

ARCHITECTURAL RULE:
    Lists are never mutated.
    cons, filter, map, conj, disj, concat and reverse return new lists.
    Tails are shared, never copied.
"""

import random as _random
from typing import Any, Callable, Iterator, Optional, Union

from conspairs.errors import EmptyListAccess, IndexOutOfRange, InvalidArgument
from conspairs.pair import Pair, is_pair
from conspairs.pair import to_string as pair_to_string


class EmptyList:
    """
    The empty list marker.

    There is exactly one instance, EMPTY. Constructing EmptyList again
    (directly, or through copy/deepcopy) returns that same instance.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "()"

    def __repr__(self) -> str:
        return "EMPTY"


EMPTY = EmptyList()

ConsList = Union[Pair, EmptyList]


# ---------------------------------------------------------------------------
# Internal helpers (no validation)
# ---------------------------------------------------------------------------

def _strict_equal(a: Any, b: Any) -> bool:
    """Same object, or same exact type and equal value."""
    if a is b:
        return True
    return type(a) is type(b) and a == b


def _walk(lst: ConsList) -> Iterator[Any]:
    current = lst
    while current is not EMPTY:
        yield current.first
        current = current.second


def _build(elements, tail: ConsList = EMPTY) -> ConsList:
    """Prepend a Python sequence onto tail, preserving its order."""
    acc = tail
    for element in reversed(elements):
        acc = Pair(element, acc)
    return acc


def _contains(lst: ConsList, element: Any) -> bool:
    for item in _walk(lst):
        if _strict_equal(item, element):
            return True
    return False


# ---------------------------------------------------------------------------
# Type predicate and validation
# ---------------------------------------------------------------------------

def is_list(value: Any) -> bool:
    """
    Check if value is a list.

    Examples:
        is_list(l())            -> True
        is_list(l('a', 5))      -> True
        is_list(cons(3, 2))     -> False  (raw pair)
        is_list('hello')        -> False
    """
    current = value
    while is_pair(current):
        current = current.second
    return current is EMPTY


def _describe(value: Any) -> str:
    if is_pair(value):
        return "pair: " + pair_to_string(value)
    if isinstance(value, (list, tuple, dict, set, frozenset)):
        return "array"
    return str(value)


def check_list(value: Any) -> None:
    """
    Raise InvalidArgument unless value is a list.

    Message forms:
        Argument must be list, but it was 'pair: (1, (2, 3))'
        Argument must be list, but it was 'array'
        Argument must be list, but it was '5'
    """
    if not is_list(value):
        raise InvalidArgument(f"Argument must be list, but it was '{_describe(value)}'")


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

def l(*elements: Any) -> ConsList:
    """
    Create a new list holding elements, in order.

    Example:
        l(1, l(3, 4), 5)  ->  (1, (3, 4), 5)
    """
    return _build(elements)


def cons(element: Any, lst: ConsList) -> Pair:
    """
    Prepend element to lst.

    Example:
        cons(5, l(1, 0))  ->  (5, 1, 0)

    Raises:
        InvalidArgument: If lst is not a list
    """
    check_list(lst)
    return Pair(element, lst)


def s(*elements: Any) -> ConsList:
    """
    Create a list holding each distinct element once.

    Elements are folded right to left with conj, so each one keeps the
    position of its last occurrence.

    Example:
        s(3, 4, 3, 5, 5)  ->  (4, 3, 5)
    """
    acc = EMPTY
    for element in reversed(elements):
        if not _contains(acc, element):
            acc = Pair(element, acc)
    return acc


# ---------------------------------------------------------------------------
# Access
# ---------------------------------------------------------------------------

def head(lst: ConsList) -> Any:
    """
    Get the first element.

    Raises:
        InvalidArgument: If lst is not a list
        EmptyListAccess: If lst is empty
    """
    check_list(lst)
    if lst is EMPTY:
        raise EmptyListAccess("Cannot take head of an empty list")
    return lst.first


def tail(lst: ConsList) -> ConsList:
    """
    Get everything after the first element.

    Raises:
        InvalidArgument: If lst is not a list
        EmptyListAccess: If lst is empty
    """
    check_list(lst)
    if lst is EMPTY:
        raise EmptyListAccess("Cannot take tail of an empty list")
    return lst.second


def is_empty(lst: ConsList) -> bool:
    check_list(lst)
    return lst is EMPTY


def get(index: int, lst: ConsList) -> Any:
    """
    Get element at a 0-based index.

    Example:
        get(1, l(3, 4, 5, 8))  ->  4

    Raises:
        InvalidArgument: If lst is not a list, or index is not an int
        IndexOutOfRange: If index is negative or past the end
    """
    check_list(lst)
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidArgument(f"Index must be int, but it was '{index}'")
    if index < 0:
        raise IndexOutOfRange(f"Index {index} is out of range")
    current = lst
    for _ in range(index):
        if current is EMPTY:
            break
        current = current.second
    if current is EMPTY:
        raise IndexOutOfRange(f"Index {index} is out of range for list of length {length(lst)}")
    return current.first


def random(lst: ConsList, rng=None) -> Any:
    """
    Get a uniformly chosen element.

    Args:
        lst: Non-empty list
        rng: Random source with randint(a, b); defaults to the random module

    Raises:
        InvalidArgument: If lst is not a list
        EmptyListAccess: If lst is empty
    """
    check_list(lst)
    if lst is EMPTY:
        raise EmptyListAccess("Cannot pick a random element of an empty list")
    source = rng if rng is not None else _random
    index = source.randint(0, length(lst) - 1)
    return get(index, lst)


def iterate(lst: ConsList) -> Iterator[Any]:
    """
    Iterate over the elements of lst, in order.

    Validation happens immediately, not on first next().
    """
    check_list(lst)
    return _walk(lst)


# ---------------------------------------------------------------------------
# Predicates / queries
# ---------------------------------------------------------------------------

def is_equal(list1: ConsList, list2: ConsList) -> bool:
    """
    Compare two lists element by element.

    Elements are compared strictly: nested lists are equal only if
    they are the same object.

    Examples:
        is_equal(l(), l())                   -> True
        is_equal(l(), l(8, 3))               -> False
        is_equal(l(1, 2, 10), l(1, 2, 10))   -> True
    """
    check_list(list1)
    check_list(list2)
    left, right = list1, list2
    while left is not EMPTY and right is not EMPTY:
        if not _strict_equal(left.first, right.first):
            return False
        left, right = left.second, right.second
    return left is EMPTY and right is EMPTY


def has(lst: ConsList, element: Any) -> bool:
    """
    Check if lst contains element.

    Example:
        has(l(3, 4, 5, 8), 8)  -> True
        has(l(3, 4, 5, 8), 0)  -> False
    """
    check_list(lst)
    return _contains(lst, element)


def length(lst: ConsList) -> int:
    check_list(lst)
    count = 0
    for _ in _walk(lst):
        count += 1
    return count


# ---------------------------------------------------------------------------
# Transformation
# ---------------------------------------------------------------------------

def filter(lst: ConsList, predicate: Callable[[Any], Any]) -> ConsList:
    """Keep the elements for which predicate(element) is truthy."""
    check_list(lst)
    return _build([item for item in _walk(lst) if predicate(item)])


def map(lst: ConsList, fn: Callable[[Any], Any]) -> ConsList:
    """Apply fn to every element, left to right."""
    check_list(lst)
    return _build([fn(item) for item in _walk(lst)])


def reduce(lst: ConsList, fn: Callable[[Any, Any], Any], initial: Optional[Any] = None) -> Any:
    """
    Left fold.

    fn is called as fn(element, accumulator) and returns the new accumulator.
    On the empty list, initial is returned unchanged.

    Example:
        reduce(l(1, 2, 3), lambda x, acc: x + acc, 0)  -> 6
    """
    check_list(lst)
    acc = initial
    for item in _walk(lst):
        acc = fn(item, acc)
    return acc


def reverse(lst: ConsList) -> ConsList:
    check_list(lst)
    acc = EMPTY
    for item in _walk(lst):
        acc = Pair(item, acc)
    return acc


def concat(list1: ConsList, list2: ConsList) -> ConsList:
    """
    Join two lists.

    The result shares list2 as its tail. If list1 is empty, list2
    itself is returned.

    Examples:
        concat(l(3, 4, 5, 8), l(3, 2, 9))  -> (3, 4, 5, 8, 3, 2, 9)
        concat(l(), l(1, 10))              -> (1, 10)
    """
    check_list(list1)
    check_list(list2)
    if list1 is EMPTY:
        return list2
    return _build(list(_walk(list1)), list2)


def conj(lst: ConsList, element: Any) -> ConsList:
    """
    Add element to the front unless it is already present.

    Examples:
        conj(l(3, 4, 5, 8), 5)  -> (3, 4, 5, 8)   (same list)
        conj(l(3, 4, 5, 8), 9)  -> (9, 3, 4, 5, 8)
    """
    if has(lst, element):
        return lst
    return Pair(element, lst)


def disj(lst: ConsList, element: Any) -> ConsList:
    """
    Remove every occurrence of element.

    Example:
        disj(l(5, 4, 5, 8), 5)  -> (4, 8)
    """
    return filter(lst, lambda item: not _strict_equal(item, element))


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def to_string(value: Any) -> str:
    """
    Render a value as a string.

    Lists render as "(e1, e2, ..., en)", each element rendered with
    to_string in turn. A pair that is not a list renders as
    "pair: (a, b)". Anything else renders as str(value).

    Examples:
        to_string(l())                        -> "()"
        to_string(l(3, l(4, 5), 5))           -> "(3, (4, 5), 5)"
        to_string(l(3, pair.cons(4, 5)))      -> "(3, pair: (4, 5))"
    """
    if not is_list(value):
        if is_pair(value):
            return "pair: " + pair_to_string(value)
        return str(value)

    return "(" + ", ".join(to_string(item) for item in _walk(value)) + ")"


__all__ = [
    "EMPTY",
    "EmptyList",
    "ConsList",
    "is_list",
    "check_list",
    "l",
    "cons",
    "s",
    "head",
    "tail",
    "is_empty",
    "get",
    "random",
    "iterate",
    "is_equal",
    "has",
    "length",
    "filter",
    "map",
    "reduce",
    "reverse",
    "concat",
    "conj",
    "disj",
    "to_string",
]
