"""
unicoll Traversal Primitives.

This module provides the functions that work uniformly over sequences and
mappings: each, map, reduce, find, filter and size. Every call normalizes
its input into a fresh list first, so the caller's container is never
mutated and mappings are traversed by value.
"""

from __future__ import annotations

import inspect
import logging
import math
from collections.abc import Callable, Iterator, Sequence
from typing import Any, TypeVar, overload

from unicoll.runtime.normalize import normalize
from unicoll.runtime.sentinels import ABSENT, NOT_FOUND, Missing

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")
C = TypeVar("C")


# =============================================================================
# Transformation Methods
# =============================================================================


def each(collection: C, callback: Callable[[Any], Any]) -> C:
    """
    Call callback once per element, for its side effects.

    Returns the original collection, not a copy.

    Example:
        each([1, 2, 3], print) -> [1, 2, 3]
    """
    for item in normalize(collection):
        callback(item)
    return collection


def map(collection: Any, callback: Callable[[Any], U]) -> list[U]:
    """
    Apply callback to each element and return a list of results.

    Example:
        map([1, 2, 3], lambda x: x * 2) -> [2, 4, 6]
        map({"a": 1, "b": 2}, str) -> ["1", "2"]
    """
    return [callback(item) for item in normalize(collection)]


def filter(collection: Any, predicate: Callable[[Any], bool]) -> list[Any]:
    """
    Keep elements that satisfy the predicate, in order.

    Example:
        filter([1, 2, 3, 4], lambda x: x % 2 == 0) -> [2, 4]
    """
    return [item for item in normalize(collection) if predicate(item)]


# =============================================================================
# Reduction
# =============================================================================


class RemainingView(Sequence[T]):
    """Read-only window onto the tail of a list, starting at ``start``."""

    __slots__ = ("_items", "_start")

    def __init__(self, items: list[T], start: int = 0) -> None:
        self._items = items
        self._start = start

    def __len__(self) -> int:
        return max(len(self._items) - self._start, 0)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: int | slice) -> T | list[T]:
        if isinstance(index, slice):
            return self._items[self._start :][index]
        length = len(self)
        if index < 0:
            index += length
        if not 0 <= index < length:
            raise IndexError("remaining view index out of range")
        return self._items[self._start + index]

    def __iter__(self) -> Iterator[T]:
        for index in range(self._start, len(self._items)):
            yield self._items[index]

    def __repr__(self) -> str:
        return f"RemainingView({self._items[self._start :]!r})"


def _accepts_remaining(callback: Callable[..., Any]) -> bool:
    """Check whether callback takes a third positional argument."""
    try:
        signature = inspect.signature(callback)
    except (TypeError, ValueError):
        logger.debug("No signature for %r, omitting the remaining view", callback)
        return False

    positional = 0
    for param in signature.parameters.values():
        if param.kind is param.VAR_POSITIONAL:
            return True
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            positional += 1
    return positional >= 3


def _is_legacy_falsy(value: Any) -> bool:
    """Check value against the falsy set of the legacy seeding rule."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0 or math.isnan(value)
    return False


def reduce(
    collection: Any,
    callback: Callable[..., A],
    initial: A | Missing = ABSENT,
    *,
    legacy_falsy_seed: bool = False,
) -> A | Missing:
    """
    Fold the collection left to right into a single value.

    With a seed, every element is folded into it. Without one, the first
    element becomes the seed and the rest are folded. Callbacks that take a
    third argument also receive a RemainingView of the elements still to be
    folded, beginning with the current one.

    With ``legacy_falsy_seed`` a seed of None, False, 0, "" or NaN is treated
    as absent. Empty containers stay real seeds.

    Example:
        reduce([1, 2, 3], lambda acc, x: acc + x) -> 6
        reduce([1, 2, 3], lambda acc, x: acc + x, 10) -> 16
        reduce([], lambda acc, x: acc + x) -> ABSENT
    """
    items = normalize(collection)

    if legacy_falsy_seed and _is_legacy_falsy(initial):
        logger.debug("Treating falsy reduce seed %r as absent", initial)
        initial = ABSENT

    if initial is ABSENT:
        if not items:
            return ABSENT
        accumulator, start = items[0], 1
    else:
        accumulator, start = initial, 0

    pass_remaining = _accepts_remaining(callback)
    for index in range(start, len(items)):
        if pass_remaining:
            accumulator = callback(accumulator, items[index], RemainingView(items, index))
        else:
            accumulator = callback(accumulator, items[index])
    return accumulator


# =============================================================================
# Access Methods
# =============================================================================


def find(collection: Any, predicate: Callable[[Any], bool]) -> Any:
    """
    Return the first element that satisfies the predicate.

    Stops at the first match. Returns NOT_FOUND if nothing matches.

    Example:
        find([1, 2, 3, 4], lambda x: x > 2) -> 3
        find([1, 2], lambda x: x > 5) -> NOT_FOUND
    """
    for item in normalize(collection):
        if predicate(item):
            return item
    return NOT_FOUND


def size(collection: Any) -> int:
    """
    Count the values in the collection.

    Example:
        size([1, 2, 3]) -> 3
        size({"a": 1}) -> 1
    """
    return len(normalize(collection))
