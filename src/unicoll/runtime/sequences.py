"""
unicoll Sequence Utilities.

Functions that only make sense on ordered sequences: bounded prefix and
suffix access, stable sorting by a computed key, and flattening of nested
sequences. They take the caller's sequence directly instead of going through
the normalizer, and raise CollectionTypeError when given a mapping.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from functools import cmp_to_key
from typing import Any

from unicoll.runtime.normalize import is_sequence
from unicoll.runtime.sentinels import ABSENT
from unicoll.utils.errors import CollectionTypeError


def _require_sequence(operation: str, value: Any) -> None:
    if not is_sequence(value):
        raise CollectionTypeError(operation, "a sequence", value)


# =============================================================================
# Slicing
# =============================================================================


def first(sequence: Sequence[Any], n: int | None = None) -> Any:
    """
    Return the first element, or a list of the first n elements.

    n is clamped to the sequence length; n <= 0 gives an empty list.

    Example:
        first([1, 2, 3]) -> 1
        first([1, 2, 3], 2) -> [1, 2]
        first([], None) -> ABSENT
    """
    _require_sequence("first", sequence)
    if n is None:
        return sequence[0] if len(sequence) else ABSENT
    if n <= 0:
        return []
    return list(sequence[:n])


def last(sequence: Sequence[Any], n: int | None = None) -> Any:
    """
    Return the last element, or a list of the last n elements.

    Example:
        last([1, 2, 3]) -> 3
        last([1, 2, 3], 2) -> [2, 3]
        last([1, 2, 3], 0) -> []
    """
    _require_sequence("last", sequence)
    length = len(sequence)
    if n is None:
        return sequence[length - 1] if length else ABSENT
    if n <= 0:
        return []
    return list(sequence[max(length - n, 0) :])


# =============================================================================
# Ordering
# =============================================================================


def _compare_keys(a: tuple[Any, int], b: tuple[Any, int]) -> int:
    if a[0] > b[0]:
        return 1
    if a[0] < b[0]:
        return -1
    return 0


def sort_by(sequence: Sequence[Any], callback: Callable[[Any], Any]) -> list[Any]:
    """
    Return a new list ordered ascending by callback(element).

    The sort is stable: elements with equal keys keep their relative order.
    Keys that are neither greater nor less than each other tie. callback is
    called exactly once per element.

    Example:
        sort_by(["bbb", "a", "cc"], len) -> ["a", "cc", "bbb"]
    """
    _require_sequence("sort_by", sequence)
    keyed = [(callback(item), index) for index, item in enumerate(sequence)]
    keyed.sort(key=cmp_to_key(_compare_keys))
    return [sequence[index] for _, index in keyed]


# =============================================================================
# Flattening
# =============================================================================


def _unpack(receiver: list[Any], items: Sequence[Any]) -> None:
    """Append every element of items to receiver, one level only."""
    for item in items:
        receiver.append(item)


def flatten(
    collection: Sequence[Any],
    shallow: bool = False,
    accumulator: list[Any] | None = None,
) -> list[Any]:
    """
    Flatten nested sequences into a single list.

    With ``shallow`` only one level is removed. Otherwise nested sequences
    are flattened to any depth. Results are appended to ``accumulator`` when
    one is given, and that same list is returned.

    Example:
        flatten([1, [2, [3, 4]], 5], shallow=True) -> [1, 2, [3, 4], 5]
        flatten([1, [2, [3, 4]], 5]) -> [1, 2, 3, 4, 5]
    """
    _require_sequence("flatten", collection)
    if accumulator is None:
        accumulator = []

    for item in collection:
        if not is_sequence(item):
            accumulator.append(item)
        elif shallow:
            _unpack(accumulator, item)
        else:
            flatten(item, False, accumulator)
    return accumulator
