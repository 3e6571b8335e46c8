"""
unicoll Normalizer.

Every collection primitive accepts either an ordered sequence or a keyed
mapping. This module wraps both shapes behind a single ``Collection``
interface whose ``normalize`` method yields a fresh list of values, so the
primitives never branch on the variant themselves.

Example:
    normalize([1, 2, 3]) -> [1, 2, 3]   (a new list)
    normalize({"a": 1, "b": 2}) -> [1, 2]
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import ModuleType
from typing import Any

import numpy as np

logger = logging.getLogger(__name__)

_TEXT_TYPES = (str, bytes, bytearray)


def is_sequence(value: Any) -> bool:
    """
    Check whether value is an ordered, index-addressable container.

    Text is excluded so that strings stay atomic when nested.
    """
    if isinstance(value, np.ndarray):
        return value.ndim > 0
    return isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES)


def own_properties(value: Any) -> Mapping[str, Any] | None:
    """
    Return the keyed view of value's own properties, or None if it has none.

    Mappings are their own property set. Plain objects expose their
    instance attributes.
    """
    if isinstance(value, Mapping):
        return value
    if isinstance(value, (type, ModuleType)):
        return None
    attributes = getattr(value, "__dict__", None)
    if isinstance(attributes, Mapping):
        return attributes
    return None


# =============================================================================
# Collection Variants
# =============================================================================


class Collection(ABC):
    """A container the collection primitives can iterate uniformly."""

    __slots__ = ()

    @abstractmethod
    def normalize(self) -> list[Any]:
        """Return a new list of this collection's values in iteration order."""


@dataclass(frozen=True, slots=True)
class SequenceCollection(Collection):
    """An ordered sequence; normalizes to a shallow copy."""

    items: Sequence[Any] | np.ndarray

    def normalize(self) -> list[Any]:
        return list(self.items)


@dataclass(frozen=True, slots=True)
class MappingCollection(Collection):
    """A keyed mapping; normalizes to its values in key order."""

    mapping: Mapping[str, Any]

    def normalize(self) -> list[Any]:
        return list(self.mapping.values())


# =============================================================================
# Dispatch
# =============================================================================


def as_collection(value: Any) -> Collection:
    """
    Wrap value in the matching Collection variant.

    Values that are neither sequences nor carry properties become an empty
    mapping rather than an error.
    """
    if isinstance(value, Collection):
        return value
    if is_sequence(value) or isinstance(value, _TEXT_TYPES):
        return SequenceCollection(value)

    properties = own_properties(value)
    if properties is not None:
        return MappingCollection(properties)

    logger.debug("No enumerable values on %s, using an empty view", type(value).__name__)
    return MappingCollection({})


def normalize(value: Any) -> list[Any]:
    """
    Produce the normalized view of a collection.

    Example:
        normalize((1, 2)) -> [1, 2]
        normalize({"x": 1}) -> [1]
        normalize(None) -> []
    """
    return as_collection(value).normalize()
