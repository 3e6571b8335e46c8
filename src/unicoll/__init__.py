"""
unicoll - Collection primitives over sequences and mappings.

Write a transformation once against "a collection" and it behaves the same
whether it receives a list or a dict: each, map, reduce, find, filter and
size normalize their input to a list of values first. Sequence-only helpers
(first, last, sort_by, flatten) and mapping-only helpers (keys, values)
complete the set.
"""

import logging

from unicoll.runtime import (
    ABSENT,
    NOT_FOUND,
    Collection,
    MappingCollection,
    Missing,
    RemainingView,
    SequenceCollection,
    as_collection,
    each,
    filter,
    find,
    first,
    flatten,
    is_missing,
    keys,
    last,
    map,
    normalize,
    reduce,
    size,
    sort_by,
    values,
)
from unicoll.utils.errors import CollectionTypeError, UnicollError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "each",
    "map",
    "reduce",
    "find",
    "filter",
    "size",
    "first",
    "last",
    "keys",
    "values",
    "sort_by",
    "flatten",
    "normalize",
    "as_collection",
    "Collection",
    "SequenceCollection",
    "MappingCollection",
    "RemainingView",
    "Missing",
    "NOT_FOUND",
    "ABSENT",
    "is_missing",
    "UnicollError",
    "CollectionTypeError",
]
