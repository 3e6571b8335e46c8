"""
unicoll Runtime Package.

Collection primitives that accept either a sequence or a mapping.
"""

from unicoll.runtime.iterators import (
    RemainingView,
    each,
    filter,
    find,
    map,
    reduce,
    size,
)
from unicoll.runtime.mappings import keys, values
from unicoll.runtime.normalize import (
    Collection,
    MappingCollection,
    SequenceCollection,
    as_collection,
    is_sequence,
    normalize,
    own_properties,
)
from unicoll.runtime.sentinels import ABSENT, NOT_FOUND, Missing, is_missing
from unicoll.runtime.sequences import first, flatten, last, sort_by

__all__ = [
    # Normalizer
    "Collection",
    "SequenceCollection",
    "MappingCollection",
    "as_collection",
    "is_sequence",
    "normalize",
    "own_properties",
    # Traversal
    "each",
    "map",
    "filter",
    "find",
    "reduce",
    "size",
    "RemainingView",
    # Sequences
    "first",
    "last",
    "sort_by",
    "flatten",
    # Mappings
    "keys",
    "values",
    # Sentinels
    "Missing",
    "NOT_FOUND",
    "ABSENT",
    "is_missing",
]
