"""
unicoll Mapping Utilities.

Key and value extraction for keyed mappings and attribute-bearing objects.
Both iterate the own property set directly, so keys(m)[i] always pairs with
values(m)[i].
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from unicoll.runtime.normalize import own_properties
from unicoll.utils.errors import CollectionTypeError


def _properties(operation: str, value: Any) -> Mapping[str, Any]:
    properties = own_properties(value)
    if properties is None:
        raise CollectionTypeError(operation, "a mapping or object", value)
    return properties


def keys(mapping: Any) -> list[str]:
    """
    Return the property names in iteration order.

    Example:
        keys({"a": 1, "b": 2}) -> ["a", "b"]
    """
    return [key for key in _properties("keys", mapping)]


def values(mapping: Any) -> list[Any]:
    """
    Return the property values, in the same order as keys().

    Example:
        values({"a": 1, "b": 2}) -> [1, 2]
    """
    properties = _properties("values", mapping)
    return [properties[key] for key in properties]
