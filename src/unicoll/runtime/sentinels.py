"""
Sentinel results for unicoll primitives.

A search that matches nothing, or an access into an empty sequence, returns
one of these members instead of raising. They are distinct from every
element a collection can hold, including ``None``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class Missing(Enum):
    """Distinguished "no value" results."""

    NOT_FOUND = "not_found"
    ABSENT = "absent"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"<{self.name}>"


NOT_FOUND = Missing.NOT_FOUND
ABSENT = Missing.ABSENT


def is_missing(value: Any) -> bool:
    """Return True if value is one of the sentinel members."""
    return isinstance(value, Missing)
