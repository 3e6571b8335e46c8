"""
unicoll Utilities Package.

Common error types shared by the runtime.
"""

from unicoll.utils.errors import CollectionTypeError, UnicollError

__all__ = [
    "UnicollError",
    "CollectionTypeError",
]
