"""
Error types for unicoll.
"""

from typing import Optional


class UnicollError(Exception):
    """Base exception for all unicoll errors."""

    def __init__(self, message: str, operation: Optional[str] = None) -> None:
        self.message = message
        self.operation = operation
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.operation:
            return f"[{self.operation}] {self.message}"
        return self.message


class CollectionTypeError(UnicollError, TypeError):
    """Raised when an operation receives the wrong container shape."""

    def __init__(self, operation: str, expected: str, value: object) -> None:
        self.expected = expected
        self.actual = type(value).__name__
        super().__init__(f"expected {expected}, got {self.actual}", operation)
