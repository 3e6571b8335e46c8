"""
Pytest configuration and shared fixtures for unicoll tests.
"""

from dataclasses import dataclass, field

import pytest


@dataclass
class CallRecorder:
    """Records every argument a callback receives."""

    result: object = None
    calls: list = field(default_factory=list)

    def __call__(self, item):
        self.calls.append(item)
        return self.result


class Point:
    """Plain object whose attributes act as mapping properties."""

    def __init__(self, x, y):
        self.x = x
        self.y = y


@pytest.fixture
def recorder():
    """Factory fixture for callbacks that record their arguments."""

    def _create(result: object = None) -> CallRecorder:
        return CallRecorder(result=result)

    return _create


@pytest.fixture
def sample_mapping():
    """A small insertion-ordered mapping."""
    return {"one": 1, "two": 2, "three": 3}


@pytest.fixture
def point():
    """An attribute-bearing object."""
    return Point(3, 4)
