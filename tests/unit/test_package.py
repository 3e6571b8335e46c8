"""
Unit tests for the unicoll top-level surface.
"""

import unicoll


class TestPackageSurface:
    """Tests for top-level re-exports."""

    def test_exports(self):
        """Every name in __all__ is importable."""
        for name in unicoll.__all__:
            assert hasattr(unicoll, name)

    def test_mixed_pipeline(self):
        """Primitives compose across sequences and mappings."""
        prices = {"apple": 3, "pear": 5, "fig": 1}
        cheap = unicoll.filter(prices, lambda p: p < 5)
        assert unicoll.reduce(cheap, lambda acc, p: acc + p, 0) == 4
        assert unicoll.sort_by(unicoll.keys(prices), len) == ["fig", "pear", "apple"]

    def test_find_then_check(self):
        """Missing results are checked with is_missing."""
        result = unicoll.find([1, 2], lambda x: x > 5)
        assert unicoll.is_missing(result)
