"""Unit tests for the template LRU cache."""

import pytest

from fastapi_view.cache import TemplateCache


class TestTemplateCache:
    """Tests for TemplateCache."""

    def test_get_missing_key_returns_none(self, cache):
        """Test unknown keys are a miss."""
        assert cache.get("nope") is None

    def test_set_and_get(self, cache):
        """Test values of any kind can be stored."""
        compiled = object()
        cache.set("page.hbs", compiled)
        cache.set("page-Partials", {"header": "<h1></h1>"})

        assert cache.get("page.hbs") is compiled
        assert cache.get("page-Partials") == {"header": "<h1></h1>"}
        assert len(cache) == 2

    def test_evicts_least_recently_used(self, cache):
        """Test the oldest entry is evicted once capacity is exceeded."""
        cache.set("a", 1)
        cache.set("b", 2)
        cache.set("c", 3)
        cache.set("d", 4)

        assert "a" not in cache
        assert cache.keys() == ["b", "c", "d"]

    def test_get_refreshes_recency(self, cache):
        """Test reading an entry protects it from the next eviction."""
        cache.set("a", 1)
        cache.set("b", 2)
        cache.set("c", 3)

        assert cache.get("a") == 1
        cache.set("d", 4)

        assert "a" in cache
        assert "b" not in cache

    def test_set_existing_key_replaces_without_growing(self, cache):
        """Test replacing a value keeps the size and refreshes recency."""
        cache.set("a", 1)
        cache.set("b", 2)
        cache.set("a", 10)

        assert len(cache) == 2
        assert cache.get("a") == 10
        assert cache.keys() == ["b", "a"]

    def test_clear(self, cache):
        """Test clear drops everything and reports the count."""
        cache.set("a", 1)
        cache.set("b", 2)

        assert cache.clear() == 2
        assert len(cache) == 0
        assert cache.get("a") is None

    def test_iteration_order(self, cache):
        """Test iteration goes from least to most recently used."""
        cache.set("x", 1)
        cache.set("y", 2)

        assert list(cache) == ["x", "y"]

    def test_invalid_size(self):
        """Test a cache needs room for at least one entry."""
        with pytest.raises(ValueError):
            TemplateCache(max_size=0)
