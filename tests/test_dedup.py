"""Tests for near-duplicate name detection."""

import pytest

from zairk.gen.dedup import UsedNames, has_near_duplicate, is_near_duplicate


class TestIsNearDuplicate:
    """Equality and plural rules."""

    @pytest.mark.parametrize("a,b", [
        ("key", "keys"),
        ("box", "boxes"),
        ("lamp", "lamps"),
        ("Key", "  key "),
        ("torch", "torches"),
        ("glass", "glasses"),
        ("dish", "dishes"),
        ("ruby", "rubies"),
        ("leaf", "leaves"),
        ("knife", "knives"),
        ("potato", "potatoes"),
        ("brass key", "Brass Keys"),
    ])
    def test_duplicates(self, a, b):
        assert is_near_duplicate(a, b)
        assert is_near_duplicate(b, a)

    @pytest.mark.parametrize("a,b", [
        ("key", "lock"),
        ("key", "keyes"),
        ("day", "daies"),
        ("radio", "radioes"),
        ("lamp", "lamp post"),
        ("sword", "swords of fire"),
    ])
    def test_not_duplicates(self, a, b):
        assert not is_near_duplicate(a, b)

    def test_has_near_duplicate(self):
        assert has_near_duplicate("coins", ["rope", "coin"])
        assert not has_near_duplicate("coin", ["rope", "lamp"])
        assert not has_near_duplicate("coin", [])


class TestUsedNames:
    """The world's name set."""

    def test_membership_is_plural_aware(self):
        names = UsedNames(["Candle"])
        assert "candles" in names
        assert "CANDLE" in names
        assert "lantern" not in names

    def test_add_rejects_near_duplicates(self):
        names = UsedNames()
        assert names.add("box")
        assert not names.add("Boxes")
        assert not names.add("   ")
        assert list(names) == ["box"]
        assert len(names) == 1
