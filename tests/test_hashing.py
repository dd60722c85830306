"""Tests for the dual hash generator."""
from __future__ import annotations

import pytest

from dhbloom.hashing import MASK64, DualHasher, HashSource, item_bytes


class TestItemBytes:
    def test_types_are_distinguished(self):
        encodings = {
            item_bytes("1"),
            item_bytes(b"1"),
            item_bytes(1),
            item_bytes(1.0),
            item_bytes(True),
            item_bytes(("1",)),
        }
        assert len(encodings) == 6

    def test_bytes_like_agree(self):
        assert item_bytes(b"abc") == item_bytes(bytearray(b"abc")) == item_bytes(memoryview(b"abc"))

    def test_negative_and_large_ints(self):
        assert item_bytes(-1) != item_bytes(255)
        assert item_bytes(0) != item_bytes(-0.0)
        assert item_bytes(2 ** 100) != item_bytes(2 ** 100 + 1)

    def test_tuple_boundaries(self):
        assert item_bytes(("ab", "c")) != item_bytes(("a", "bc"))
        assert item_bytes((("a",), "b")) != item_bytes(("a", ("b",)))

    def test_none(self):
        assert item_bytes(None) != item_bytes("")

    @pytest.mark.parametrize("item", [object(), ["a"], {"a": 1}, {1, 2}, ("ok", ["nested"])])
    def test_unsupported_types_raise(self, item):
        with pytest.raises(TypeError):
            item_bytes(item)


class TestDualHasher:
    def test_is_hash_source(self):
        hasher: HashSource = DualHasher(1, 2)
        h1, h2 = hasher.hash_pair("foo")
        assert 0 <= h1 <= MASK64
        assert 0 <= h2 <= MASK64

    def test_same_seeds_same_digests(self):
        a = DualHasher(murmur_seed=123, xx_seed=456)
        b = DualHasher(murmur_seed=123, xx_seed=456)
        for item in ["foo", b"bar", 42, ("x", 1)]:
            assert a.hash_pair(item) == b.hash_pair(item)

    def test_stable_across_calls(self):
        hasher = DualHasher()
        assert hasher.hash_pair("foo") == hasher.hash_pair("foo")

    def test_different_seeds_different_digests(self):
        a = DualHasher(murmur_seed=1, xx_seed=1)
        b = DualHasher(murmur_seed=2, xx_seed=2)
        assert a.hash_pair("foo") != b.hash_pair("foo")

    def test_two_families_disagree(self):
        h1, h2 = DualHasher(0, 0).hash_pair("foo")
        assert h1 != h2

    def test_random_seeds_drawn_once(self):
        hasher = DualHasher()
        seeds = hasher.seeds
        hasher.hash_pair("foo")
        hasher.hash_pair("bar")
        assert hasher.seeds == seeds
        assert 0 <= hasher.murmur_seed < 2 ** 32
        assert 0 <= hasher.xx_seed < 2 ** 64

    def test_independent_instances_get_different_seeds(self):
        assert DualHasher().seeds != DualHasher().seeds

    def test_rebuild_from_seeds(self):
        original = DualHasher()
        clone = DualHasher(*original.seeds)
        assert clone.hash_pair("foo") == original.hash_pair("foo")

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"murmur_seed": -1},
            {"murmur_seed": 2 ** 32},
            {"xx_seed": 2 ** 64},
            {"xx_seed": "seed"},
            {"murmur_seed": True},
        ],
    )
    def test_invalid_seeds(self, kwargs):
        with pytest.raises(ValueError):
            DualHasher(**kwargs)

    def test_unhashable_item(self):
        with pytest.raises(TypeError):
            DualHasher(1, 2).hash_pair(object())
