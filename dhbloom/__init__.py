"""Bloom filter with enhanced double hashing.

A Bloom filter answers "possibly in set" or "definitely not in set" using a
fixed-size bit array. Items can be added but not removed, and the false
positive probability grows as more items are added.

Probe positions use enhanced double hashing (Kirsch & Mitzenmacher, "Less
Hashing, Same Performance: Building a Better Bloom Filter"):

    g_i(x) = (H1(x) + i * H2(x) + i^3) mod m

with H1 = MurmurHash3 x64 128-bit and H2 = xxHash64.

Example::

    from dhbloom import BloomFilter

    bf = BloomFilter(100)
    bf.set("foo")
    bf.set("bar")

    bf.has("foo")             # True
    bf.has("baz")             # False (almost certainly)
    bf.approx_cardinality()   # 2
"""
from __future__ import annotations

from .bloom_filter import BloomFilter, enhanced_double_hash
from .errors import BloomConfigError
from .hashing import DualHasher, HashSource, item_bytes
from .sizing import DEFAULT_FALSE_POS, optimal_bit_length, optimal_hash_count

__all__ = [
    "DEFAULT_FALSE_POS",
    "BloomConfigError",
    "BloomFilter",
    "DualHasher",
    "HashSource",
    "enhanced_double_hash",
    "item_bytes",
    "optimal_bit_length",
    "optimal_hash_count",
]
