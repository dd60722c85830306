"""Dual hash generation for enhanced double hashing.

Every item is reduced to two unsigned 64-bit digests from two unrelated hash
families, so a collision in one is unlikely to repeat in the other:

* **H1**: MurmurHash3 x64 128-bit (via ``mmh3``), truncated to its low 64 bits.
* **H2**: xxHash64 (via ``xxhash``).

Seeds are drawn once when a :class:`DualHasher` is created and reused for every
call, so one filter hashes consistently while two filters built with the same
arguments place their bits independently. Pass explicit seeds to get
reproducible placement.
"""
from __future__ import annotations

import secrets
import struct
from typing import Any, Optional, Protocol, Tuple

import mmh3
import xxhash

MASK64 = (1 << 64) - 1

_MURMUR_SEED_BITS = 32
_XX_SEED_BITS = 64

# One-byte type tags keep e.g. "1", b"1" and 1 apart.
_TAG_BYTES = b"b"
_TAG_STR = b"s"
_TAG_BOOL = b"?"
_TAG_INT = b"i"
_TAG_FLOAT = b"f"
_TAG_NONE = b"n"
_TAG_TUPLE = b"t"


class HashSource(Protocol):
    """Anything that can derive two independent 64-bit digests for an item."""

    def hash_pair(self, item: Any) -> Tuple[int, int]:
        ...


def item_bytes(item: Any) -> bytes:
    """Return the stable byte representation of ``item`` used for hashing.

    Supported: bytes-like objects, ``str``, ``bool``, ``int``, ``float``,
    ``None`` and tuples of those. Unlike Python's built-in ``hash`` the result
    does not change between interpreter runs.

    Raises:
        TypeError: If ``item`` (or a tuple member) has no stable encoding.
    """
    if isinstance(item, (bytes, bytearray, memoryview)):
        return _TAG_BYTES + bytes(item)
    if isinstance(item, str):
        return _TAG_STR + item.encode("utf-8")
    # bool before int: bool is an int subclass.
    if isinstance(item, bool):
        return _TAG_BOOL + (b"\x01" if item else b"\x00")
    if isinstance(item, int):
        length = (item.bit_length() + 8) // 8
        return _TAG_INT + item.to_bytes(length, "big", signed=True)
    if isinstance(item, float):
        return _TAG_FLOAT + struct.pack(">d", item)
    if item is None:
        return _TAG_NONE
    if isinstance(item, tuple):
        parts = [_TAG_TUPLE, struct.pack(">Q", len(item))]
        for member in item:
            encoded = item_bytes(member)
            parts.append(struct.pack(">Q", len(encoded)))
            parts.append(encoded)
        return b"".join(parts)
    raise TypeError(f"cannot hash item of type {type(item).__name__!r}")


def _check_seed(name: str, seed: int, bits: int) -> int:
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise ValueError(f"{name} must be an integer, got {seed!r}")
    if not 0 <= seed < (1 << bits):
        raise ValueError(f"{name} must be in [0, 2**{bits}), got {seed}")
    return seed


class DualHasher:
    """Murmur3-128 / xxHash64 hash source with per-instance seeds."""

    def __init__(self, murmur_seed: Optional[int] = None, xx_seed: Optional[int] = None) -> None:
        """Initialize the hasher.

        Args:
            murmur_seed: 32-bit seed for MurmurHash3. Random when omitted.
            xx_seed: 64-bit seed for xxHash64. Random when omitted.

        Raises:
            ValueError: If an explicit seed is out of range.
        """
        if murmur_seed is None:
            murmur_seed = secrets.randbits(_MURMUR_SEED_BITS)
        if xx_seed is None:
            xx_seed = secrets.randbits(_XX_SEED_BITS)

        self.murmur_seed = _check_seed("murmur_seed", murmur_seed, _MURMUR_SEED_BITS)
        self.xx_seed = _check_seed("xx_seed", xx_seed, _XX_SEED_BITS)

    def hash_pair(self, item: Any) -> Tuple[int, int]:
        """Return ``(h1, h2)`` for ``item``, both in ``[0, 2**64)``."""
        data = item_bytes(item)
        h1 = mmh3.hash128(data, seed=self.murmur_seed, signed=False) & MASK64
        h2 = xxhash.xxh64(data, seed=self.xx_seed).intdigest()
        return h1, h2

    @property
    def seeds(self) -> Tuple[int, int]:
        """The ``(murmur_seed, xx_seed)`` pair, e.g. to rebuild an identical hasher."""
        return self.murmur_seed, self.xx_seed
