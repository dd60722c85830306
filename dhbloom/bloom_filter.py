"""Bloom filter using enhanced double hashing.

The filter is sized from the number of items it is expected to hold and a
target false positive probability. Probe positions come from two base digests
(see :mod:`dhbloom.hashing`) combined with the Kirsch-Mitzenmacher enhanced
double hash:

    g_i(x) = (H1(x) + i * H2(x) + i^3) mod m

The sum wraps at 2^64 before the final modulo, so every probe lands in
``[0, m)`` without a bounds check.
"""
from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Any, Iterable, Iterator, Optional, Union

from .errors import BloomConfigError
from .hashing import MASK64, DualHasher, HashSource
from .sizing import DEFAULT_FALSE_POS, optimal_bit_length, optimal_hash_count

logger = logging.getLogger(__name__)


def enhanced_double_hash(h1: int, h2: int, i: int, bit_length: int) -> int:
    """Return the ``i``-th probe index for the digest pair ``(h1, h2)``."""
    return ((h1 + i * h2 + i ** 3) & MASK64) % bit_length


class BloomFilter:
    """Bloom filter backed by a packed bytearray bitset.

    Tracks the number of set bits alongside the bit array, which is what
    :meth:`approx_cardinality` estimates from. Bits only ever go from 0 to 1;
    there is no removal.

    Not thread-safe: wrap the instance in a lock if several threads mutate it.
    """

    def __init__(
        self,
        expected_items: int,
        false_positive_prob: float = DEFAULT_FALSE_POS,
        *,
        hasher: Optional[HashSource] = None,
    ) -> None:
        """Initialize a Bloom filter.

        Args:
            expected_items: Approximate number of distinct items to insert.
            false_positive_prob: Target false positive probability in (0, 1).
                Defaults to ``DEFAULT_FALSE_POS`` (1%).
            hasher: Source of the two base digests. Defaults to a
                :class:`DualHasher` with freshly drawn random seeds.

        Raises:
            BloomConfigError: If ``expected_items`` is not a positive integer,
                ``false_positive_prob`` is not strictly between 0 and 1, or the
                resulting filter would use no hash functions.
        """
        if isinstance(expected_items, bool) or not isinstance(expected_items, int):
            raise BloomConfigError(f"expected_items must be an integer, got {expected_items!r}")
        if expected_items <= 0:
            raise BloomConfigError(f"expected_items must be positive, got {expected_items}")
        if isinstance(false_positive_prob, bool) or not isinstance(false_positive_prob, Real):
            raise BloomConfigError(
                f"false_positive_prob must be a real number, got {false_positive_prob!r}"
            )
        if not (0.0 < false_positive_prob < 1.0):
            raise BloomConfigError(
                f"false_positive_prob must be in (0, 1), got {false_positive_prob}"
            )

        bit_length = optimal_bit_length(expected_items, false_positive_prob)
        num_hashes = optimal_hash_count(bit_length, expected_items)
        if num_hashes <= 0:
            raise BloomConfigError(
                f"false_positive_prob {false_positive_prob} is too high: "
                f"{bit_length} bits for {expected_items} items leaves no hash functions"
            )

        self._expected_items = expected_items
        self._false_positive_prob = float(false_positive_prob)
        self._bit_length = bit_length
        self._num_hashes = num_hashes
        self._set_bits = 0
        self._bit_array = bytearray((bit_length + 7) // 8)
        self._hasher: HashSource = hasher if hasher is not None else DualHasher()

        logger.debug(
            "BloomFilter created: bit_length=%d, num_hashes=%d, expected_items=%d, fp_prob=%.4f",
            bit_length,
            num_hashes,
            expected_items,
            self._false_positive_prob,
        )

    def set(self, item: Any) -> None:
        """Insert ``item``. Inserting the same item again changes nothing."""
        for bit_index in self._probes(item):
            byte_index = bit_index >> 3
            mask = 1 << (bit_index & 7)
            if not (self._bit_array[byte_index] & mask):
                self._bit_array[byte_index] |= mask
                self._set_bits += 1

    def has(self, item: Any) -> bool:
        """Return True if ``item`` may be present, False if definitely absent.

        Never returns False for an item previously passed to :meth:`set`.
        """
        for bit_index in self._probes(item):
            if not (self._bit_array[bit_index >> 3] & (1 << (bit_index & 7))):
                return False
        return True

    def add(self, item: Any) -> None:
        """Alias of :meth:`set`."""
        self.set(item)

    def update(self, items: Iterable[Any]) -> None:
        """Insert all ``items`` into the filter."""
        for item in items:
            self.set(item)

    def __contains__(self, item: Any) -> bool:
        return self.has(item)

    def approx_cardinality(self) -> Union[int, float]:
        """Estimate the number of distinct items inserted so far.

        Uses ``-(m / k) * ln(1 - X / m)`` where ``X`` is the number of set
        bits. The estimate grows without bound as the filter saturates and is
        ``math.inf`` once every bit is set.
        """
        m = self._bit_length
        x = self._set_bits
        if x >= m:
            return math.inf
        return round(-(m / self._num_hashes) * math.log1p(-x / m))

    def fill_ratio(self) -> float:
        """Fraction of bits that are set."""
        return self._set_bits / self._bit_length

    def estimated_false_positive_rate(self) -> float:
        """False positive probability implied by the current fill ratio.

        ``fill_ratio ** k``; exceeds the configured rate once the filter holds
        more than ``expected_items`` distinct items.
        """
        return self.fill_ratio() ** self._num_hashes

    def _probes(self, item: Any) -> Iterator[int]:
        h1, h2 = self._hasher.hash_pair(item)
        for i in range(self._num_hashes):
            yield enhanced_double_hash(h1, h2, i, self._bit_length)

    @property
    def bit_length(self) -> int:
        """Number of bits in the filter."""
        return self._bit_length

    @property
    def num_hashes(self) -> int:
        """Number of probes per item (k)."""
        return self._num_hashes

    @property
    def set_bits(self) -> int:
        """Number of bits currently set."""
        return self._set_bits

    @property
    def expected_items(self) -> int:
        return self._expected_items

    @property
    def false_positive_prob(self) -> float:
        return self._false_positive_prob

    @property
    def hasher(self) -> HashSource:
        return self._hasher

    @property
    def bit_array(self) -> bytearray:
        """Expose the underlying bit array for inspection.

        Bit ``i`` lives in byte ``i >> 3`` under mask ``1 << (i & 7)``.
        """
        return self._bit_array
