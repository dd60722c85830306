"""Optimal sizing for a Bloom filter.

Given ``n`` expected items and a target false positive probability ``p``:

    m = ceil(-(ln(p) * n) / ln(2)^2)
    k = ceil((m // n) * ln(2))

``k`` uses the truncated ratio ``m // n``. The documented sizes below depend
on it, so it must not be replaced by the continuous ``m / n``.
"""
from __future__ import annotations

import math

# The default false positive probability (1%).
DEFAULT_FALSE_POS = 0.01

LN_2 = math.log(2)
LN_SQR = LN_2 * LN_2


def optimal_bit_length(expected_items: int, false_positive_prob: float) -> int:
    """Return the bit array size for ``expected_items`` at ``false_positive_prob``.

    >>> optimal_bit_length(5000, 0.01)
    47926
    """
    return math.ceil(-((math.log(false_positive_prob) * expected_items) / LN_SQR))


def optimal_hash_count(bit_length: int, expected_items: int) -> int:
    """Return the number of probes per item for a ``bit_length``-bit filter.

    >>> optimal_hash_count(47926, 5000)
    7
    """
    return math.ceil((bit_length // expected_items) * LN_2)
