"""Shared helpers for Bloom filter tests."""
from __future__ import annotations

import random
import string

import pytest

from dhbloom import DualHasher


SEED = 42
ALPHABET = string.ascii_letters + string.digits


def random_str(rng: random.Random, length: int = 30) -> str:
    return "".join(rng.choices(ALPHABET, k=length))


def random_strings(n: int, seed: int = SEED, length: int = 30) -> list[str]:
    """Return ``n`` distinct random alphanumeric strings."""
    rng = random.Random(seed)
    out: set[str] = set()
    while len(out) < n:
        out.add(random_str(rng, length))
    return sorted(out)


class FixedHasher:
    """Hash source returning the same digest pair for every item."""

    def __init__(self, h1: int, h2: int) -> None:
        self.h1 = h1
        self.h2 = h2
        self.calls = 0

    def hash_pair(self, item):
        self.calls += 1
        return self.h1, self.h2


@pytest.fixture
def fixed_hasher() -> DualHasher:
    return DualHasher(murmur_seed=7, xx_seed=11)
