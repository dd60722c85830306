"""Bloom filter benchmark and report suite.

Generates random 30-character alphanumeric strings, performs a deterministic
80/20 split, builds a filter sized for the 80% training set and reports:

1. Membership on the training set (should be all present)
2. False positive rate on the held-out set
3. Cardinality estimate against the true insert count
4. Filter properties and memory usage
5. Insert and query throughput at several filter sizes

Run with ``python -m bench.bench_suite``.
"""
from __future__ import annotations

import random
import string
import time
from typing import Any, Optional, Tuple

from dhbloom import BloomFilter, DualHasher


STRING_LENGTH = 30
FALSE_POSITIVE_PROB = 0.01
BENCH_SIZES = (1_000, 10_000, 50_000)
QUERY_OPS = 100_000
SEED = 42

_ALPHABET = string.ascii_letters + string.digits


def random_str(rng: random.Random, length: int = STRING_LENGTH) -> str:
    """Return a random alphanumeric string of ``length`` characters."""
    return "".join(rng.choices(_ALPHABET, k=length))


def generate_synthetic_data(n: int, rng: Optional[random.Random] = None) -> list[str]:
    """Generate ``n`` unique random strings."""
    rng = rng or random.Random(SEED)
    print(f"Generating {n} synthetic items...")
    words: set[str] = set()
    while len(words) < n:
        words.add(random_str(rng))
    return sorted(words)


def build_split(words: list[str]) -> Tuple[BloomFilter, list[str], list[str]]:
    """Create a deterministic 80/20 split and build the filter on the 80%.

    Returns (bloom_filter, training_words, test_words).
    """
    split = int(len(words) * 0.8)
    train = words[:split]
    test = words[split:]

    bloom = BloomFilter(max(1, len(train)), FALSE_POSITIVE_PROB, hasher=DualHasher(SEED, SEED))
    bloom.update(train)

    return bloom, train, test


def measure_membership(bloom: BloomFilter, train: list[str]) -> None:
    """Verify all training items are present in the filter."""
    print("TEST A: Membership on training set")
    missing = [w for w in train if w not in bloom]
    print(f"  Training items: {len(train)}")
    print(f"  Missing after insertion: {len(missing)} (expected 0)")
    if missing:
        print(f"  Example missing: {missing[:5]}")
    print()


def measure_false_positive_rate(bloom: BloomFilter, train: list[str], test: list[str]) -> None:
    """Measure empirical false positive rate on the held-out set."""
    print("TEST B: False positive rate on held-out strings")
    train_set = set(train)
    test_filtered = [w for w in test if w not in train_set]

    if not test_filtered:
        print("  No held-out strings available for testing.")
        return

    false_positives = sum(1 for w in test_filtered if w in bloom)
    fpr = false_positives / len(test_filtered)

    print(f"  Held-out strings: {len(test_filtered)}")
    print(f"  False positives: {false_positives}")
    print(f"  Empirical FPR: {fpr:.6f} ({fpr*100:.4f}%)  target: {bloom.false_positive_prob}")
    print(f"  FPR implied by fill ratio: {bloom.estimated_false_positive_rate():.6f}")
    print()


def measure_cardinality(bloom: BloomFilter, train: list[str]) -> None:
    """Compare the cardinality estimate with the true insert count."""
    print("TEST C: Cardinality estimate")
    estimate = bloom.approx_cardinality()
    error = abs(estimate - len(train)) / len(train)
    print(f"  Inserted: {len(train)}")
    print(f"  Estimated: {estimate}")
    print(f"  Relative error: {error:.4%}")
    print()


def show_properties(bloom: BloomFilter, train: list[str]) -> None:
    """Display filter memory and configuration properties."""
    print("TEST D: Filter properties")
    bytes_len = len(bloom.bit_array)
    mb = bytes_len / (1024 * 1024)

    print(f"  Filter size (bits): {bloom.bit_length}")
    print(f"  Filter size (bytes): {bytes_len}")
    print(f"  Filter size (MB): {mb:.2f}")
    print(f"  Number of hash functions: {bloom.num_hashes}")
    print(f"  Set bits: {bloom.set_bits} (fill ratio {bloom.fill_ratio():.4f})")
    print(f"  Items inserted: {len(train)}")
    print(f"  Bytes per item: {bytes_len / len(train):.4f}")
    print()


def _ops_per_sec(count: int, elapsed: float) -> float:
    if elapsed <= 0:
        return float("inf")
    return count / elapsed


def measure_performance(size: int, rng: random.Random) -> dict[str, Any]:
    """Measure set and has throughput (ops/sec) for a filter of ``size`` items."""
    print(f"TEST E: Performance, expected_items={size}")

    items = [random_str(rng) for _ in range(size)]
    queries = [random_str(rng) for _ in range(QUERY_OPS)]

    bench_filter = BloomFilter(size)
    start_time = time.perf_counter()
    for item in items:
        bench_filter.set(item)
    insert_time = time.perf_counter() - start_time
    insert_ops = _ops_per_sec(len(items), insert_time)
    print(f"    - Inserted {len(items)} items in {insert_time:.4f} sec")
    print(f"    - Insertion Throughput: {insert_ops:,.0f} ops/sec")

    start_time = time.perf_counter()
    for query in queries:
        bench_filter.has(query)
    query_time = time.perf_counter() - start_time
    query_ops = _ops_per_sec(len(queries), query_time)
    print(f"    - Performed {len(queries)} queries in {query_time:.4f} sec")
    print(f"    - Query Throughput: {query_ops:,.0f} ops/sec")
    print()

    return {
        "size": size,
        "insert_time": insert_time,
        "insert_ops_per_sec": insert_ops,
        "query_time": query_time,
        "query_ops_per_sec": query_ops,
    }


def print_performance_summary(results: list[dict[str, Any]]) -> None:
    """Print a compact table of throughput per filter size."""
    print(f"{'Expected items':<18}{'Insert (ops/sec)':>20}{'Query (ops/sec)':>20}")
    print("-" * 58)
    for row in results:
        print(
            f"{row['size']:<18}"
            f"{row['insert_ops_per_sec']:>20,.0f}"
            f"{row['query_ops_per_sec']:>20,.0f}"
        )
    print()


def run_all() -> None:
    """Run all measurements."""
    rng = random.Random(SEED)
    full_words = generate_synthetic_data(100_000, rng)
    print(f"Full dataset unique strings: {len(full_words)}")

    print("=" * 60)
    print("Running Bloom Filter Suite (80/20 split)")
    print("=" * 60)
    print()

    bloom, train, test = build_split(full_words)

    measure_membership(bloom, train)
    measure_false_positive_rate(bloom, train, test)
    measure_cardinality(bloom, train)
    show_properties(bloom, train)

    results = [measure_performance(size, rng) for size in BENCH_SIZES]

    print("=" * 60)
    print("Performance Summary")
    print("=" * 60)
    print_performance_summary(results)

    print("=" * 60)
    print("Suite completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    run_all()
