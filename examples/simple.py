"""A simple example showing the use of a Bloom filter."""
from __future__ import annotations

from dhbloom import BloomFilter


def main() -> None:
    approx_items = 100
    bf = BloomFilter(approx_items)

    bf.set("foo")
    bf.set("bar")

    print(f"foo: {bf.has('foo')}")  # True
    print(f"bar: {bf.has('bar')}")  # True
    print(f"baz: {bf.has('baz')}")  # False

    print(f"approx items: {bf.approx_cardinality()}")  # 2


if __name__ == "__main__":
    main()
