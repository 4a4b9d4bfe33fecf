"""Sets of distinct random integers and the basic operations between them.

Sets are ordered lists without repeats; operations keep the order of their
inputs.
"""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

MAX_INTERVAL = 50
LOWEST = MAX_INTERVAL
HIGHEST = 2 * MAX_INTERVAL


def random_numbers(count: int, rng: random.Random | None = None) -> list[int]:
    """Return ``count`` distinct integers drawn from LOWEST..HIGHEST."""
    available = HIGHEST - LOWEST + 1
    if count < 0:
        raise ValueError("count must not be negative")
    if count > available:
        raise ValueError(f"cannot draw {count} distinct values from {available}")
    rng = rng or random.Random()
    return rng.sample(range(LOWEST, HIGHEST + 1), count)


def create_set(count: int, rng: random.Random | None = None) -> list[int]:
    """Create a set of ``count`` distinct random numbers."""
    return random_numbers(count, rng)


def format_set(values: Sequence[int]) -> str:
    """Render each value followed by a tab."""
    return "".join(f"{value}\t" for value in values)


def intersection(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Elements of ``b`` that are also in ``a``, in the order of ``b``."""
    members = set(a)
    return [value for value in b if value in members]


def union(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """All of ``a`` followed by the elements of ``b`` missing from ``a``."""
    members = set(a)
    return [*a, *(value for value in b if value not in members)]


def difference(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Elements of ``a`` not in ``b``, in the order of ``a``."""
    excluded = set(b)
    return [value for value in a if value not in excluded]


def symmetric_difference(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Elements in exactly one of ``a`` and ``b``."""
    return union(difference(a, b), difference(b, a))


def main(argv: Sequence[str] | None = None) -> int:
    """Build two random sets and print the results of the set operations."""
    parser = argparse.ArgumentParser(
        description="Demonstrate operations on two random sets of numbers."
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    set_a = create_set(5, rng)
    print("Set A is:")
    print(format_set(set_a))

    set_b = create_set(5, rng)
    print("Set B is:")
    print(format_set(set_b))

    results = [
        ("Union between A and B is:", union(set_a, set_b)),
        ("Difference between A and B is:", difference(set_a, set_b)),
        ("Intersection between A and B is:", intersection(set_a, set_b)),
        (
            "Symmetric difference between A and B is:",
            symmetric_difference(set_a, set_b),
        ),
    ]
    for heading, values in results:
        print(heading)
        print(format_set(values))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())