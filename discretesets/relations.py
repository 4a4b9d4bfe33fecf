"""Random sets of character codes and the relations built from them."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Pair:
    """An ordered pair of a relation."""

    x: int
    y: int


def random_numbers(
    count: int, maximum: int, minimum: int, rng: random.Random | None = None
) -> list[int]:
    """Return ``count`` distinct integers drawn from minimum..maximum."""
    if count < 0:
        raise ValueError("count must not be negative")
    if minimum > maximum:
        raise ValueError("minimum must not exceed maximum")
    available = maximum - minimum + 1
    if count > available:
        raise ValueError(f"cannot draw {count} distinct values from {available}")
    rng = rng or random.Random()
    return rng.sample(range(minimum, maximum + 1), count)


def create_set(
    count: int, maximum: int, minimum: int, rng: random.Random | None = None
) -> list[int]:
    """Create a set of ``count`` distinct random numbers in a range."""
    return random_numbers(count, maximum, minimum, rng)


def format_set(values: Sequence[int]) -> str:
    """Render each value as a character followed by a tab."""
    return "".join(f"{chr(value)}\t" for value in values)


def cartesian_product(a: Sequence[int], b: Sequence[int]) -> list[Pair]:
    """Every pair of an element of ``a`` with an element of ``b``, row by row."""
    return [Pair(x, y) for x in a for y in b]


def format_relation(pairs: Sequence[Pair]) -> str:
    """Render a relation with its length and its pairs as characters."""
    body = ",".join(f"({chr(pair.x)}, {chr(pair.y)})" for pair in pairs)
    return f"Length of cartesian product is {len(pairs)}.\n{{{body}}}"


def main(argv: Sequence[str] | None = None) -> int:
    """Build random sets and print some of their cartesian products."""
    parser = argparse.ArgumentParser(
        description="Demonstrate cartesian products of random sets."
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    sets = {
        "A": create_set(3, 90, 65, rng),
        "B": create_set(4, 200, 65, rng),
        "C": create_set(3, 90, 65, rng),
        "D": create_set(3, 90, 65, rng),
    }
    for name, values in sets.items():
        print(f"Set {name}: ")
        print(format_set(values))

    print()
    for left, right in (("A", "A"), ("A", "B"), ("B", "A")):
        print(f"Cartesian product of {left} x {right}: ")
        print(format_relation(cartesian_product(sets[left], sets[right])))
        print("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())