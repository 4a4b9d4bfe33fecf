"""Sets of distinct random capital letters and operations over two or three sets.

Every binary operation first intersects its operands. When that intersection
is empty, the operation fails with :class:`EmptyIntersectionError`. This holds
for union and difference as well as for intersection, and a failure passes on
through the three-set operations built from them.
"""

from __future__ import annotations

import argparse
import random
import string
from collections.abc import Callable, Sequence

LETTERS = string.ascii_uppercase
NUMBER_OF_RAND_NUMBERS = 10


class EmptyIntersectionError(ValueError):
    """Raised when two sets share no element."""


def random_letters(count: int, rng: random.Random | None = None) -> list[str]:
    """Return ``count`` distinct letters drawn from A..Z."""
    if count < 0:
        raise ValueError("count must not be negative")
    if count > len(LETTERS):
        raise ValueError(f"cannot draw {count} distinct letters from {len(LETTERS)}")
    rng = rng or random.Random()
    return rng.sample(LETTERS, count)


def create_set(count: int, rng: random.Random | None = None) -> list[str]:
    """Create a set of ``count`` distinct random letters."""
    return random_letters(count, rng)


def format_set(letters: Sequence[str]) -> str:
    """Render each letter followed by a space."""
    return "".join(f"{letter} " for letter in letters)


def intersection_two_sets(a: Sequence[str], b: Sequence[str]) -> list[str]:
    """Elements of ``b`` that also occur in ``a``, in the order of ``b``."""
    members = set(a)
    common = [letter for letter in b if letter in members]
    if not common:
        raise EmptyIntersectionError("the sets have no common element")
    return common


def union_two_sets(a: Sequence[str], b: Sequence[str]) -> list[str]:
    """All of ``a`` followed by the elements of ``b`` missing from ``a``."""
    intersection_two_sets(a, b)
    members = set(a)
    return [*a, *(letter for letter in b if letter not in members)]


def difference_two_sets(a: Sequence[str], b: Sequence[str]) -> list[str]:
    """Elements of ``a`` not shared with ``b``, in the order of ``a``."""
    common = set(intersection_two_sets(a, b))
    return [letter for letter in a if letter not in common]


def intersection(a: Sequence[str], b: Sequence[str], c: Sequence[str]) -> list[str]:
    """Elements common to all three sets."""
    return intersection_two_sets(intersection_two_sets(a, b), c)


def union(a: Sequence[str], b: Sequence[str], c: Sequence[str]) -> list[str]:
    """Elements found in any of the three sets."""
    return union_two_sets(union_two_sets(a, b), c)


def difference(a: Sequence[str], b: Sequence[str], c: Sequence[str]) -> list[str]:
    """Elements of ``a`` found in neither ``b`` nor ``c``."""
    return difference_two_sets(difference_two_sets(a, b), c)


def symmetric_difference(
    a: Sequence[str], b: Sequence[str], c: Sequence[str]
) -> list[str]:
    """The union of the three sets without their common elements."""
    return difference_two_sets(union(a, b, c), intersection(a, b, c))


def _show(heading: str, compute: Callable[[], Sequence[str]]) -> None:
    print(heading)
    try:
        result = compute()
    except EmptyIntersectionError:
        return
    print(format_set(result))


def main(argv: Sequence[str] | None = None) -> int:
    """Build three random letter sets and print the results of the operations."""
    parser = argparse.ArgumentParser(
        description="Demonstrate operations on three random sets of letters."
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    set_a = create_set(NUMBER_OF_RAND_NUMBERS, rng)
    set_b = create_set(NUMBER_OF_RAND_NUMBERS, rng)
    set_c = create_set(NUMBER_OF_RAND_NUMBERS, rng)

    for name, letters in (("A", set_a), ("B", set_b), ("C", set_c)):
        _show(f"Set {name}: ", lambda letters=letters: letters)

    _show("Set ABI: ", lambda: intersection_two_sets(set_a, set_b))
    _show("Set BCI: ", lambda: intersection_two_sets(set_b, set_c))
    _show("Set CAI: ", lambda: intersection_two_sets(set_c, set_a))

    _show("Union between A, B and C is:", lambda: union(set_a, set_b, set_c))
    _show(
        "Difference between A, B and C is:",
        lambda: difference(set_a, set_b, set_c),
    )
    _show(
        "Intersection between A, B and C is:",
        lambda: intersection(set_a, set_b, set_c),
    )
    _show(
        "Symmetric difference between A, B and C is:",
        lambda: symmetric_difference(set_a, set_b, set_c),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())