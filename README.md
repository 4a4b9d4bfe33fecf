# discretesets

A small toolkit for exercises in discrete mathematics. It covers operations
on finite sets, Cartesian products of sets, and finding an Euler path in an
undirected graph. Each part can be used as a library and also comes with a
short demonstration command.

Sets are plain Python lists without repeats. Operations return new lists and
never change their inputs.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `discretesets.numeric_sets`

This module works on sets of distinct random integers from 50 to 100
(`LOWEST` to `HIGHEST`).

- `random_numbers(count, rng=None)` draws `count` distinct integers from that
  range. It raises `ValueError` if `count` is negative or larger than the
  number of values in the range.
- `create_set(count, rng=None)` builds a set in the same way.
- `intersection(a, b)` returns the elements of `b` that are also in `a`, in
  the order of `b`.
- `union(a, b)` returns all of `a`, followed by the elements of `b` that are
  missing from `a`.
- `difference(a, b)` returns the elements of `a` that are not in `b`, in the
  order of `a`.
- `symmetric_difference(a, b)` is the union of `difference(a, b)` and
  `difference(b, a)`.
- `format_set(values)` renders each value followed by a tab.

`rng` is an optional `random.Random`. Pass a seeded one to get repeatable
sets.

### `discretesets.letter_sets`

This module works on sets of distinct random capital letters, `A` to `Z`.

- `random_letters(count, rng=None)` draws `count` distinct letters, and
  `create_set(count, rng=None)` builds a set from them. Both raise
  `ValueError` if `count` is negative or greater than 26.
- The two-set operations are `intersection_two_sets(a, b)`,
  `union_two_sets(a, b)` and `difference_two_sets(a, b)`.
- The three-set operations are `intersection(a, b, c)`, `union(a, b, c)`,
  `difference(a, b, c)` and `symmetric_difference(a, b, c)`. They are built
  from the two-set operations.
- `format_set(letters)` renders each letter followed by a space.

Every two-set operation first intersects its operands. If the two sets have
no element in common, it raises `EmptyIntersectionError`, a subclass of
`ValueError`. This applies to union and difference too, not just to
intersection. The error also passes up through the three-set operations.

### `discretesets.relations`

This module works on random integer sets and the binary relations built from
them.

- `random_numbers(count, maximum, minimum, rng=None)` draws distinct integers
  from the closed range `[minimum, maximum]`. It raises `ValueError` in three
  cases: `count` is negative, `minimum` exceeds `maximum`, or the range is too
  small. `create_set(count, maximum, minimum, rng=None)` builds a set in the
  same way.
- `Pair` is a frozen dataclass with fields `x` and `y`.
- `cartesian_product(a, b)` returns every `Pair(x, y)` with `x` from `a` and
  `y` from `b`. The pairs are in row-major order.
- `format_set(values)` renders each value as the character with that code,
  followed by a tab.
- `format_relation(pairs)` renders the relation's length on one line. The
  next line holds the pairs as characters, for example `{(A, C),(A, D)}`.

### `discretesets.euler`

This module works on an undirected graph given as a square adjacency matrix,
where `1` marks an edge.

- `has_euler_path(graph)` returns true when at most two vertices have odd
  degree. It counts degrees only and does not check that the graph is
  connected.
- `euler_path(graph)` walks every edge once with a stack. It starts from the
  first vertex of odd degree, or from vertex 0 when there is none. It returns
  the zero-based vertices in the order they were visited. The input matrix is
  not modified.
- `format_path(path)` renders a path as 1-based vertex numbers separated by
  spaces.

Both graph functions raise `ValueError` for an empty or non-square matrix.

## Example

```python
import random

from discretesets import euler, numeric_sets, relations

rng = random.Random(7)
a = numeric_sets.create_set(5, rng)
b = numeric_sets.create_set(5, rng)
print(numeric_sets.format_set(numeric_sets.union(a, b)))

pairs = relations.cartesian_product([65, 66], [67, 68])
print(relations.format_relation(pairs))

graph = euler.SAMPLE_GRAPH
if euler.has_euler_path(graph):
    print(euler.format_path(euler.euler_path(graph)))
```

## Commands

Each command runs a short demonstration and prints its results:

```
discretesets-euler       # checks a built-in sample graph and prints its Euler path
discretesets-numbers     # two random number sets and their union, difference, ...
discretesets-letters     # three random letter sets and their combinations
discretesets-relations   # random sets and their Cartesian products
```

`discretesets-numbers`, `discretesets-letters` and `discretesets-relations`
accept `--seed N` for repeatable output. `discretesets-letters` prints a
heading with no result line below it when an operation raises
`EmptyIntersectionError`.

## Limitations

The commands work only on built-in or randomly generated data. They do not
read sets or graphs from files or from standard input. `discretesets-euler`
always uses `euler.SAMPLE_GRAPH`.