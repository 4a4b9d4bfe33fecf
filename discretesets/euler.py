"""Euler path detection and construction on undirected graphs.

Graphs are square adjacency matrices in which ``1`` marks an edge.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence

Graph = Sequence[Sequence[int]]

SAMPLE_GRAPH: tuple[tuple[int, ...], ...] = (
    (0, 1, 0, 0, 0),
    (1, 0, 1, 0, 1),
    (0, 1, 0, 1, 0),
    (0, 0, 1, 0, 1),
    (0, 1, 0, 1, 0),
)


def _validate(graph: Graph) -> int:
    size = len(graph)
    if size == 0:
        raise ValueError("graph has no vertices")
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    return size


def _degree(row: Sequence[int]) -> int:
    return sum(1 for cell in row if cell == 1)


def has_euler_path(graph: Graph) -> bool:
    """Return True when at most two vertices have odd degree."""
    _validate(graph)
    odd = sum(1 for row in graph if _degree(row) % 2 == 1)
    return odd <= 2


def euler_path(graph: Graph) -> list[int]:
    """Walk every edge once, starting at the first odd-degree vertex.

    Vertices are returned zero-based. The input matrix is left untouched.
    """
    size = _validate(graph)
    edges = [[cell == 1 for cell in row] for row in graph]

    start = next(
        (vertex for vertex, row in enumerate(graph) if _degree(row) % 2 == 1),
        0,
    )

    stack: list[int] = []
    path: list[int] = []
    current = start

    while stack or any(edges[current]):
        if not any(edges[current]):
            path.append(current)
            current = stack.pop()
            continue
        neighbour = next(v for v in range(size) if edges[current][v])
        stack.append(current)
        edges[current][neighbour] = False
        edges[neighbour][current] = False
        current = neighbour

    path.append(current)
    return path


def format_path(path: Sequence[int]) -> str:
    """Render a zero-based vertex path as one-based numbers separated by spaces."""
    return " ".join(str(vertex + 1) for vertex in path)


def main(argv: Sequence[str] | None = None) -> int:
    """Report whether the sample graph has an Euler path and print it."""
    parser = argparse.ArgumentParser(
        description="Find an Euler path in the sample graph."
    )
    parser.parse_args(argv)

    if has_euler_path(SAMPLE_GRAPH):
        print("Yes")
        print(format_path(euler_path(SAMPLE_GRAPH)))
    else:
        print("No")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())