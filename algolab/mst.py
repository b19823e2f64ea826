"""Minimum spanning trees over weighted adjacency matrices.

A zero entry in a matrix means that there is no edge between the two vertices.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

Matrix = Sequence[Sequence[int]]


@dataclass(frozen=True)
class Edge:
    """An undirected edge ``u - v`` of weight ``w``."""

    u: int
    v: int
    w: int

    def __str__(self) -> str:
        return f"{self.u} - {self.v} : {self.w}"


def _size(matrix: Matrix) -> int:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return n


def kruskal(matrix: Matrix) -> list[Edge]:
    """Return the spanning tree (or forest) edges chosen by Kruskal's algorithm.

    Candidate edges are read from the lower triangle, so each edge has
    ``u > v``.  Edges of equal weight keep the order in which they were read.
    """
    n = _size(matrix)
    candidates = [
        Edge(i, j, matrix[i][j])
        for i in range(1, n)
        for j in range(i)
        if matrix[i][j] != 0
    ]
    candidates.sort(key=lambda edge: edge.w)

    component = list(range(n))
    tree: list[Edge] = []
    for edge in candidates:
        keep, absorb = component[edge.u], component[edge.v]
        if keep != absorb:
            tree.append(edge)
            component = [keep if c == absorb else c for c in component]
    return tree


def kruskal_by_scan(matrix: Matrix) -> list[Edge]:
    """Return a minimum spanning tree found by repeatedly taking the cheapest edge.

    The whole matrix is scanned row by row for the smallest remaining entry;
    vertices in the returned edges are numbered from 1.  Raises ``ValueError``
    if the graph is not connected.
    """
    n = _size(matrix)
    remaining = {
        (i + 1, j + 1): weight
        for i, row in enumerate(matrix)
        for j, weight in enumerate(row)
        if weight != 0
    }
    parent = [0] * (n + 1)

    def find(vertex: int) -> int:
        while parent[vertex]:
            vertex = parent[vertex]
        return vertex

    tree: list[Edge] = []
    while len(tree) < n - 1:
        if not remaining:
            raise ValueError("graph is not connected")
        (a, b), weight = min(remaining.items(), key=lambda item: item[1])
        root_a, root_b = find(a), find(b)
        if root_a != root_b:
            parent[root_b] = root_a
            tree.append(Edge(a, b, weight))
        remaining.pop((a, b))
        remaining.pop((b, a), None)
    return tree


def prim(matrix: Matrix) -> list[Edge]:
    """Return the minimum spanning tree grown by Prim's algorithm from vertex 0.

    Raises ``ValueError`` if the graph is not connected.
    """
    n = _size(matrix)
    selected = [False] * n
    if n:
        selected[0] = True
    tree: list[Edge] = []
    while len(tree) < n - 1:
        best: Edge | None = None
        for i in range(n):
            if not selected[i]:
                continue
            for j, weight in enumerate(matrix[i]):
                if not selected[j] and weight and (best is None or weight < best.w):
                    best = Edge(i, j, weight)
        if best is None:
            raise ValueError("graph is not connected")
        tree.append(best)
        selected[best.v] = True
    return tree


def total_weight(edges: Iterable[Edge]) -> int:
    """Return the sum of the edge weights."""
    return sum(edge.w for edge in edges)


def format_matrix(matrix: Matrix) -> str:
    """Render a matrix with each entry right-aligned in three columns."""
    return "\n".join("".join(f"{value:3d} " for value in row) for row in matrix)