"""All-pairs and single-source shortest paths, and transitive closure."""

from __future__ import annotations

from collections.abc import Sequence

INF = 99999
"""Distance used for vertices that cannot be reached."""

Matrix = Sequence[Sequence[int]]


def _size(graph: Matrix) -> int:
    n = len(graph)
    if any(len(row) != n for row in graph):
        raise ValueError("adjacency matrix must be square")
    return n


def floyd_warshall(graph: Matrix, inf: int = INF) -> list[list[int]]:
    """Return the matrix of shortest distances between every pair of vertices.

    Entries equal to ``inf`` mean there is no edge; they stay ``inf`` in the
    result when no path exists.
    """
    n = _size(graph)
    dist = [list(row) for row in graph]
    for k in range(n):
        for i in range(n):
            if dist[i][k] == inf:
                continue
            for j in range(n):
                if dist[k][j] == inf:
                    continue
                through = dist[i][k] + dist[k][j]
                if through < dist[i][j]:
                    dist[i][j] = through
    return dist


def transitive_closure(graph: Matrix) -> list[list[int]]:
    """Return the reachability matrix (entries 0 or 1) by Warshall's algorithm."""
    n = _size(graph)
    closure = [[1 if value else 0 for value in row] for row in graph]
    for k in range(n):
        for i in range(n):
            if not closure[i][k]:
                continue
            for j in range(n):
                if closure[k][j]:
                    closure[i][j] = 1
    return closure


def dijkstra(graph: Matrix, source: int) -> list[int]:
    """Return the shortest distance from ``source`` to every vertex.

    A zero entry means there is no edge.  Unreachable vertices get ``INF``.
    """
    n = _size(graph)
    if not 0 <= source < n:
        raise ValueError(f"source vertex {source} out of range")
    dist = [INF] * n
    dist[source] = 0
    done = [False] * n
    for _ in range(n - 1):
        u = min(
            (i for i in range(n) if not done[i]),
            key=lambda i: (dist[i], -i),
        )
        done[u] = True
        if dist[u] == INF:
            continue
        for v, weight in enumerate(graph[u]):
            if not done[v] and weight and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist


def format_distances(dist: Matrix, inf: int = INF) -> str:
    """Render a distance matrix with tab-separated entries and ``INF`` for ``inf``."""
    return "\n".join(
        "".join(("INF" if value == inf else str(value)) + "\t" for value in row)
        for row in dist
    )