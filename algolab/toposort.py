"""Topological ordering of directed graphs by depth-first search."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class Digraph:
    """A directed graph on the vertices ``0 .. vertices - 1``."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("vertex count cannot be negative")
        self.vertices = vertices
        self._successors: list[set[int]] = [set() for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise ValueError(f"vertex {vertex} out of range")

    def add_edge(self, src: int, dest: int) -> None:
        """Add the edge ``src -> dest``."""
        self._check(src)
        self._check(dest)
        self._successors[src].add(dest)

    def _successors_of(self, vertex: int) -> Iterator[int]:
        return iter(sorted(self._successors[vertex]))

    def topological_order(self) -> list[int]:
        """Return the vertices in reverse depth-first finishing order.

        Roots and successors are visited in ascending order.  Cycles are not
        detected; a cyclic graph still yields an ordering of all vertices.
        """
        visited = [False] * self.vertices
        finished: list[int] = []
        for root in range(self.vertices):
            if visited[root]:
                continue
            visited[root] = True
            stack = [(root, self._successors_of(root))]
            while stack:
                vertex, successors = stack[-1]
                for nxt in successors:
                    if not visited[nxt]:
                        visited[nxt] = True
                        stack.append((nxt, self._successors_of(nxt)))
                        break
                else:
                    stack.pop()
                    finished.append(vertex)
        finished.reverse()
        return finished


def topological_sort(vertices: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return a topological order of the graph with the given vertices and edges."""
    graph = Digraph(vertices)
    for src, dest in edges:
        graph.add_edge(src, dest)
    return graph.topological_order()