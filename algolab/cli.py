"""Command line that runs the worked examples of each algorithm."""

from __future__ import annotations

import argparse
from collections.abc import Callable

from algolab.backtracking import n_queens, queens_board, subset_sums
from algolab.knapsack import Item, fractional, greedy_discrete, knapsack_01
from algolab.mst import format_matrix, kruskal, kruskal_by_scan, prim, total_weight
from algolab.paths import INF, dijkstra, floyd_warshall, format_distances, transitive_closure
from algolab.toposort import topological_sort

KRUSKAL_GRAPH = (
    (0, 4, 4, 0, 0, 0),
    (4, 0, 2, 0, 0, 0),
    (4, 2, 0, 3, 4, 2),
    (0, 0, 3, 0, 3, 0),
    (0, 0, 4, 3, 0, 3),
    (0, 0, 2, 0, 3, 0),
)

PRIM_GRAPH = (
    (0, 9, 75, 0, 0),
    (9, 0, 95, 19, 42),
    (75, 95, 0, 51, 66),
    (0, 19, 51, 0, 31),
    (0, 42, 66, 31, 0),
)

FLOYD_GRAPH = (
    (0, INF, 3, INF),
    (2, 0, INF, INF),
    (INF, 7, 0, 1),
    (6, INF, INF, 0),
)

CLOSURE_GRAPH = (
    (1, 1, 0, 1),
    (0, 1, 1, 0),
    (0, 0, 1, 1),
    (0, 0, 0, 1),
)

DIJKSTRA_GRAPH = (
    (0, 4, 0, 0, 0, 0),
    (4, 0, 8, 0, 0, 0),
    (0, 8, 0, 7, 0, 4),
    (0, 0, 7, 0, 9, 14),
    (0, 0, 0, 9, 0, 10),
    (0, 0, 4, 14, 10, 0),
)

TOPO_VERTICES = 6
TOPO_EDGES = ((5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1))

KNAPSACK_WEIGHTS = (10, 20, 30)
KNAPSACK_VALUES = (60, 100, 120)
KNAPSACK_CAPACITY = 50

GREEDY_ITEMS = (Item(10, 60), Item(20, 100), Item(30, 120))

SUBSET_VALUES = (12, 4, 5, 6, 7, 2, 3, 8, 9)
SUBSET_TARGET = 15


def _kruskal(args: argparse.Namespace) -> list[str]:
    tree = kruskal(KRUSKAL_GRAPH)
    return [
        "Input Graph (Adjacency Matrix):",
        format_matrix(KRUSKAL_GRAPH),
        "",
        "Minimum Spanning Tree Edges:",
        *map(str, tree),
        f"Total cost of MST: {total_weight(tree)}",
    ]


def _kruskal_scan(args: argparse.Namespace) -> list[str]:
    tree = kruskal_by_scan(KRUSKAL_GRAPH)
    return [
        "The edges of Minimum Cost Spanning Tree are:",
        *(f"{k} edge ({e.u},{e.v}) = {e.w}" for k, e in enumerate(tree, start=1)),
        f"Minimum cost = {total_weight(tree)}",
    ]


def _prim(args: argparse.Namespace) -> list[str]:
    tree = prim(PRIM_GRAPH)
    return [
        "Edge : Weight",
        *map(str, tree),
        f"Total cost of Minimum Spanning Tree: {total_weight(tree)}",
    ]


def _floyd(args: argparse.Namespace) -> list[str]:
    return [
        "The following matrix shows the shortest distances between every pair of vertices:",
        format_distances(floyd_warshall(FLOYD_GRAPH)),
    ]


def _closure(args: argparse.Namespace) -> list[str]:
    closure = transitive_closure(CLOSURE_GRAPH)
    return [
        "Transitive Closure Matrix:",
        *("".join(f"{v} " for v in row) for row in closure),
    ]


def _dijkstra(args: argparse.Namespace) -> list[str]:
    source = args.source
    dist = dijkstra(DIJKSTRA_GRAPH, source)
    return [
        f"Shortest paths from vertex {source}:",
        f"Vertex   Distance from Source {source}",
        *(f"{vertex}        {d}" for vertex, d in enumerate(dist)),
    ]


def _toposort(args: argparse.Namespace) -> list[str]:
    order = topological_sort(TOPO_VERTICES, TOPO_EDGES)
    return ["Topological ordering of vertices: " + "".join(f"{v} " for v in order)]


def _knapsack(args: argparse.Namespace) -> list[str]:
    best = knapsack_01(KNAPSACK_CAPACITY, KNAPSACK_WEIGHTS, KNAPSACK_VALUES)
    return [f"Maximum value that can be obtained: {best}"]


def _greedy(args: argparse.Namespace) -> list[str]:
    return [
        "Discrete Knapsack Problem:",
        f"Maximum value obtained: {greedy_discrete(GREEDY_ITEMS, KNAPSACK_CAPACITY)}",
        "",
        "Continuous Knapsack Problem:",
        f"Maximum value obtained: {fractional(GREEDY_ITEMS, KNAPSACK_CAPACITY):.2f}",
    ]


def _subset(args: argparse.Namespace) -> list[str]:
    target = args.target
    return [
        f"Finding subset(s) with sum {target}:",
        *(
            "Subset found: { " + "".join(f"{v} " for v in subset) + "}"
            for subset in subset_sums(SUBSET_VALUES, target)
        ),
    ]


def _queens(args: argparse.Namespace) -> list[str]:
    n = args.size
    positions = n_queens(n)
    if positions is None:
        return [f"No solution exists for {n}-Queens"]
    return [
        f"Solution found for {n} queens is:",
        *("".join(f"{v} " for v in row) for row in queens_board(positions)),
    ]


_DEMOS: dict[str, Callable[[argparse.Namespace], list[str]]] = {
    "kruskal": _kruskal,
    "kruskal-scan": _kruskal_scan,
    "prim": _prim,
    "floyd": _floyd,
    "closure": _closure,
    "dijkstra": _dijkstra,
    "toposort": _toposort,
    "knapsack": _knapsack,
    "greedy": _greedy,
    "subset": _subset,
    "queens": _queens,
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algolab", description="Run the worked example of an algorithm."
    )
    commands = parser.add_subparsers(dest="command")
    for name in _DEMOS:
        sub = commands.add_parser(name)
        if name == "dijkstra":
            sub.add_argument("--source", type=int, default=0)
        elif name == "subset":
            sub.add_argument("--target", type=int, default=SUBSET_TARGET)
        elif name == "queens":
            sub.add_argument("size", nargs="?", type=int, default=8)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one example, or all of them when no command is given."""
    parser = _parser()
    args = parser.parse_args(argv)
    if args.command is None:
        defaults = argparse.Namespace(source=0, target=SUBSET_TARGET, size=8)
        blocks = ["\n".join(demo(defaults)) for demo in _DEMOS.values()]
        print("\n\n".join(blocks))
        return 0
    try:
        lines = _DEMOS[args.command](args)
    except ValueError as error:
        parser.error(str(error))
    print("\n".join(lines))
    return 0