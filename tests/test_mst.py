import pytest

from algolab.mst import (
    Edge,
    format_matrix,
    kruskal,
    kruskal_by_scan,
    prim,
    total_weight,
)

SIX = [
    [0, 4, 4, 0, 0, 0],
    [4, 0, 2, 0, 0, 0],
    [4, 2, 0, 3, 4, 2],
    [0, 0, 3, 0, 3, 0],
    [0, 0, 4, 3, 0, 3],
    [0, 0, 2, 0, 3, 0],
]

FIVE = [
    [0, 9, 75, 0, 0],
    [9, 0, 95, 19, 42],
    [75, 95, 0, 51, 66],
    [0, 19, 51, 0, 31],
    [0, 42, 66, 31, 0],
]

DISCONNECTED = [
    [0, 1, 0, 0],
    [1, 0, 0, 0],
    [0, 0, 0, 5],
    [0, 0, 5, 0],
]


def _connects_all(edges, vertices):
    reached = {vertices[0]}
    changed = True
    while changed:
        changed = False
        for edge in edges:
            if (edge.u in reached) != (edge.v in reached):
                reached |= {edge.u, edge.v}
                changed = True
    return reached == set(vertices)


def test_kruskal_example_cost():
    assert total_weight(kruskal(SIX)) == 14


def test_kruskal_spans_graph():
    tree = kruskal(SIX)
    assert len(tree) == len(SIX) - 1
    assert _connects_all(tree, list(range(len(SIX))))


def test_kruskal_edges_in_weight_order_from_lower_triangle():
    tree = kruskal(SIX)
    weights = [edge.w for edge in tree]
    assert weights == sorted(weights)
    assert all(edge.u > edge.v for edge in tree)
    assert all(SIX[edge.u][edge.v] == edge.w for edge in tree)


def test_kruskal_disconnected_gives_forest():
    forest = kruskal(DISCONNECTED)
    assert len(forest) == len(DISCONNECTED) - 2


def test_kruskal_by_scan_matches_kruskal_cost():
    assert total_weight(kruskal_by_scan(SIX)) == total_weight(kruskal(SIX))


def test_kruskal_by_scan_uses_one_based_vertices():
    tree = kruskal_by_scan(SIX)
    n = len(SIX)
    assert len(tree) == n - 1
    assert all(1 <= edge.u <= n and 1 <= edge.v <= n for edge in tree)
    assert all(SIX[edge.u - 1][edge.v - 1] == edge.w for edge in tree)
    assert _connects_all(tree, list(range(1, n + 1)))


def test_kruskal_by_scan_disconnected_raises():
    with pytest.raises(ValueError):
        kruskal_by_scan(DISCONNECTED)


def test_prim_example():
    assert prim(FIVE) == [Edge(0, 1, 9), Edge(1, 3, 19), Edge(3, 4, 31), Edge(3, 2, 51)]


def test_prim_matches_kruskal_cost():
    assert total_weight(prim(FIVE)) == total_weight(kruskal(FIVE))
    assert total_weight(prim(SIX)) == total_weight(kruskal(SIX))


def test_prim_disconnected_raises():
    with pytest.raises(ValueError):
        prim(DISCONNECTED)


@pytest.mark.parametrize("algorithm", [kruskal, kruskal_by_scan, prim])
def test_non_square_matrix_rejected(algorithm):
    with pytest.raises(ValueError):
        algorithm([[0, 1], [1]])


@pytest.mark.parametrize("algorithm", [kruskal, kruskal_by_scan, prim])
def test_single_vertex_has_empty_tree(algorithm):
    assert algorithm([[0]]) == []


def test_total_weight_sums_edges():
    edges = [Edge(0, 1, 3), Edge(1, 2, 5)]
    assert total_weight(edges) == 3 + 5


def test_format_matrix_layout():
    assert format_matrix([[0, 4], [4, 0]]) == "  0   4 \n  4   0 "


def test_edge_str():
    assert str(Edge(2, 1, 2)) == "2 - 1 : 2"