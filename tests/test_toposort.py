import pytest

from algolab.toposort import Digraph, topological_sort

EDGES = [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)]


def _example():
    graph = Digraph(6)
    for src, dest in EDGES:
        graph.add_edge(src, dest)
    return graph


def test_example_order():
    assert _example().topological_order() == [5, 4, 2, 3, 1, 0]


def test_order_respects_edges():
    order = _example().topological_order()
    assert sorted(order) == list(range(6))
    position = {vertex: index for index, vertex in enumerate(order)}
    for src, dest in EDGES:
        assert position[src] < position[dest]


def test_function_matches_class():
    assert topological_sort(6, EDGES) == _example().topological_order()


def test_no_edges_gives_descending_vertices():
    assert topological_sort(4, []) == list(reversed(range(4)))


def test_duplicate_edges_do_not_change_order():
    assert topological_sort(6, EDGES + EDGES) == topological_sort(6, EDGES)


def test_long_chain_does_not_recurse():
    n = 5000
    chain = [(i, i + 1) for i in range(n - 1)]
    assert topological_sort(n, chain) == list(range(n))


def test_cycle_still_orders_all_vertices():
    order = topological_sort(3, [(0, 1), (1, 2), (2, 0)])
    assert sorted(order) == [0, 1, 2]


@pytest.mark.parametrize("edge", [(6, 0), (0, 6), (-1, 2)])
def test_add_edge_out_of_range(edge):
    graph = Digraph(6)
    with pytest.raises(ValueError):
        graph.add_edge(*edge)


def test_negative_vertex_count():
    with pytest.raises(ValueError):
        Digraph(-1)