import pytest
from graphalgo import DisjointSet, Edge, Graph, OutOfRangeError, mst_kruskal, mst_prim

EXAMPLE_EDGES = [(0, 1, 2), (0, 3, 6), (1, 2, 3), (1, 3, 8), (1, 4, 5), (2, 4, 7), (3, 4, 9)]


def _graph(vertices, edges) -> Graph:
    graph = Graph(vertices, weighted=True)
    for u, v, w in edges:
        graph.add_edge(u, v, w)
    return graph


def _is_forest(vertices, tree):
    dsu = DisjointSet(vertices)
    return all(dsu.union(e.source, e.destination) for e in tree.edges)


@pytest.mark.parametrize("mst", [mst_kruskal, mst_prim])
def test_example_weight(mst):
    graph = _graph(5, EXAMPLE_EDGES)
    tree = mst(graph)
    assert tree.weight == 16
    assert tree.is_spanning(5)
    assert _is_forest(5, tree)
    assert sum(e.weight for e in tree.edges) == tree.weight


def test_kruskal_takes_edges_lightest_first():
    tree = mst_kruskal(_graph(5, EXAMPLE_EDGES))
    assert tree.edges == [Edge(0, 1, 2), Edge(1, 2, 3), Edge(1, 4, 5), Edge(0, 3, 6)]


def test_prim_grows_from_source():
    tree = mst_prim(_graph(5, EXAMPLE_EDGES), source=4)
    assert tree.edges[0] == Edge(4, 1, 5)
    assert tree.weight == 16


def test_equal_weights_keep_insertion_order():
    graph = _graph(3, [(0, 1, 1), (1, 2, 1), (0, 2, 1)])
    assert mst_kruskal(graph).edges == [Edge(0, 1, 1), Edge(1, 2, 1)]


def test_parallel_edges_use_lightest():
    graph = _graph(2, [(0, 1, 5), (0, 1, 2)])
    assert mst_kruskal(graph).weight == 2
    assert mst_prim(graph).weight == 2


def test_disconnected_graph():
    graph = _graph(5, [(0, 1, 1), (1, 2, 2), (3, 4, 3)])
    forest = mst_kruskal(graph)
    assert forest.weight == 6
    assert not forest.is_spanning(5)
    # Prim only reaches the source's component
    assert mst_prim(graph).weight == 3
    assert mst_prim(graph, source=3).edges == [Edge(3, 4, 3)]


def test_trivial_graphs():
    assert mst_kruskal(Graph(0, weighted=True)).edges == []
    assert mst_prim(Graph(0, weighted=True)).weight == 0
    single = mst_prim(Graph(1, weighted=True))
    assert single.edges == [] and single.is_spanning(1)


def test_prim_out_of_range_source():
    with pytest.raises(OutOfRangeError):
        mst_prim(_graph(5, EXAMPLE_EDGES), source=5)
