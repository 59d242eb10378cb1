import numpy as np
import pytest
from graphalgo import Edge, Graph, GraphError, OutOfRangeError


def test_undirected_edge_stores_both_arcs():
    graph = Graph(3)
    graph.add_edge(0, 1)
    assert graph.neighbors(0) == [1]
    assert graph.neighbors(1) == [0]
    assert graph.edges() == [Edge(0, 1, 1)]
    assert len(list(graph.arcs())) == 2


def test_directed_edge_stores_one_arc():
    graph = Graph(3, directed=True)
    graph.add_edge(0, 1)
    assert graph.neighbors(0) == [1]
    assert graph.neighbors(1) == []


def test_unweighted_duplicates_are_suppressed():
    graph = Graph(3)
    graph.add_edge(0, 1)
    graph.add_edge(0, 1)
    graph.add_edge(1, 0)
    assert graph.neighbors(0) == [1]
    assert graph.neighbors(1) == [0]
    assert graph.num_edges == 1


def test_weighted_keeps_parallel_edges():
    graph = Graph(2, directed=True, weighted=True)
    graph.add_edge(0, 1, 5)
    graph.add_edge(0, 1, 2)
    assert [e.weight for e in graph.edges_from(0)] == [5, 2]
    assert graph.to_matrix()[0, 1] == 2


def test_self_loop_stored_once():
    graph = Graph(2, weighted=True)
    graph.add_edge(1, 1, 3)
    assert graph.edges_from(1) == [Edge(1, 1, 3)]


@pytest.mark.parametrize("source,destination", [(3, 0), (0, 3), (-1, 0)])
def test_out_of_range_edge(source, destination):
    graph = Graph(3)
    with pytest.raises(OutOfRangeError):
        graph.add_edge(source, destination)
    assert graph.num_edges == 0


def test_weight_on_unweighted_graph():
    graph = Graph(2)
    with pytest.raises(GraphError):
        graph.add_edge(0, 1, 4)


def test_negative_vertex_count():
    with pytest.raises(ValueError):
        Graph(-1)


def test_transpose_reverses_arcs():
    graph = Graph(3, directed=True, weighted=True)
    graph.add_edge(0, 1, 4)
    graph.add_edge(1, 2, -2)
    transposed = graph.transpose()
    assert transposed.edges_from(1) == [Edge(1, 0, 4)]
    assert transposed.edges_from(2) == [Edge(2, 1, -2)]
    assert transposed.edges_from(0) == []
    # The original is untouched
    assert graph.edges_from(0) == [Edge(0, 1, 4)]


def test_matrix_round_trip():
    A = np.array([[0, 2, 0],
                  [0, 0, 3],
                  [1, 0, 0]], dtype=float)
    graph = Graph.from_matrix(A, directed=True, weighted=True)
    assert graph.num_edges == 3
    np.testing.assert_array_equal(graph.to_matrix(), A)


def test_from_symmetric_matrix_reads_each_edge_once():
    A = np.array([[0, 1, 1],
                  [1, 0, 0],
                  [1, 0, 0]])
    graph = Graph.from_matrix(A, directed=False)
    assert graph.edges() == [Edge(0, 1, 1), Edge(0, 2, 1)]
    assert sorted(graph.neighbors(0)) == [1, 2]
