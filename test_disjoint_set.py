import itertools
import numpy as np
import pytest
from graphalgo import DisjointSet, Graph, MergeStrategy, OutOfRangeError, connected_components


@pytest.mark.parametrize("strategy", list(MergeStrategy))
def test_union_and_connectivity(strategy):
    dsu = DisjointSet(6, strategy=strategy)
    dsu.union(0, 1)
    dsu.union(1, 2)
    dsu.union(3, 4)
    assert dsu.is_connected(0, 2)
    assert not dsu.is_connected(0, 3)
    dsu.union(2, 3)
    assert dsu.is_connected(0, 3)
    assert dsu.num_sets == 2
    assert dsu.set_size(4) == 5
    assert dsu.groups() == [[0, 1, 2, 3, 4], [5]]


@pytest.mark.parametrize("strategy", list(MergeStrategy))
def test_union_returns_whether_it_merged(strategy):
    dsu = DisjointSet(3, strategy=strategy)
    assert dsu.union(0, 1)
    assert not dsu.union(1, 0)
    assert not dsu.union(2, 2)


def test_rank_ties_increment_rank():
    dsu = DisjointSet(4, strategy=MergeStrategy.RANK)
    dsu.union(0, 1)
    root = dsu.find(0)
    assert dsu.rank[root] == 1
    dsu.union(2, 0)
    assert dsu.find(2) == root
    assert dsu.rank[root] == 1


def test_size_attaches_smaller_under_larger():
    dsu = DisjointSet(4, strategy=MergeStrategy.SIZE)
    dsu.union(0, 1)
    dsu.union(1, 2)
    big = dsu.find(0)
    dsu.union(3, 0)
    assert dsu.find(3) == big
    assert dsu.size[big] == 4


def test_find_compresses_path():
    dsu = DisjointSet(5, strategy=MergeStrategy.SIZE)
    # Build the chain 0 -> 1 -> 2 -> 3 -> 4 by hand
    dsu.parent = [1, 2, 3, 4, 4]
    assert dsu.find(0) == 4
    assert dsu.parent == [4, 4, 4, 4, 4]


def test_deep_chain_does_not_recurse():
    n = 100000
    dsu = DisjointSet(n)
    dsu.parent = list(range(1, n)) + [n - 1]
    assert dsu.find(0) == n - 1


def test_equivalence_relation_on_random_unions():
    rng = np.random.RandomState(0)
    for strategy in MergeStrategy:
        dsu = DisjointSet(20, strategy=strategy)
        pairs = rng.randint(0, 20, size=(15, 2))
        for x, y in pairs:
            dsu.union(int(x), int(y))
            assert dsu.find(int(x)) == dsu.find(int(y))
        for x in range(20):
            assert dsu.is_connected(x, x)
        for x, y in itertools.product(range(20), repeat=2):
            assert dsu.is_connected(x, y) == dsu.is_connected(y, x)
        for x, y, z in itertools.combinations(range(20), 3):
            if dsu.is_connected(x, y) and dsu.is_connected(y, z):
                assert dsu.is_connected(x, z)


def test_strategies_agree():
    rng = np.random.RandomState(1)
    by_rank = DisjointSet(30, strategy='rank')
    by_size = DisjointSet(30, strategy='size')
    for x, y in rng.randint(0, 30, size=(25, 2)):
        by_rank.union(int(x), int(y))
        by_size.union(int(x), int(y))
    assert by_rank.groups() == by_size.groups()


def test_out_of_range():
    dsu = DisjointSet(2)
    with pytest.raises(OutOfRangeError):
        dsu.find(2)
    with pytest.raises(OutOfRangeError):
        dsu.union(0, -1)


def test_connected_components_ignores_direction():
    graph = Graph(6, directed=True)
    graph.add_edge(1, 0)
    graph.add_edge(2, 1)
    graph.add_edge(3, 4)
    assert connected_components(graph) == [[0, 1, 2], [3, 4], [5]]
