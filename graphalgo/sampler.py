from typing import List, Tuple
import numpy as np
from .algorithms import Grid
from .graph import Array, Graph


def random_er_graph(rng: np.random.RandomState, nb_nodes, p=0.5, directed=False, acyclic=False,
                    weighted=False, low=0.0, high=1.0) -> Array:
    """Random Erdos-Renyi graph as a dense matrix; non-zero entries are edges."""

    mat = rng.binomial(1, p, size=(nb_nodes, nb_nodes))
    np.fill_diagonal(mat, 0)
    if not directed:
        mat = np.triu(mat, k=1)
        mat = mat + mat.T
    elif acyclic:
        mat = np.triu(mat, k=1)
        perm = rng.permutation(nb_nodes)  # To allow nontrivial solutions
        mat = mat[perm, :][:, perm]
    if weighted:
        weights = rng.uniform(low=low, high=high, size=(nb_nodes, nb_nodes))
        if not directed:
            weights = np.triu(weights, k=1)
            weights = weights + weights.T
        mat = mat.astype(float) * weights
    return mat


def random_community_graph(rng: np.random.RandomState, nb_nodes, k=4, p=0.5, eps=0.01) -> Array:
    """Directed graph of k dense communities joined by sparse one-way links."""
    if k > nb_nodes:
        raise ValueError(f'Cannot generate graph of too many ({k}) communities.')
    # Contiguous blocks of nb_nodes // k, the last one takes the remainder
    labels = np.minimum(np.arange(nb_nodes) // (nb_nodes // k), k - 1)
    same = labels[:, None] == labels[None, :]
    forward = labels[:, None] < labels[None, :]

    mat = rng.binomial(1, p, size=(nb_nodes, nb_nodes)) * same
    # Links only run towards later communities, so they close no new cycle
    mat = mat + rng.binomial(1, eps, size=(nb_nodes, nb_nodes)) * forward
    np.fill_diagonal(mat, 0)
    perm = rng.permutation(nb_nodes)  # To allow nontrivial solutions
    return mat[perm, :][:, perm]


def connect(rng: np.random.RandomState, mat: Array, low=0.0, high=1.0) -> Array:
    """Threads an undirected path through all nodes in random order."""
    mat = np.array(mat, dtype=float)
    perm = rng.permutation(mat.shape[0])
    for u, v in zip(perm[:-1], perm[1:]):
        if mat[u, v] == 0:
            w = rng.uniform(low=low, high=high) if high > low else 1.0
            mat[u, v] = mat[v, u] = w if w != 0 else high
    return mat


def random_obstacles(rng: np.random.RandomState, size, p=0.25) -> Array:
    return rng.binomial(1, p, size=(size, size)).astype(bool)


def traversal_sampler(
    rng: np.random.RandomState,
    length: int,
    p: Tuple[float, ...] = (0.5,),
) -> List:
    mat = random_er_graph(rng=rng,
                          nb_nodes=length, p=rng.choice(p),
                          directed=True, acyclic=False, weighted=False)
    return [Graph.from_matrix(mat, directed=True)]


def topo_sampler(
    rng: np.random.RandomState,
    length: int,
    p: Tuple[float, ...] = (0.5,),
) -> List:
    mat = random_er_graph(rng=rng,
                          nb_nodes=length, p=rng.choice(p),
                          directed=True, acyclic=True, weighted=False)
    return [Graph.from_matrix(mat, directed=True)]


def scc_sampler(
    rng: np.random.RandomState,
    length: int,
    k: int = 4,
    p: Tuple[float, ...] = (0.5,),
    eps: float = 0.01,
) -> List:
    mat = random_community_graph(rng=rng, nb_nodes=length, k=min(k, length),
                                 p=rng.choice(p), eps=eps)
    return [Graph.from_matrix(mat, directed=True)]


def mst_sampler(
    rng: np.random.RandomState,
    length: int,
    p: Tuple[float, ...] = (0.2,),
    low: float = 0.,
    high: float = 1.,
) -> List:
    mat = random_er_graph(rng=rng,
                          nb_nodes=length,
                          p=rng.choice(p),
                          directed=False,
                          acyclic=False,
                          weighted=True,
                          low=low,
                          high=high)
    mat = connect(rng, mat, low=low, high=high)
    return [Graph.from_matrix(mat, directed=False, weighted=True)]


def shortest_path_sampler(
    rng: np.random.RandomState,
    length: int,
    p: Tuple[float, ...] = (0.5,),
    low: float = 0.,
    high: float = 1.,
) -> List:
    mat = random_er_graph(rng=rng,
                          nb_nodes=length,
                          p=rng.choice(p),
                          directed=True,
                          acyclic=False,
                          weighted=True,
                          low=max(low, 0.),
                          high=high)
    source_node = int(rng.choice(length))
    return [Graph.from_matrix(mat, directed=True, weighted=True), source_node]


def all_pairs_sampler(
    rng: np.random.RandomState,
    length: int,
    p: Tuple[float, ...] = (0.5,),
    low: float = -1.,
    high: float = 1.,
) -> List:
    # Acyclic, so negative weights never close a negative cycle
    mat = random_er_graph(rng=rng,
                          nb_nodes=length,
                          p=rng.choice(p),
                          directed=True,
                          acyclic=True,
                          weighted=True,
                          low=low,
                          high=high)
    return [Graph.from_matrix(mat, directed=True, weighted=True)]


def grid_sampler(
    rng: np.random.RandomState,
    length: int,
    p: Tuple[float, ...] = (0.25,),
) -> List:
    size = max(int(np.ceil(np.sqrt(length))), 1)
    grid = Grid.from_array(random_obstacles(rng, size, p=rng.choice(p)))
    start = (int(rng.randint(size)), int(rng.randint(size)))
    goal = (int(rng.randint(size)), int(rng.randint(size)))
    grid.set_obstacle(*start, blocked=False)
    grid.set_obstacle(*goal, blocked=False)
    return [grid, start, goal]


SAMPLER_REGISTRY = {
    'bfs': traversal_sampler,
    'dfs': traversal_sampler,
    'dfs_recursive': traversal_sampler,
    'connected_components': traversal_sampler,
    'topological_sort_kahn': topo_sampler,
    'topological_sort_dfs': topo_sampler,
    'strongly_connected_components': scc_sampler,
    'mst_kruskal': mst_sampler,
    'mst_prim': mst_sampler,
    'dijkstra': shortest_path_sampler,
    'bellman_ford': shortest_path_sampler,
    'floyd_warshall': all_pairs_sampler,
    'johnson': all_pairs_sampler,
    'a_star': grid_sampler,
}
