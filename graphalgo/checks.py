"""Property checks run against sampled inputs.

Each check receives the sampled arguments and the algorithm's result and
raises `CheckError` when a property fails. Shortest path and spanning tree
checks also recompute the answer with the sibling algorithm and compare.
"""

import collections
import logging
import time
from typing import Callable, Dict, List, NamedTuple

import numpy as np
from tqdm import tqdm

from . import algorithms
from .algorithm import Algorithm
from .algorithms import DisjointSet, Grid
from .config import CheckConfig
from .errors import CheckError
from .graph import Graph
from .specs import Algorithm as AlgorithmEnum
from .specs import Cell

logger = logging.getLogger(__name__)


class CheckResult(NamedTuple):
    algorithm: AlgorithmEnum
    size: int
    samples: int
    failures: int
    errors: List[str]

    @property
    def passed(self) -> bool:
        return self.failures == 0


class BenchResult(NamedTuple):
    algorithm: AlgorithmEnum
    size: int
    samples: int
    mean_ms: float
    max_ms: float


def _expect(condition: bool, message: str):
    if not condition:
        raise CheckError(message)


def _undirected_copy(graph: Graph) -> Graph:
    undirected = Graph(graph.vertices, directed=False)
    for e in graph.edges():
        undirected.add_edge(e.source, e.destination)
    return undirected


def check_covers_all(graph: Graph, order: List[int]):
    _expect(sorted(order) == list(range(graph.vertices)),
            f"Traversal visited {order}, expected every vertex once")


def check_partition(graph: Graph, groups: List[List[int]]):
    flat = sorted(v for group in groups for v in group)
    _expect(flat == list(range(graph.vertices)), f"Groups {groups} do not partition the vertices")


def check_connected_components(graph: Graph, groups: List[List[int]]):
    check_partition(graph, groups)
    undirected = _undirected_copy(graph)
    for group in groups:
        reach = algorithms.bfs(undirected, group[0])
        _expect(sorted(reach) == sorted(group), f"Component {group} differs from reachable set {reach}")


def check_topological_order(graph: Graph, result: algorithms.TopologicalOrder):
    _expect(result.is_acyclic, "Acyclic graph reported as cyclic")
    _expect(len(result.order) == graph.vertices, "Order does not cover every vertex")
    position = {v: i for i, v in enumerate(result.order)}
    for e in graph.arcs():
        _expect(position[e.source] < position[e.destination],
                f"Arc {e.source}->{e.destination} is out of order")


def check_scc(graph: Graph, components: List[List[int]]):
    check_partition(graph, components)
    transposed = graph.transpose()
    for comp in components:
        forward = set(algorithms.bfs(graph, comp[0]))
        backward = set(algorithms.bfs(transposed, comp[0]))
        _expect(forward & backward == set(comp),
                f"Component {comp} is not the set of mutually reachable vertices")


def _check_tree(graph: Graph, tree: algorithms.SpanningTree):
    _expect(tree.is_spanning(graph.vertices), f"Tree has {len(tree.edges)} edges for {graph.vertices} vertices")
    dsu = DisjointSet(graph.vertices)
    for e in tree.edges:
        _expect(dsu.union(e.source, e.destination), f"Tree edge {e} closes a cycle")
    _expect(np.isclose(tree.weight, sum(e.weight for e in tree.edges)), "Tree weight is not the sum of its edges")


def check_mst(graph: Graph, tree: algorithms.SpanningTree):
    _check_tree(graph, tree)
    kruskal = algorithms.mst_kruskal(graph)
    prim = algorithms.mst_prim(graph)
    _expect(np.isclose(kruskal.weight, prim.weight),
            f"Kruskal weight {kruskal.weight} differs from Prim weight {prim.weight}")


def check_single_source(graph: Graph, source: int, result: algorithms.ShortestPaths):
    reference = algorithms.bellman_ford(graph, source)
    other = algorithms.dijkstra(graph, source)
    _expect(np.allclose(reference.distances, other.distances),
            f"Dijkstra {other.distances} and Bellman-Ford {reference.distances} disagree")
    _expect(other.predecessors == reference.predecessors,
            f"Dijkstra predecessors {other.predecessors} and Bellman-Ford {reference.predecessors} disagree")
    _expect(np.allclose(result.distances, reference.distances), "Distances differ from Bellman-Ford")
    for v in range(graph.vertices):
        path = result.path_to(v)
        if result.is_reachable(v):
            _expect(path[0] == source and path[-1] == v, f"Bad path {path} to {v}")
        else:
            _expect(path == [], f"Unreached vertex {v} has path {path}")


def check_all_pairs(graph: Graph, result: algorithms.AllPairsShortestPaths):
    floyd = algorithms.floyd_warshall(graph)
    johnson = algorithms.johnson(graph)
    _expect(np.allclose(floyd.distances, johnson.distances), "Johnson and Floyd-Warshall disagree")
    _expect(not result.has_negative_cycle, "Acyclic graph reported a negative cycle")
    for i in range(graph.vertices):
        for j in range(graph.vertices):
            path = result.path(i, j)
            if np.isfinite(result.distances[i, j]):
                _expect(path[0] == i and path[-1] == j, f"Bad path {path} for {i}->{j}")
            else:
                _expect(path == [], f"Unreachable pair {i}->{j} has path {path}")


def _grid_distance(grid: Grid, start: Cell, goal: Cell) -> float:
    dist = {start: 0}
    queue = collections.deque([start])
    while queue:
        cell = queue.popleft()
        if cell == goal:
            return dist[cell]
        for nxt in grid.neighbors(cell):
            if nxt not in dist:
                dist[nxt] = dist[cell] + 1
                queue.append(nxt)
    return np.inf


def check_a_star(grid: Grid, start: Cell, goal: Cell, path: List[Cell]):
    expected = _grid_distance(grid, start, goal)
    if not path:
        _expect(np.isinf(expected), f"A* found no path but {goal} is {expected} steps away")
        return
    _expect(path[0] == start and path[-1] == goal, f"Path {path} does not join {start} and {goal}")
    _expect(len(path) - 1 == expected, f"Path has {len(path) - 1} steps, shortest is {expected}")
    for a, b in zip(path[:-1], path[1:]):
        _expect(abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1, f"Step {a}->{b} is not a unit move")
        _expect(not grid.is_obstacle(*b), f"Path crosses obstacle {b}")


CHECK_REGISTRY: Dict[str, Callable] = {
    'bfs': check_covers_all,
    'dfs': check_covers_all,
    'dfs_recursive': check_covers_all,
    'connected_components': check_connected_components,
    'topological_sort_kahn': check_topological_order,
    'topological_sort_dfs': check_topological_order,
    'strongly_connected_components': check_scc,
    'mst_kruskal': check_mst,
    'mst_prim': check_mst,
    'dijkstra': check_single_source,
    'bellman_ford': check_single_source,
    'floyd_warshall': check_all_pairs,
    'johnson': check_all_pairs,
    'a_star': check_a_star,
}


def check_sample(algo: Algorithm, sample: List) -> None:
    """Runs `algo` on `sample` twice, compares the runs and checks the result."""
    result = algo.run(*sample)
    _expect(algo.run(*sample) == result, "Re-running on the same input changed the result")
    CHECK_REGISTRY[algo.name.value](*sample, result)


def run_checks(config: CheckConfig, progress: bool = True) -> List[CheckResult]:
    results = []
    progress_bar = tqdm(config.algorithms, disable=not progress)
    for name in progress_bar:
        progress_bar.set_description(f"Checking {name.value}")
        for size in config.sizes:
            algo = Algorithm(name, seed=config.seed, **config.sampler_kwargs(size))
            errors = []
            for _ in range(config.num_samples):
                sample = algo.sample()
                try:
                    check_sample(algo, sample)
                except CheckError as e:
                    logger.warning("%s failed on size %d: %s", name.value, size, e)
                    errors.append(str(e))
            logger.debug("%s size %d: %d/%d samples passed", name.value, size,
                         config.num_samples - len(errors), config.num_samples)
            results.append(CheckResult(name, size, config.num_samples, len(errors), errors))
    return results


def benchmark(config: CheckConfig, progress: bool = True) -> List[BenchResult]:
    results = []
    progress_bar = tqdm(config.algorithms, disable=not progress)
    for name in progress_bar:
        progress_bar.set_description(f"Timing {name.value}")
        for size in config.sizes:
            algo = Algorithm(name, seed=config.seed, **config.sampler_kwargs(size))
            timings = []
            for _ in range(config.num_samples):
                sample = algo.sample()
                start = time.perf_counter()
                algo.run(*sample)
                timings.append((time.perf_counter() - start) * 1000.0)
            results.append(BenchResult(name, size, config.num_samples,
                                       float(np.mean(timings)), float(np.max(timings))))
    return results
