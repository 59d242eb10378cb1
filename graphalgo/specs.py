from enum import Enum
from typing import Tuple


class Algorithm(str, Enum):
    a_star = 'a_star'
    bellman_ford = 'bellman_ford'
    bfs = 'bfs'
    connected_components = 'connected_components'
    dfs = 'dfs'
    dfs_recursive = 'dfs_recursive'
    dijkstra = 'dijkstra'
    floyd_warshall = 'floyd_warshall'
    johnson = 'johnson'
    mst_kruskal = 'mst_kruskal'
    mst_prim = 'mst_prim'
    strongly_connected_components = 'strongly_connected_components'
    topological_sort_dfs = 'topological_sort_dfs'
    topological_sort_kahn = 'topological_sort_kahn'


class MergeStrategy(str, Enum):
    RANK = 'rank'
    SIZE = 'size'


class TopologicalMethod(str, Enum):
    KAHN = 'kahn'
    DFS = 'dfs'


ALL_ALGORITHMS = [algo for algo in Algorithm]

Cell = Tuple[int, int]  # (x, y) position on a Grid
