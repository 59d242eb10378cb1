"""Graph algorithm implementations."""

from .disjoint_set import DisjointSet
from .disjoint_set import connected_components

from .traversal import bfs
from .traversal import dfs
from .traversal import dfs_recursive
from .traversal import dfs_finish_order

from .topological import TopologicalOrder
from .topological import topological_sort
from .topological import topological_sort_kahn
from .topological import topological_sort_dfs

from .components import strongly_connected_components

from .spanning_tree import SpanningTree
from .spanning_tree import mst_kruskal
from .spanning_tree import mst_prim

from .shortest_paths import ShortestPathInfo
from .shortest_paths import ShortestPaths
from .shortest_paths import AllPairsShortestPaths
from .shortest_paths import dijkstra
from .shortest_paths import bellman_ford
from .shortest_paths import floyd_warshall
from .shortest_paths import johnson

from .grid import Grid
from .grid import a_star
