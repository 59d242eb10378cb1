"""Graph algorithms over a common weighted/unweighted, directed/undirected graph."""

from .errors import GraphError
from .errors import OutOfRangeError
from .errors import InvalidStartError
from .errors import InvalidTargetError
from .errors import NegativeCycleError
from .errors import CheckError

from .graph import Edge
from .graph import Graph

from .specs import Algorithm
from .specs import MergeStrategy
from .specs import TopologicalMethod

from .algorithms.disjoint_set import DisjointSet
from .algorithms.disjoint_set import connected_components
from .algorithms.traversal import bfs
from .algorithms.traversal import dfs
from .algorithms.traversal import dfs_recursive
from .algorithms.traversal import dfs_finish_order
from .algorithms.topological import TopologicalOrder
from .algorithms.topological import topological_sort
from .algorithms.topological import topological_sort_kahn
from .algorithms.topological import topological_sort_dfs
from .algorithms.components import strongly_connected_components
from .algorithms.spanning_tree import SpanningTree
from .algorithms.spanning_tree import mst_kruskal
from .algorithms.spanning_tree import mst_prim
from .algorithms.shortest_paths import ShortestPathInfo
from .algorithms.shortest_paths import ShortestPaths
from .algorithms.shortest_paths import AllPairsShortestPaths
from .algorithms.shortest_paths import dijkstra
from .algorithms.shortest_paths import bellman_ford
from .algorithms.shortest_paths import floyd_warshall
from .algorithms.shortest_paths import johnson
from .algorithms.grid import Grid
from .algorithms.grid import a_star
