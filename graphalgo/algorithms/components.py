"""Strongly connected components.

Currently implements the following:
- Kosaraju's strongly-connected components (Aho et al., 1974)

See "Introduction to Algorithms" 3ed (CLRS3) for more information.

"""

from typing import List

from ..graph import Graph
from .traversal import dfs_finish_order, dfs_from


def strongly_connected_components(graph: Graph) -> List[List[int]]:
  """Kosaraju's strongly-connected components (Aho et al., 1974).

  Vertices are taken in decreasing finishing time of a search over `graph`;
  each one still unvisited seeds a search over the transposed graph, which
  collects exactly its component.
  """

  finished = dfs_finish_order(graph)
  transposed = graph.transpose()

  visited = [False] * graph.vertices
  components = []
  for u in reversed(finished):
    if not visited[u]:
      components.append(list(dfs_from(transposed, u, visited)))
  return components
