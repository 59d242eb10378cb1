"""Minimum spanning trees.

Currently implements the following:
- Kruskal's minimum spanning tree (Kruskal, 1956)
- Prim's minimum spanning tree (Prim, 1957)

Both expect an undirected graph; a directed graph is read through its arcs as
stored. On a disconnected graph Kruskal returns a spanning forest and Prim the
tree of the source's component. Equal weights are taken in insertion order.

See "Introduction to Algorithms" 3ed (CLRS3) for more information.

"""

import heapq
import itertools
from typing import List, NamedTuple, Union

from ..graph import Edge, Graph
from .disjoint_set import DisjointSet

Numeric = Union[int, float]


class SpanningTree(NamedTuple):
  edges: List[Edge]
  weight: Numeric

  def is_spanning(self, vertices: int) -> bool:
    return len(self.edges) == max(vertices - 1, 0)


def mst_kruskal(graph: Graph) -> SpanningTree:
  """Kruskal's minimum spanning tree (Kruskal, 1956)."""

  seq = itertools.count()
  queue = [(e.weight, next(seq), e) for e in graph.edges()]
  heapq.heapify(queue)

  dsu = DisjointSet(graph.vertices)
  tree = []
  weight = 0
  while queue:
    _, _, e = heapq.heappop(queue)
    if dsu.is_connected(e.source, e.destination):
      continue
    tree.append(e)
    weight += e.weight
    dsu.union(e.source, e.destination)

  return SpanningTree(tree, weight)


def mst_prim(graph: Graph, source: int = 0) -> SpanningTree:
  """Prim's minimum spanning tree (Prim, 1957)."""

  if graph.vertices == 0:
    return SpanningTree([], 0)
  graph.check_vertex(source, 'Source')

  seq = itertools.count()
  visited = [False] * graph.vertices
  tree = []
  weight = 0
  # Seed with a self-loop so the source goes through the same pop path
  queue = [(0, next(seq), Edge(source, source, 0))]
  while queue and len(tree) < graph.vertices - 1:
    _, _, e = heapq.heappop(queue)
    u = e.destination
    if visited[u]:
      continue
    visited[u] = True
    if e.source != e.destination:
      tree.append(e)
      weight += e.weight
    for nxt in graph.edges_from(u):
      if not visited[nxt.destination]:
        heapq.heappush(queue, (nxt.weight, next(seq), nxt))

  return SpanningTree(tree, weight)
