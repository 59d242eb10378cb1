"""Topological sorting.

Currently implements the following:
- Kahn's in-degree algorithm (Kahn, 1962)
- Depth-first finishing order (Knuth, 1973)

Both return a `TopologicalOrder`. A cyclic graph is a valid query: the result
is flagged with `is_acyclic=False` instead of raising.

See "Introduction to Algorithms" 3ed (CLRS3) for more information.

"""

import collections
from typing import List, NamedTuple, Union

from ..errors import GraphError
from ..graph import Graph
from ..specs import TopologicalMethod
from .traversal import dfs_finish_order


class TopologicalOrder(NamedTuple):
  order: List[int]
  is_acyclic: bool

  @property
  def has_cycle(self) -> bool:
    return not self.is_acyclic


def _check_directed(graph: Graph):
  if not graph.directed:
    raise GraphError('Topological order is only defined on directed graphs.')


def topological_sort_kahn(graph: Graph) -> TopologicalOrder:
  """Kahn's in-degree topological sort (Kahn, 1962).

  On a cyclic graph the vertices on or behind a cycle never reach in-degree
  zero, so the order stops short of `graph.vertices`.
  """
  _check_directed(graph)

  in_degree = [0] * graph.vertices
  for e in graph.arcs():
    in_degree[e.destination] += 1

  queue = collections.deque(u for u in range(graph.vertices) if in_degree[u] == 0)
  order = []
  while queue:
    u = queue.popleft()
    order.append(u)
    for v in graph.neighbors(u):
      in_degree[v] -= 1
      if in_degree[v] == 0:
        queue.append(v)

  return TopologicalOrder(order, len(order) == graph.vertices)


def topological_sort_dfs(graph: Graph) -> TopologicalOrder:
  """Topological sort by reversed depth-first finishing order (Knuth, 1973).

  The order covers every vertex even on cyclic input. An arc whose head
  finishes no earlier than its tail is a back edge, which flags the cycle.
  """
  _check_directed(graph)

  finished = dfs_finish_order(graph)
  finish_time = [0] * graph.vertices
  for t, u in enumerate(finished):
    finish_time[u] = t

  is_acyclic = all(finish_time[e.source] > finish_time[e.destination]
                   for e in graph.arcs())
  return TopologicalOrder(finished[::-1], is_acyclic)


def topological_sort(graph: Graph,
                     method: Union[str, TopologicalMethod] = TopologicalMethod.KAHN
                     ) -> TopologicalOrder:
  method = TopologicalMethod(method)
  if method == TopologicalMethod.KAHN:
    return topological_sort_kahn(graph)
  return topological_sort_dfs(graph)
