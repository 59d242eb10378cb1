"""Graph traversal.

Currently implements the following:
- Breadth-first search (Moore, 1959)
- Depth-first search, stack based
- Depth-first search in recursive descent order
- Depth-first finishing order

Every traversal without a source sweeps the vertices in index order and
starts a new search from each one not yet visited, so the result covers all
components. None of them recurse; deep graphs are bounded by memory, not by
the interpreter stack.

See "Introduction to Algorithms" 3ed (CLRS3) for more information.

"""

import collections
from typing import Iterable, Iterator, List, Optional

from ..graph import Graph


def _seeds(graph: Graph, source: Optional[int]) -> Iterable[int]:
  if source is None:
    return range(graph.vertices)
  graph.check_vertex(source, 'Source')
  return [source]


def bfs(graph: Graph, source: Optional[int] = None) -> List[int]:
  """Breadth-first search (Moore, 1959)."""

  visited = [False] * graph.vertices
  order = []
  for s in _seeds(graph, source):
    if visited[s]:
      continue
    visited[s] = True
    queue = collections.deque([s])
    while queue:
      u = queue.popleft()
      order.append(u)
      for v in graph.neighbors(u):
        if not visited[v]:
          visited[v] = True
          queue.append(v)
  return order


def dfs_from(graph: Graph, s: int, visited: List[bool]) -> Iterator[int]:
  """
  Stack based depth-first search from `s`, sharing `visited` with the caller.

  A vertex can sit on the stack several times before it is reached, so it is
  marked visited when popped rather than when pushed.
  """
  stack = [s]
  while stack:
    u = stack.pop()
    if visited[u]:
      continue
    visited[u] = True
    yield u
    for v in graph.neighbors(u):
      if not visited[v]:
        stack.append(v)


def dfs(graph: Graph, source: Optional[int] = None) -> List[int]:
  """Depth-first search with an explicit stack."""

  visited = [False] * graph.vertices
  order = []
  for s in _seeds(graph, source):
    if not visited[s]:
      order.extend(dfs_from(graph, s, visited))
  return order


def _descend(graph: Graph, s: int, visited: List[bool],
             on_enter=None, on_exit=None):
  """Walks a recursive descent from `s` using (vertex, next index) frames."""
  visited[s] = True
  if on_enter is not None:
    on_enter(s)
  stack = [[s, graph.neighbors(s), 0]]
  while stack:
    frame = stack[-1]
    u, adj, i = frame
    while i < len(adj) and visited[adj[i]]:
      i += 1
    if i < len(adj):
      v = adj[i]
      frame[2] = i + 1
      visited[v] = True
      if on_enter is not None:
        on_enter(v)
      stack.append([v, graph.neighbors(v), 0])
    else:
      stack.pop()
      if on_exit is not None:
        on_exit(u)


def dfs_recursive(graph: Graph, source: Optional[int] = None) -> List[int]:
  """Depth-first search visiting vertices in recursive pre-order."""

  visited = [False] * graph.vertices
  order = []
  for s in _seeds(graph, source):
    if not visited[s]:
      _descend(graph, s, visited, on_enter=order.append)
  return order


def dfs_finish_order(graph: Graph) -> List[int]:
  """All vertices in the order their depth-first exploration completes."""

  visited = [False] * graph.vertices
  finished = []
  for s in range(graph.vertices):
    if not visited[s]:
      _descend(graph, s, visited, on_exit=finished.append)
  return finished
