"""Shortest path algorithms.

Currently implements the following:
- Dijkstra's single-source shortest path (Dijkstra, 1959)
- Bellman-Ford's single-source shortest path (Bellman, 1958)
- Floyd-Warshall's all-pairs shortest paths (Floyd, 1962)
- Johnson's all-pairs shortest paths (Johnson, 1977)

Unreached vertices keep an infinite distance and no predecessor. Heaps hold
`(distance, sequence, vertex)` entries and are never updated in place: an
improved vertex is pushed again and the stale entry is skipped when popped.

Dijkstra and Bellman-Ford only settle distances. Predecessors are then read
off the tight arcs (`dist[u] + w == dist[v]`) by one breadth-first walk from
the source in adjacency order, so equal-cost paths resolve the same way in
both.

See "Introduction to Algorithms" 3ed (CLRS3) for more information.

"""

import collections
import heapq
import itertools
import logging
import math
from typing import List, NamedTuple, Optional

import numpy as np

from ..errors import NegativeCycleError, OutOfRangeError
from ..graph import Graph

logger = logging.getLogger(__name__)

Array = np.ndarray


class ShortestPathInfo(NamedTuple):
  predecessor: Optional[int]
  distance: float


class ShortestPaths:
  """Single-source distances and the predecessor tree that realises them."""

  def __init__(self, source: int, info: List[ShortestPathInfo]):
    self.source = source
    self.info = info

  def __len__(self) -> int:
    return len(self.info)

  def __getitem__(self, v: int) -> ShortestPathInfo:
    return self.info[v]

  def __eq__(self, other) -> bool:
    if not isinstance(other, ShortestPaths):
      return NotImplemented
    return self.source == other.source and self.info == other.info

  def _check(self, v: int):
    if not 0 <= v < len(self.info):
      raise OutOfRangeError(f'Destination index {v} is out of bounds.')

  @property
  def distances(self) -> Array:
    return np.array([i.distance for i in self.info], dtype=float)

  @property
  def predecessors(self) -> List[Optional[int]]:
    return [i.predecessor for i in self.info]

  def distance_to(self, v: int) -> float:
    self._check(v)
    return self.info[v].distance

  def is_reachable(self, v: int) -> bool:
    return not math.isinf(self.distance_to(v))

  def path_to(self, v: int) -> List[int]:
    """Vertices from the source to `v`, or [] when `v` is unreached."""
    if not self.is_reachable(v):
      return []
    stack = [v]
    u = self.info[v].predecessor
    while u is not None:
      stack.append(u)
      u = self.info[u].predecessor
    path = []
    while stack:
      path.append(stack.pop())
    return path

  def __repr__(self) -> str:
    return f"ShortestPaths(source={self.source}, distances={self.distances.tolist()})"


class AllPairsShortestPaths:
  """
  All-pairs distance matrix plus next-hop matrix for path reconstruction.

  `next_hop[i, j]` is the vertex following `i` on a shortest path to `j`, or
  -1 when `j` cannot be reached from `i`.
  """

  def __init__(self, distances: Array, next_hop: Array):
    self.distances = distances
    self.next_hop = next_hop

  @property
  def vertices(self) -> int:
    return self.distances.shape[0]

  def _check(self, v: int, role: str):
    if not 0 <= v < self.vertices:
      raise OutOfRangeError(f'{role} index {v} is out of bounds.')

  def distance(self, source: int, destination: int) -> float:
    self._check(source, 'Source')
    self._check(destination, 'Destination')
    return float(self.distances[source, destination])

  def path(self, source: int, destination: int) -> List[int]:
    self._check(source, 'Source')
    self._check(destination, 'Destination')
    if self.next_hop[source, destination] == -1:
      return []
    path = [source]
    u = source
    # A negative cycle can make next hops loop; cap the walk at V steps
    for _ in range(self.vertices):
      if u == destination:
        return path
      u = int(self.next_hop[u, destination])
      path.append(u)
    if u != destination:
      raise NegativeCycleError(
          f'Path {source}->{destination} runs through a negative cycle.')
    return path

  @property
  def has_negative_cycle(self) -> bool:
    return bool(np.any(np.diag(self.distances) < 0))

  def __eq__(self, other) -> bool:
    if not isinstance(other, AllPairsShortestPaths):
      return NotImplemented
    return (np.array_equal(self.distances, other.distances)
            and np.array_equal(self.next_hop, other.next_hop))

  def __repr__(self) -> str:
    return f"AllPairsShortestPaths(vertices={self.vertices})"


def _shortest_path_tree(graph: Graph, source: int, dist: List[float]) -> ShortestPaths:
  pred: List[Optional[int]] = [None] * graph.vertices
  reached = [False] * graph.vertices
  reached[source] = True
  queue = collections.deque([source])
  while queue:
    u = queue.popleft()
    for e in graph.edges_from(u):
      v = e.destination
      if not reached[v] and dist[u] + e.weight == dist[v]:
        reached[v] = True
        pred[v] = u
        queue.append(v)
  return ShortestPaths(source, [ShortestPathInfo(p, d) for p, d in zip(pred, dist)])


def _dijkstra(graph: Graph, source: int) -> ShortestPaths:
  dist = [math.inf] * graph.vertices
  dist[source] = 0

  seq = itertools.count()
  queue = [(0, next(seq), source)]
  while queue:
    d, _, u = heapq.heappop(queue)
    if d > dist[u]:
      continue
    for e in graph.edges_from(u):
      alt = d + e.weight
      if alt < dist[e.destination]:
        dist[e.destination] = alt
        heapq.heappush(queue, (alt, next(seq), e.destination))

  return _shortest_path_tree(graph, source, dist)


def dijkstra(graph: Graph, source: int) -> ShortestPaths:
  """Dijkstra's single-source shortest path (Dijkstra, 1959).

  Requires non-negative weights; with a negative arc the result is undefined.
  """
  graph.check_vertex(source, 'Source')
  if graph.has_negative_weights():
    logger.warning("dijkstra called on a graph with negative weights; "
                   "distances may be wrong, use bellman_ford instead")
  return _dijkstra(graph, source)


def bellman_ford(graph: Graph, source: int) -> ShortestPaths:
  """Bellman-Ford's single-source shortest path (Bellman, 1958).

  Raises:
    NegativeCycleError: if a negative cycle is reachable from `source`.
  """
  graph.check_vertex(source, 'Source')

  dist = [math.inf] * graph.vertices
  dist[source] = 0
  arcs = list(graph.arcs())

  passes = 0
  for _ in range(graph.vertices - 1):
    passes += 1
    changed = False
    for e in arcs:
      if dist[e.source] + e.weight < dist[e.destination]:
        dist[e.destination] = dist[e.source] + e.weight
        changed = True
    if not changed:
      break
  logger.debug("bellman_ford from %d settled after %d passes", source, passes)

  for e in arcs:
    if dist[e.source] + e.weight < dist[e.destination]:
      raise NegativeCycleError(
          f'Graph contains a negative weight cycle through arc '
          f'{e.source}->{e.destination}.')

  return _shortest_path_tree(graph, source, dist)


def floyd_warshall(graph: Graph) -> AllPairsShortestPaths:
  """Floyd-Warshall's all-pairs shortest paths (Floyd, 1962).

  Negative weights are allowed. Negative cycles are not raised; they leave a
  negative entry on the diagonal (see `has_negative_cycle`).
  """

  n = graph.vertices
  D = graph.to_matrix(no_edge=np.inf)
  Next = np.where(np.isfinite(D), np.arange(n)[None, :], -1)
  for i in range(n):
    if D[i, i] > 0:
      D[i, i] = 0
    Next[i, i] = i

  for k in range(n):
    via = D[:, k:k + 1] + D[k:k + 1, :]
    better = via < D
    D = np.where(better, via, D)
    Next = np.where(better, Next[:, k:k + 1], Next)

  return AllPairsShortestPaths(D, Next.astype(int))


def _next_hops(paths: ShortestPaths) -> Array:
  """Next-hop row for `paths.source`, read off the predecessor tree."""
  n = len(paths)
  s = paths.source
  row = np.full(n, -1, dtype=int)
  row[s] = s
  for v in range(n):
    if row[v] != -1 or not paths.is_reachable(v):
      continue
    chain = []
    u = v
    while row[u] == -1 and paths[u].predecessor != s:
      chain.append(u)
      u = paths[u].predecessor
    hop = row[u] if row[u] != -1 else u
    row[u] = hop
    for w in chain:
      row[w] = hop
  return row


def johnson(graph: Graph) -> AllPairsShortestPaths:
  """Johnson's all-pairs shortest paths (Johnson, 1977).

  Raises:
    NegativeCycleError: if the graph contains a negative cycle.
  """

  n = graph.vertices

  # Virtual source n with zero-weight arcs into every vertex
  augmented = Graph(n + 1, directed=True, weighted=True)
  for e in graph.arcs():
    augmented.add_edge(e.source, e.destination, e.weight)
  for v in range(n):
    augmented.add_edge(n, v, 0)
  h = bellman_ford(augmented, n).distances[:n]

  reweighted = Graph(n, directed=True, weighted=True)
  for e in graph.arcs():
    reweighted.add_edge(e.source, e.destination, e.weight + h[e.source] - h[e.destination])

  D = np.full((n, n), np.inf)
  Next = np.full((n, n), -1, dtype=int)
  for u in range(n):
    paths = _dijkstra(reweighted, u)
    reached = np.isfinite(paths.distances)
    D[u, reached] = paths.distances[reached] - h[u] + h[reached]
    Next[u] = _next_hops(paths)

  return AllPairsShortestPaths(D, Next)
