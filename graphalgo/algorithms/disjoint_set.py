"""Disjoint-set union (union-find).

Currently implements the following:
- Disjoint-set forest with path compression, union by rank or by size
  (Galler & Fischer, 1964; Tarjan, 1975)
- Connected components via disjoint-set union

See "Introduction to Algorithms" 3ed (CLRS3) for more information.

"""

from typing import Dict, List, Union

from ..errors import OutOfRangeError
from ..graph import Graph
from ..specs import MergeStrategy


class DisjointSet:
  """Union-find over the elements 0..size-1. Sets can only be merged."""

  def __init__(self, size: int,
               strategy: Union[str, MergeStrategy] = MergeStrategy.RANK):
    self.strategy = MergeStrategy(strategy)
    self.parent: List[int] = list(range(size))
    # rank[] for RANK, size[] for SIZE; never both
    if self.strategy == MergeStrategy.RANK:
      self.rank: List[int] = [0] * size
    else:
      self.size: List[int] = [1] * size
    self._num_sets = size

  def __len__(self) -> int:
    return len(self.parent)

  def _check(self, x: int):
    if not 0 <= x < len(self.parent):
      raise OutOfRangeError(
          f'Element {x} is out of bounds for {len(self.parent)} elements.')

  def find(self, x: int) -> int:
    """Returns the root of `x`, pointing every node on the way at it."""
    self._check(x)
    root = x
    while self.parent[root] != root:
      root = self.parent[root]
    while self.parent[x] != root:
      self.parent[x], x = root, self.parent[x]
    return root

  def union(self, x: int, y: int) -> bool:
    """Merges the sets of `x` and `y`. Returns False if already merged."""
    x_root = self.find(x)
    y_root = self.find(y)
    if x_root == y_root:
      return False

    if self.strategy == MergeStrategy.RANK:
      if self.rank[x_root] < self.rank[y_root]:
        self.parent[x_root] = y_root
      elif self.rank[x_root] > self.rank[y_root]:
        self.parent[y_root] = x_root
      else:
        self.parent[y_root] = x_root
        self.rank[x_root] += 1
    else:
      if self.size[x_root] > self.size[y_root]:
        self.parent[y_root] = x_root
        self.size[x_root] += self.size[y_root]
      else:
        self.parent[x_root] = y_root
        self.size[y_root] += self.size[x_root]

    self._num_sets -= 1
    return True

  def is_connected(self, x: int, y: int) -> bool:
    return self.find(x) == self.find(y)

  @property
  def num_sets(self) -> int:
    return self._num_sets

  def set_size(self, x: int) -> int:
    """Number of elements in the set containing `x`."""
    root = self.find(x)
    if self.strategy == MergeStrategy.SIZE:
      return self.size[root]
    return sum(1 for i in range(len(self.parent)) if self.find(i) == root)

  def groups(self) -> List[List[int]]:
    """All sets, ordered by their smallest element."""
    members: Dict[int, List[int]] = {}
    for i in range(len(self.parent)):
      members.setdefault(self.find(i), []).append(i)
    return list(members.values())


def connected_components(graph: Graph) -> List[List[int]]:
  """Connected components of the graph, ignoring arc direction."""

  dsu = DisjointSet(graph.vertices)
  for e in graph.edges():
    dsu.union(e.source, e.destination)
  return dsu.groups()
