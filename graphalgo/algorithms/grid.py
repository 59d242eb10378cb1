"""Grid search.

Currently implements the following:
- A* search on a 4-connected grid (Hart, Nilsson & Raphael, 1968)

"""

import heapq
import itertools
from typing import Dict, List, Optional, Set

import numpy as np

from ..errors import InvalidStartError, InvalidTargetError, OutOfRangeError
from ..specs import Cell

Array = np.ndarray

# No diagonal moves, so Manhattan distance is an exact lower bound
DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))


class Grid:
  """
  A rows x cols grid of cells with an obstacle mask.

  The grid only stores which cells are blocked; every search keeps its own
  costs and predecessors, so one grid can serve any number of queries.
  """

  def __init__(self, rows: int, cols: Optional[int] = None):
    cols = rows if cols is None else cols
    if rows < 0 or cols < 0:
      raise ValueError(f'Grid dimensions must be non-negative, got {rows}x{cols}.')
    self.obstacles: Array = np.zeros((rows, cols), dtype=bool)

  @classmethod
  def from_array(cls, mask: Array) -> 'Grid':
    """Builds a grid from a 2D array whose truthy entries are obstacles."""
    mask = np.asarray(mask)
    if mask.ndim != 2:
      raise ValueError(f'Expected a 2D obstacle mask, got shape {mask.shape}.')
    grid = cls(*mask.shape)
    grid.obstacles[:] = mask.astype(bool)
    return grid

  @property
  def shape(self):
    return self.obstacles.shape

  def in_bounds(self, x: int, y: int) -> bool:
    return 0 <= x < self.obstacles.shape[0] and 0 <= y < self.obstacles.shape[1]

  def _check(self, x: int, y: int):
    if not self.in_bounds(x, y):
      raise OutOfRangeError(f'Cell ({x}, {y}) is out of bounds for grid {self.shape}.')

  def set_obstacle(self, x: int, y: int, blocked: bool = True):
    self._check(x, y)
    self.obstacles[x, y] = blocked

  def is_obstacle(self, x: int, y: int) -> bool:
    self._check(x, y)
    return bool(self.obstacles[x, y])

  def neighbors(self, cell: Cell) -> List[Cell]:
    """Open cells one step away from `cell`."""
    x, y = cell
    out = []
    for dx, dy in DIRECTIONS:
      nx, ny = x + dx, y + dy
      if self.in_bounds(nx, ny) and not self.obstacles[nx, ny]:
        out.append((nx, ny))
    return out


def manhattan(a: Cell, b: Cell) -> int:
  return abs(a[0] - b[0]) + abs(a[1] - b[1])


def a_star(grid: Grid, start: Cell, goal: Cell) -> List[Cell]:
  """A* search (Hart, Nilsson & Raphael, 1968).

  Returns the cells of a shortest path from `start` to `goal`, both included,
  or [] when the goal cannot be reached.

  Raises:
    OutOfRangeError: if `start` or `goal` lies outside the grid.
    InvalidStartError: if `start` is an obstacle.
    InvalidTargetError: if `goal` is an obstacle.
  """
  start, goal = tuple(start), tuple(goal)
  if grid.is_obstacle(*start):
    raise InvalidStartError(f'Start cell {start} is an obstacle.')
  if grid.is_obstacle(*goal):
    raise InvalidTargetError(f'Target cell {goal} is an obstacle.')

  g_cost: Dict[Cell, int] = {start: 0}
  parent: Dict[Cell, Optional[Cell]] = {start: None}
  closed: Set[Cell] = set()

  seq = itertools.count()
  open_set = [(manhattan(start, goal), next(seq), start)]
  while open_set:
    _, _, current = heapq.heappop(open_set)
    if current in closed:
      continue
    if current == goal:
      path = []
      node: Optional[Cell] = current
      while node is not None:
        path.append(node)
        node = parent[node]
      path.reverse()
      return path
    closed.add(current)

    for nxt in grid.neighbors(current):
      if nxt in closed:
        continue
      tentative = g_cost[current] + 1
      if tentative < g_cost.get(nxt, np.inf):
        g_cost[nxt] = tentative
        parent[nxt] = current
        heapq.heappush(open_set, (tentative + manhattan(nxt, goal), next(seq), nxt))

  return []
