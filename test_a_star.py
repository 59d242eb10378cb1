import numpy as np
import pytest
from graphalgo import Grid, InvalidStartError, InvalidTargetError, OutOfRangeError, a_star
from graphalgo.algorithms.grid import manhattan


def _is_walk(grid, path):
    for a, b in zip(path[:-1], path[1:]):
        if manhattan(a, b) != 1 or grid.is_obstacle(*b):
            return False
    return True


@pytest.mark.parametrize("start,goal", [((0, 0), (4, 4)), ((2, 3), (0, 1)), ((4, 0), (4, 4))])
def test_open_grid_path_is_manhattan(start, goal):
    grid = Grid(5)
    path = a_star(grid, start, goal)
    assert len(path) == manhattan(start, goal) + 1
    assert path[0] == start and path[-1] == goal
    assert _is_walk(grid, path)


def test_routes_around_obstacles():
    grid = Grid(5)
    for cell in [(1, 1), (1, 3), (2, 1), (3, 3), (4, 2)]:
        grid.set_obstacle(*cell)
    path = a_star(grid, (0, 0), (4, 4))
    assert len(path) == 9
    assert _is_walk(grid, path)


def test_detour_is_longer_than_manhattan():
    mask = np.array([[0, 0, 0, 0],
                     [1, 1, 1, 0],
                     [0, 0, 0, 0]])
    grid = Grid.from_array(mask)
    path = a_star(grid, (0, 0), (2, 0))
    assert len(path) == 9
    assert _is_walk(grid, path)


def test_enclosed_goal_returns_empty_path():
    grid = Grid(3)
    grid.set_obstacle(1, 2)
    grid.set_obstacle(2, 1)
    assert a_star(grid, (0, 0), (2, 2)) == []


def test_start_equals_goal():
    assert a_star(Grid(3), (1, 1), (1, 1)) == [(1, 1)]


def test_obstacle_endpoints():
    grid = Grid(3)
    grid.set_obstacle(0, 0)
    grid.set_obstacle(2, 2)
    with pytest.raises(InvalidStartError):
        a_star(grid, (0, 0), (1, 1))
    with pytest.raises(InvalidTargetError):
        a_star(grid, (1, 1), (2, 2))


def test_out_of_bounds_endpoints():
    with pytest.raises(OutOfRangeError):
        a_star(Grid(3), (0, 0), (3, 0))
    with pytest.raises(OutOfRangeError):
        Grid(3).set_obstacle(-1, 0)


def test_grid_is_reusable_across_queries():
    grid = Grid(4, 6)
    assert grid.shape == (4, 6)
    first = a_star(grid, (0, 0), (3, 5))
    assert len(a_star(grid, (3, 5), (0, 0))) == len(first) == 9
    assert a_star(grid, (0, 0), (3, 5)) == first


def test_neighbors_skip_obstacles_and_edges():
    grid = Grid(3)
    grid.set_obstacle(0, 1)
    assert sorted(grid.neighbors((0, 0))) == [(1, 0)]
    grid.set_obstacle(0, 1, blocked=False)
    assert sorted(grid.neighbors((0, 0))) == [(0, 1), (1, 0)]
