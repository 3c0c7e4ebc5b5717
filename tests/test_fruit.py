"""Tests for the FruitSpawner module."""

import numpy as np

from cube_snake.fruit import FruitSpawner
from cube_snake.grid import CellType, Cube, GridBounds, GridPoint


class TestFruitSpawning:
    def test_spawn_marks_cell(self):
        cube = Cube(GridBounds(5))
        spawner = FruitSpawner(cube, rng=np.random.default_rng(42))
        pos = spawner.spawn()
        assert pos is not None
        assert spawner.position == pos
        assert cube.get(pos) == CellType.FRUIT

    def test_spawn_avoids_lit_cells(self):
        cube = Cube(GridBounds(5))
        free = GridPoint(3, 1, 4)
        cube.cells[:] = CellType.SNAKE
        cube.switch_off(free)
        spawner = FruitSpawner(cube, rng=np.random.default_rng(0))
        assert spawner.spawn() == free

    def test_respawn_keeps_single_fruit(self):
        cube = Cube(GridBounds(5))
        spawner = FruitSpawner(cube, rng=np.random.default_rng(1))
        for _ in range(10):
            spawner.spawn()
        assert np.count_nonzero(cube.cells == CellType.FRUIT) == 1

    def test_spawn_on_full_cube(self):
        cube = Cube(GridBounds(5))
        cube.cells[:] = CellType.SNAKE
        spawner = FruitSpawner(cube)
        assert spawner.spawn() is None
        assert spawner.position is None

    def test_spawn_deterministic(self):
        """Same seed produces the same fruit position."""
        a = FruitSpawner(Cube(GridBounds(8)), rng=np.random.default_rng(7)).spawn()
        b = FruitSpawner(Cube(GridBounds(8)), rng=np.random.default_rng(7)).spawn()
        assert a == b


class TestFruitRemoval:
    def test_remove_existing(self):
        cube = Cube(GridBounds(5))
        spawner = FruitSpawner(cube)
        pos = spawner.spawn()
        assert spawner.remove()
        assert cube.get(pos) == CellType.EMPTY
        assert spawner.position is None

    def test_remove_nonexistent(self):
        spawner = FruitSpawner(Cube(GridBounds(5)))
        assert not spawner.remove()

    def test_remove_keeps_snake_lit_over_eaten_fruit(self):
        cube = Cube(GridBounds(5))
        spawner = FruitSpawner(cube)
        pos = spawner.spawn()
        cube.switch_on(pos)
        spawner.remove()
        assert cube.get(pos) == CellType.SNAKE


class TestFruitSerialization:
    def test_to_dict(self):
        cube = Cube(GridBounds(5))
        spawner = FruitSpawner(cube, rng=np.random.default_rng(2))
        assert spawner.to_dict() == {"position": None}
        pos = spawner.spawn()
        assert spawner.to_dict() == {"position": list(pos)}
