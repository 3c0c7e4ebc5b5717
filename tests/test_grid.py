"""Tests for the grid geometry module."""

import numpy as np
import pytest

from cube_snake.grid import (
    CellType,
    Cube,
    GridBounds,
    GridPoint,
    in_bounds,
    random_point,
)


class TestGridPoint:
    def test_value_equality_and_hash(self):
        a = GridPoint(1, 2, 3)
        b = GridPoint(1, 2, 3)
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_immutable(self):
        p = GridPoint(0, 0, 0)
        with pytest.raises(AttributeError):
            p.x = 4

    def test_offset(self):
        p = GridPoint(2, 2, 2)
        assert p.offset((1, 0, 0)) == GridPoint(3, 2, 2)
        assert p.offset((0, 0, -1), steps=2) == GridPoint(2, 2, 0)
        assert p.offset((0, 1, 0), steps=-1) == GridPoint(2, 1, 2)


class TestGridBounds:
    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 1"):
            GridBounds(0)

    def test_in_bounds(self):
        bounds = GridBounds(5)
        assert bounds.in_bounds(GridPoint(0, 0, 0))
        assert bounds.in_bounds(GridPoint(4, 4, 4))
        assert not bounds.in_bounds(GridPoint(-1, 0, 0))
        assert not bounds.in_bounds(GridPoint(0, 5, 0))
        assert not bounds.in_bounds(GridPoint(0, 0, 5))

    def test_in_bounds_exhaustive(self):
        bounds = GridBounds(3)
        for x in range(-1, 5):
            for y in range(-1, 5):
                for z in range(-1, 5):
                    expected = all(0 <= c < 3 for c in (x, y, z))
                    assert in_bounds(GridPoint(x, y, z), bounds) is expected


class TestRandomPoint:
    def test_respects_margin(self):
        bounds = GridBounds(8)
        rng = np.random.default_rng(0)
        for _ in range(200):
            p = random_point(bounds, 2, rng)
            assert all(2 <= c < 6 for c in p)

    def test_single_candidate(self):
        rng = np.random.default_rng(1)
        assert random_point(GridBounds(5), 2, rng) == GridPoint(2, 2, 2)

    def test_deterministic(self):
        a = random_point(GridBounds(8), 0, np.random.default_rng(42))
        b = random_point(GridBounds(8), 0, np.random.default_rng(42))
        assert a == b

    def test_margin_too_large(self):
        with pytest.raises(ValueError, match="No cell"):
            random_point(GridBounds(4), 2)


class TestCube:
    def test_shape_and_empty(self):
        cube = Cube(GridBounds(5))
        assert cube.cells.shape == (5, 5, 5)
        assert np.all(cube.cells == CellType.EMPTY)
        assert len(cube.empty_cells()) == 125

    def test_set_and_get(self):
        cube = Cube(GridBounds(5))
        cube.set(GridPoint(1, 2, 3), CellType.FRUIT)
        assert cube.get(GridPoint(1, 2, 3)) == CellType.FRUIT
        assert cube.cells[1, 2, 3] == CellType.FRUIT

    def test_switch_on_off(self):
        cube = Cube(GridBounds(5))
        cube.switch_on(GridPoint(0, 0, 0))
        assert cube.get(GridPoint(0, 0, 0)) == CellType.SNAKE
        assert np.count_nonzero(cube.cells) == 1
        cube.switch_off(GridPoint(0, 0, 0))
        assert np.count_nonzero(cube.cells) == 0

    def test_clear(self):
        cube = Cube(GridBounds(5))
        cube.switch_on(GridPoint(0, 1, 2))
        cube.set(GridPoint(3, 3, 3), CellType.FRUIT)
        cube.clear()
        assert np.all(cube.cells == CellType.EMPTY)

    def test_empty_cells_excludes_lit(self):
        cube = Cube(GridBounds(5))
        cube.switch_on(GridPoint(4, 0, 1))
        empty = cube.empty_cells()
        assert len(empty) == 124
        assert GridPoint(4, 0, 1) not in empty
        assert all(isinstance(p, GridPoint) for p in empty)

    def test_to_dict(self):
        cube = Cube(GridBounds(5))
        cube.switch_on(GridPoint(1, 1, 1))
        d = cube.to_dict()
        assert d["size"] == 5
        assert d["cells"][1][1][1] == CellType.SNAKE
