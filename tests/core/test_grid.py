"""Tests for the Grid class."""

import numpy as np
import pytest

from lifegrid.core.errors import GeometryError
from lifegrid.core.grid import Grid
from lifegrid.core.patterns import PatternLibrary
from lifegrid.core.settings import BoardSettings


def reference_step(cells: np.ndarray) -> np.ndarray:
    """Next generation of a toroidal board computed with array shifts."""
    counts = np.zeros(cells.shape, dtype=np.int16)
    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            if dx == 0 and dy == 0:
                continue
            counts += np.roll(cells, (dx, dy), axis=(0, 1))
    alive = cells > 0
    return ((counts == 3) | (alive & (counts == 2))).astype(np.int8)


class TestGrid:
    """Test cases for the Grid class."""

    def test_initialization(self):
        """Test grid initialization."""
        grid = Grid(10, 20, cell_size=3, live_density=0.0)
        assert grid.columns == 10
        assert grid.rows == 20
        assert grid.cell_size == 3
        assert grid.shape == (10, 20)
        assert grid.width == 30
        assert grid.height == 60
        assert grid.population == 0

    def test_invalid_geometry(self):
        """Test degenerate dimensions are rejected."""
        with pytest.raises(GeometryError):
            Grid(0, 5)

        with pytest.raises(GeometryError):
            Grid(5, -1)

        with pytest.raises(GeometryError):
            Grid(5, 5, cell_size=0)

        with pytest.raises(GeometryError):
            Grid(5, 5, live_density=1.5)

    def test_from_pixels(self):
        """Test grid dimensions are whole cells of the pixel area."""
        grid = Grid.from_pixels(101, 45, 10, live_density=0.0)
        assert grid.shape == (10, 4)
        assert grid.width == 100
        assert grid.height == 40

    def test_from_pixels_degenerate(self):
        """Test areas smaller than one cell and bad cell sizes are rejected."""
        with pytest.raises(GeometryError):
            Grid.from_pixels(50, 20, 0)

        with pytest.raises(GeometryError):
            Grid.from_pixels(50, 20, -2)

        with pytest.raises(GeometryError):
            Grid.from_pixels(5, 20, 10)

    def test_from_settings(self):
        """Test construction from a settings record."""
        settings = BoardSettings(width=40, height=30, cell_size=2, live_density=1.0)
        grid = Grid.from_settings(settings)
        assert grid.shape == (20, 15)
        assert grid.cell_size == 2
        assert grid.population == 20 * 15

    def test_every_cell_has_eight_distinct_neighbors(self):
        """Test neighbor wiring gives 8 distinct cells, never the cell itself."""
        grid = Grid(5, 4, live_density=0.0)
        for cell in grid:
            neighbors = cell.neighbors
            assert len(neighbors) == 8
            assert len(set(neighbors)) == 8
            assert (cell.x, cell.y) not in neighbors

    def test_neighbor_wiring_is_toroidal(self):
        """Test the corner wraps to the opposite corner in a fixed order."""
        grid = Grid(5, 4, live_density=0.0)
        assert grid.neighbors_of(0, 0) == (
            (4, 3),
            (0, 3),
            (1, 3),
            (4, 0),
            (1, 0),
            (4, 1),
            (0, 1),
            (1, 1),
        )
        assert (0, 0) in grid.neighbors_of(4, 3)

    def test_neighbor_wiring_is_stable(self):
        """Test neighbors are not rewired by advancing or randomizing."""
        grid = Grid(6, 6, live_density=0.3, seed=3)
        before = [cell.neighbors for cell in grid]

        grid.advance()
        grid.randomize(0.7)

        assert [cell.neighbors for cell in grid] == before

    def test_cell_operations(self):
        """Test cell get/set and wrapping coordinates."""
        grid = Grid(3, 3, live_density=0.0)

        grid.set_cell(1, 2, True)
        assert grid.get_cell(1, 2)
        assert grid.cell(1, 2).alive

        grid.set_cell(-1, -1, True)  # Should wrap to (2, 2)
        assert grid.get_cell(2, 2)
        assert grid.get_cell(5, 5)

        grid.set_cell(1, 2, False)
        assert not grid.get_cell(1, 2)

    def test_clear(self):
        """Test grid clearing."""
        grid = Grid(5, 5, live_density=1.0)
        assert grid.population == 25

        grid.clear()
        assert grid.population == 0

    def test_randomize(self):
        """Test random population."""
        grid = Grid(10, 10, live_density=0.0)

        grid.randomize(0.0)
        assert grid.population == 0

        grid.randomize(1.0)
        assert grid.population == 100

        grid.randomize(0.5)
        # Should have roughly half the cells (allow some variance)
        assert 20 <= grid.population <= 80

        with pytest.raises(GeometryError):
            grid.randomize(-0.1)

    def test_randomize_with_seed(self):
        """Test seeded populations are reproducible."""
        first = Grid(12, 8, live_density=0.4, seed=42)
        second = Grid(12, 8, live_density=0.4, seed=42)
        assert first == second

        second.randomize(0.4, seed=43)
        second.randomize(0.4, seed=42)
        assert first == second

    def test_all_dead_stays_dead(self):
        """Test no cell is born on an empty board."""
        grid = Grid(8, 8, live_density=0.0)
        for _ in range(3):
            grid.advance()
        assert grid.population == 0

    def test_isolated_cell_dies(self):
        """Test a single live cell dies after one generation."""
        grid = Grid(10, 10, live_density=0.0)
        grid.set_cell(5, 5, True)

        grid.advance()
        assert grid.population == 0

    @pytest.mark.parametrize("size,origin", [(4, (0, 0)), (6, (2, 2)), (10, (9, 9))])
    def test_still_life_block(self, size, origin):
        """Test a 2x2 block never changes, including across the wrap."""
        grid = Grid(size, size, live_density=0.0)
        ox, oy = origin
        for dx in (0, 1):
            for dy in (0, 1):
                grid.set_cell(ox + dx, oy + dy, True)
        expected = grid.cells.copy()

        for _ in range(5):
            grid.advance()
            assert np.array_equal(grid.cells, expected)

    def test_oscillator_blinker(self):
        """Test blinker oscillator (period 2)."""
        grid = Grid(5, 5, live_density=0.0)
        grid.set_cell(2, 1, True)
        grid.set_cell(2, 2, True)
        grid.set_cell(2, 3, True)

        grid.advance()
        assert grid.population == 3
        assert grid.get_cell(1, 2)
        assert grid.get_cell(2, 2)
        assert grid.get_cell(3, 2)

        grid.advance()
        assert grid.population == 3
        assert grid.get_cell(2, 1)
        assert grid.get_cell(2, 2)
        assert grid.get_cell(2, 3)

    def test_glider_crosses_the_edge(self):
        """Test a glider travels diagonally and wraps around the torus."""
        glider = PatternLibrary().get_pattern("Glider")
        grid = Grid(10, 10, live_density=0.0)
        glider.apply_to_grid(grid, 8, 8)

        moved = Grid(10, 10, live_density=0.0)
        glider.apply_to_grid(moved, 9, 9)

        for _ in range(4):
            grid.advance()
        assert grid == moved

        start = Grid(10, 10, live_density=0.0)
        glider.apply_to_grid(start, 8, 8)
        for _ in range(36):
            grid.advance()
        assert grid == start

    def test_advance_matches_simultaneous_update(self):
        """Test every cell sees the same generation during an advance."""
        grid = Grid(12, 9, live_density=0.35, seed=7)
        for _ in range(6):
            expected = reference_step(grid.cells.copy())
            grid.advance()
            assert np.array_equal(grid.cells, expected)

    def test_iteration_order(self):
        """Test cells are iterated row by row."""
        grid = Grid(3, 2, live_density=0.0)
        assert [(cell.x, cell.y) for cell in grid] == [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]

    def test_equality(self):
        """Test grid equality comparison."""
        grid1 = Grid(3, 3, live_density=0.0)
        grid2 = Grid(3, 3, live_density=0.0)
        assert grid1 == grid2

        grid2.set_cell(2, 2, True)
        assert grid1 != grid2

        assert grid1 != Grid(4, 4, live_density=0.0)
        assert grid1 != Grid(3, 3, cell_size=2, live_density=0.0)
        assert grid1 != "not a grid"

    def test_string_representation(self):
        """Test string representation."""
        grid = Grid(3, 3, live_density=0.0)
        assert str(grid) == "   \n   \n   "

        grid.set_cell(0, 0, True)
        grid.set_cell(1, 1, True)
        grid.set_cell(2, 2, True)
        assert str(grid) == "*  \n * \n  *"
