"""Toroidal grid for Conway's Game of Life."""

from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple
import numpy as np

from .cell import Cell, Coordinate
from .errors import GeometryError

if TYPE_CHECKING:
    from .settings import BoardSettings


class Grid:
    """A torus of cells advanced one generation at a time.

    Cell states live in a numpy array indexed ``[x, y]``. Each ``Cell`` is a
    view onto that array and knows its 8 neighbors by coordinate; the
    neighbor wiring is built once here and never recomputed.
    """

    def __init__(
        self,
        columns: int,
        rows: int,
        cell_size: int = 1,
        live_density: float = 0.1,
        seed: Optional[int] = None,
    ) -> None:
        """Initialize a new grid with randomly populated cells.

        Args:
            columns: Number of columns
            rows: Number of rows
            cell_size: Pixels per cell (display scale only)
            live_density: Chance each cell starts alive (0.0 to 1.0)
            seed: Optional seed for the random population

        Raises:
            GeometryError: If any dimension is not positive or the density
                is outside [0, 1]
        """
        if columns <= 0 or rows <= 0:
            raise GeometryError(f"Grid must have at least one column and row, got {columns}x{rows}")
        if cell_size <= 0:
            raise GeometryError(f"Cell size must be positive, got {cell_size}")
        _check_density(live_density)

        self.columns = columns
        self.rows = rows
        self.cell_size = cell_size
        self._cells = np.zeros((columns, rows), dtype=np.int8)
        self._next_cells = np.zeros((columns, rows), dtype=np.int8)
        self._grid: List[List[Cell]] = []

        self._connect_neighbors()
        self.randomize(live_density, seed)

    @classmethod
    def from_pixels(
        cls,
        width: int,
        height: int,
        cell_size: int,
        live_density: float = 0.1,
        seed: Optional[int] = None,
    ) -> "Grid":
        """Create a grid covering a pixel area.

        Args:
            width: Area width in pixels
            height: Area height in pixels
            cell_size: Pixels per cell
            live_density: Chance each cell starts alive
            seed: Optional seed for the random population

        Raises:
            GeometryError: If cell_size is not positive or the area holds no
                whole cell
        """
        if cell_size <= 0:
            raise GeometryError(f"Cell size must be positive, got {cell_size}")

        columns = width // cell_size
        rows = height // cell_size
        if columns <= 0 or rows <= 0:
            raise GeometryError(
                f"A {width}x{height} area with cell size {cell_size} gives a {columns}x{rows} grid"
            )

        return cls(columns, rows, cell_size, live_density, seed)

    @classmethod
    def from_settings(cls, settings: "BoardSettings", seed: Optional[int] = None) -> "Grid":
        """Create a grid from board settings."""
        return cls.from_pixels(
            settings.width,
            settings.height,
            settings.cell_size,
            settings.live_density,
            seed,
        )

    def _connect_neighbors(self) -> None:
        """Wire every cell to its 8 toroidal neighbors."""
        columns, rows = self.columns, self.rows
        for x in range(columns):
            column = []
            x_left = (x - 1) % columns
            x_right = (x + 1) % columns
            for y in range(rows):
                y_top = (y - 1) % rows
                y_bottom = (y + 1) % rows
                neighbors = (
                    (x_left, y_top),
                    (x, y_top),
                    (x_right, y_top),
                    (x_left, y),
                    (x_right, y),
                    (x_left, y_bottom),
                    (x, y_bottom),
                    (x_right, y_bottom),
                )
                column.append(Cell(x, y, self._cells, neighbors))
            self._grid.append(column)

    @property
    def cells(self) -> np.ndarray:
        """Get the current cell state array."""
        return self._cells

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (columns, rows)."""
        return (self.columns, self.rows)

    @property
    def width(self) -> int:
        """Width of the grid in pixels."""
        return self.columns * self.cell_size

    @property
    def height(self) -> int:
        """Height of the grid in pixels."""
        return self.rows * self.cell_size

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.sum(self._cells > 0))

    def cell(self, x: int, y: int) -> Cell:
        """Get the cell at (x, y). Coordinates wrap around the torus."""
        return self._grid[x % self.columns][y % self.rows]

    def get_cell(self, x: int, y: int) -> bool:
        """Get the state of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            True if cell is alive, False if dead
        """
        return bool(self._cells[x % self.columns, y % self.rows])

    def set_cell(self, x: int, y: int, alive: bool) -> None:
        """Set the state of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate
            alive: Whether the cell should be alive
        """
        self._cells[x % self.columns, y % self.rows] = 1 if alive else 0

    def neighbors_of(self, x: int, y: int) -> Tuple[Coordinate, ...]:
        """Coordinates of the 8 neighbors of (x, y), in wiring order."""
        return self.cell(x, y).neighbors

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells.fill(0)

    def randomize(self, live_density: float, seed: Optional[int] = None) -> None:
        """Re-roll every cell independently.

        Args:
            live_density: Chance each cell will be alive (0.0 to 1.0)
            seed: Optional seed for reproducible populations

        Raises:
            GeometryError: If live_density is outside [0, 1]
        """
        _check_density(live_density)

        if seed is None:
            draws = np.random.random(self.shape)
        else:
            draws = np.random.default_rng(seed).random(self.shape)

        self._cells[:] = draws < live_density

    def advance(self) -> None:
        """Advance the grid by one generation.

        Every cell computes its next state from the current generation before
        any cell commits, so the result does not depend on iteration order.
        """
        next_cells = self._next_cells
        for cell in self:
            next_cells[cell.x, cell.y] = cell.compute_next_state()

        for cell in self:
            cell.commit(bool(next_cells[cell.x, cell.y]))

    def __iter__(self) -> Iterator[Cell]:
        """Iterate over cells row by row, left to right."""
        for y in range(self.rows):
            for x in range(self.columns):
                yield self._grid[x][y]

    def __eq__(self, other: object) -> bool:
        """Check if two grids have the same geometry and cell states."""
        if not isinstance(other, Grid):
            return False
        return (
            self.shape == other.shape
            and self.cell_size == other.cell_size
            and np.array_equal(self._cells, other._cells)
        )

    def __str__(self) -> str:
        """Console rendering: '*' for living cells, ' ' for dead ones."""
        lines = []
        for y in range(self.rows):
            lines.append("".join(self._grid[x][y].render_char() for x in range(self.columns)))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Grid(columns={self.columns}, rows={self.rows}, cell_size={self.cell_size})"


def _check_density(live_density: float) -> None:
    if not 0.0 <= live_density <= 1.0:
        raise GeometryError(f"Live density must be between 0.0 and 1.0, got {live_density}")
