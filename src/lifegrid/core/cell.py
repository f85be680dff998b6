"""Single cell of a Game of Life grid."""

from typing import Tuple
import numpy as np

from .errors import BoardFormatError

# Board file encoding
ALIVE_CHAR = "1"
DEAD_CHAR = "0"

# Console encoding
RENDER_ALIVE = "*"
RENDER_DEAD = " "

Coordinate = Tuple[int, int]


class Cell:
    """A view onto one position of a grid's state array.

    The cell does not own its state: it reads and writes the grid's array at
    ``(x, y)``. Neighbors are kept as coordinates into that same array, so
    the neighbor graph never holds references between cell objects.
    """

    __slots__ = ("x", "y", "_states", "_neighbors")

    def __init__(self, x: int, y: int, states: np.ndarray, neighbors: Tuple[Coordinate, ...]) -> None:
        """Initialize a cell.

        Args:
            x: Column coordinate
            y: Row coordinate
            states: The owning grid's state array, indexed [x, y]
            neighbors: Coordinates of the 8 Moore neighbors
        """
        self.x = x
        self.y = y
        self._states = states
        self._neighbors = tuple(neighbors)

    @property
    def alive(self) -> bool:
        """Whether the cell is currently alive."""
        return bool(self._states[self.x, self.y])

    @alive.setter
    def alive(self, value: bool) -> None:
        self._states[self.x, self.y] = 1 if value else 0

    @property
    def neighbors(self) -> Tuple[Coordinate, ...]:
        """Coordinates of the neighboring cells, in wiring order."""
        return self._neighbors

    def live_neighbor_count(self) -> int:
        """Count living neighbors (0-8)."""
        states = self._states
        return sum(int(states[nx, ny]) for nx, ny in self._neighbors)

    def compute_next_state(self) -> bool:
        """Return whether this cell is alive in the next generation.

        Reads only the current generation; nothing is written.
        """
        count = self.live_neighbor_count()
        if self.alive:
            return count == 2 or count == 3
        return count == 3

    def commit(self, next_state: bool) -> None:
        """Adopt a state previously returned by compute_next_state()."""
        self.alive = next_state

    def to_char(self) -> str:
        """Board file character for this cell."""
        return ALIVE_CHAR if self.alive else DEAD_CHAR

    def from_char(self, char: str) -> None:
        """Set the state from a board file character.

        Raises:
            BoardFormatError: If char is not '1' or '0'
        """
        self.alive = decode_char(char)

    def render_char(self) -> str:
        """Console character for this cell."""
        return RENDER_ALIVE if self.alive else RENDER_DEAD

    def __repr__(self) -> str:
        return f"Cell(x={self.x}, y={self.y}, alive={self.alive})"


def decode_char(char: str) -> bool:
    """Decode a board file character into an alive flag.

    Raises:
        BoardFormatError: If char is not '1' or '0'
    """
    if char == ALIVE_CHAR:
        return True
    if char == DEAD_CHAR:
        return False
    raise BoardFormatError(f"Invalid cell character {char!r}, expected '{ALIVE_CHAR}' or '{DEAD_CHAR}'")
