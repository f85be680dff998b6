"""Named Game of Life seed patterns."""

from typing import Dict, List, Optional, Tuple

from .grid import Grid


class Pattern:
    """A set of living cells relative to a top-left origin."""

    def __init__(self, name: str, cells: List[Tuple[int, int]], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (x, y) coordinates for living cells
            description: Optional description
        """
        self.name = name
        self.cells = cells
        self.description = description

    def apply_to_grid(self, grid: Grid, offset_x: int = 0, offset_y: int = 0, clear: bool = True) -> None:
        """Stamp this pattern onto a grid.

        Cells past an edge wrap around to the opposite side.

        Args:
            grid: Target grid
            offset_x: Horizontal offset
            offset_y: Vertical offset
            clear: Kill every cell of the grid first
        """
        if clear:
            grid.clear()
        for x, y in self.cells:
            grid.set_cell(x + offset_x, y + offset_y, True)

    def get_size(self) -> Tuple[int, int]:
        """Width and height of the area spanned by the live cells, (0, 0) if empty."""
        if not self.cells:
            return (0, 0)

        xs, ys = zip(*self.cells)
        return (max(xs) - min(xs) + 1, max(ys) - min(ys) + 1)

    @classmethod
    def from_grid(cls, grid: Grid, name: str, description: str = "") -> "Pattern":
        """Create pattern from current grid state."""
        cells = [(cell.x, cell.y) for cell in grid if cell.alive]
        return cls(name, cells, description)


class PatternLibrary:
    """Built-in patterns, looked up by name."""

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        # Still life patterns
        self.add_pattern(Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block"))

        self.add_pattern(
            Pattern(
                "Beehive",
                [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (2, 2)],
                "Beehive still life",
            )
        )

        # Oscillators
        self.add_pattern(Pattern("Blinker", [(0, 1), (1, 1), (2, 1)], "Period-2 oscillator"))

        self.add_pattern(
            Pattern(
                "Toad",
                [(1, 0), (2, 0), (3, 0), (0, 1), (1, 1), (2, 1)],
                "Period-2 oscillator",
            )
        )

        # Spaceships
        self.add_pattern(
            Pattern(
                "Glider",
                [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)],
                "Smallest spaceship, period-4",
            )
        )

        # Guns
        self.add_pattern(
            Pattern(
                "Gosper Glider Gun",
                [
                    # Left block
                    (0, 4),
                    (1, 4),
                    (0, 5),
                    (1, 5),
                    # Left queen bee
                    (12, 2),
                    (13, 2),
                    (11, 3),
                    (15, 3),
                    (10, 4),
                    (16, 4),
                    (10, 5),
                    (14, 5),
                    (16, 5),
                    (17, 5),
                    (10, 6),
                    (16, 6),
                    (11, 7),
                    (15, 7),
                    (12, 8),
                    (13, 8),
                    # Right queen bee
                    (24, 0),
                    (22, 1),
                    (24, 1),
                    (20, 2),
                    (21, 2),
                    (20, 3),
                    (21, 3),
                    (20, 4),
                    (21, 4),
                    (22, 5),
                    (24, 5),
                    (24, 6),
                    # Right block
                    (34, 2),
                    (35, 2),
                    (34, 3),
                    (35, 3),
                ],
                "Emits a glider every 30 generations",
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern to the library."""
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name.

        Returns:
            Pattern instance or None if not found
        """
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names."""
        return list(self._patterns.keys())
