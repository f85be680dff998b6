"""Console frontend for Conway's Game of Life."""

import argparse
import os
import sys
import time
from typing import Optional, TextIO

from ..core.errors import LifeError
from ..core.grid import Grid
from ..core.patterns import PatternLibrary
from ..core.persistence import load_board, save_board
from ..core.settings import SETTINGS_FILENAME, load_or_init_settings


def render(grid: Grid) -> str:
    """Render a grid as text, one line per row, ending with a newline."""
    return str(grid) + "\n"


def clear_screen() -> None:
    """Clear the terminal."""
    os.system("cls" if os.name == "nt" else "clear")


class ConsoleLife:
    """Runs a grid in the terminal: clear, render, advance, sleep."""

    def __init__(
        self,
        grid: Grid,
        delay: float = 0.01,
        stream: Optional[TextIO] = None,
        clear: bool = True,
    ) -> None:
        """Initialize the console runner.

        Args:
            grid: The grid to simulate
            delay: Seconds to sleep after each generation
            stream: Output stream (defaults to stdout)
            clear: Clear the terminal before each frame
        """
        self.grid = grid
        self.delay = delay
        self.stream = stream if stream is not None else sys.stdout
        self.clear = clear
        self._generation = 0

    @property
    def generation(self) -> int:
        """Number of generations advanced so far."""
        return self._generation

    def step(self) -> None:
        """Advance the grid by one generation."""
        self.grid.advance()
        self._generation += 1

    def draw(self) -> None:
        """Draw the current generation."""
        if self.clear:
            clear_screen()
        self.stream.write(render(self.grid))
        self.stream.flush()

    def run(self, max_generations: Optional[int] = None) -> int:
        """Run until max_generations frames have been shown, forever if None.

        Returns:
            Number of generations advanced
        """
        while max_generations is None or self._generation < max_generations:
            self.draw()
            self.step()
            time.sleep(self.delay)

        return self._generation


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life on a toroidal grid in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Random board from BoardSettings.json (created with defaults if missing)
  lifegrid

  # Continue from a saved board
  lifegrid --board gun.txt

  # Glider gun, 200 generations, then save the final board
  lifegrid --pattern "Gosper Glider Gun" --generations 200 --save final.txt

  # List available patterns
  lifegrid --list-patterns
        """,
    )

    parser.add_argument(
        "-s",
        "--settings",
        default=SETTINGS_FILENAME,
        help=f"Board settings JSON file (default: {SETTINGS_FILENAME})",
    )

    parser.add_argument("-b", "--board", help="Saved board file to run instead of a random board")

    parser.add_argument("--pattern", help="Name of a built-in pattern to place on a cleared board")

    parser.add_argument("--seed", type=int, help="Random seed for the initial population")

    parser.add_argument(
        "-d",
        "--delay",
        type=float,
        default=0.01,
        help="Seconds between generations (default: 0.01)",
    )

    parser.add_argument(
        "-g",
        "--generations",
        type=int,
        help="Stop after this many generations (default: run until interrupted)",
    )

    parser.add_argument("--save", help="Write the final board to this file")

    parser.add_argument("--no-clear", action="store_true", help="Don't clear the screen between frames")

    parser.add_argument("--list-patterns", action="store_true", help="List available patterns and exit")

    parser.add_argument("-v", "--verbose", action="store_true", help="Print progress messages")

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.delay < 0:
        errors.append("Delay must be non-negative")

    if args.generations is not None and args.generations < 0:
        errors.append("Generations must be non-negative")

    if args.board and args.pattern:
        errors.append("--board and --pattern cannot be combined")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def list_patterns(library: PatternLibrary) -> None:
    """Print the built-in patterns."""
    print("Available patterns:")
    for name in library.list_patterns():
        pattern = library.get_pattern(name)
        width, height = pattern.get_size()
        print(f"  {name} ({width}x{height}): {pattern.description}")


def build_grid(args: argparse.Namespace) -> Grid:
    """Create the starting grid from a saved board or from settings."""
    if args.board:
        if args.verbose:
            print(f"Loading board from {args.board}")
        return load_board(args.board)

    settings = load_or_init_settings(args.settings)
    settings.validate()
    if args.verbose:
        print(
            f"Settings from {args.settings}: {settings.width}x{settings.height}px, "
            f"cell size {settings.cell_size}, live density {settings.live_density:.2%}"
        )

    grid = Grid.from_settings(settings, seed=args.seed)

    if args.pattern:
        library = PatternLibrary()
        pattern = library.get_pattern(args.pattern)
        if pattern is None:
            raise LifeError(
                f"Pattern '{args.pattern}' not found. Available patterns: {', '.join(library.list_patterns())}"
            )
        pattern_width, pattern_height = pattern.get_size()
        if pattern_width > grid.columns or pattern_height > grid.rows:
            print(
                f"Warning: Pattern '{pattern.name}' ({pattern_width}x{pattern_height}) "
                f"wraps on a {grid.columns}x{grid.rows} grid"
            )
        offset_x = max(0, (grid.columns - pattern_width) // 2)
        offset_y = max(0, (grid.rows - pattern_height) // 2)
        pattern.apply_to_grid(grid, offset_x, offset_y)

    return grid


def main() -> int:
    """Main entry point for the console frontend.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args()

    if args.list_patterns:
        list_patterns(PatternLibrary())
        return 0

    if not validate_args(args):
        return 1

    try:
        grid = build_grid(args)
    except (LifeError, OSError) as e:
        print(f"Error: {e}")
        return 1

    if args.verbose:
        print(f"Grid: {grid.columns}x{grid.rows}, population {grid.population}")

    life = ConsoleLife(grid, delay=args.delay, clear=not args.no_clear)
    try:
        life.run(args.generations)
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")

    if args.save:
        try:
            save_board(grid, args.save)
        except OSError as e:
            print(f"Error: {e}")
            return 1
        if args.verbose:
            print(f"Board saved to {args.save} after {life.generation} generations")

    return 0


if __name__ == "__main__":
    sys.exit(main())
