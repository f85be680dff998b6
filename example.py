#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

from lifegrid import Grid, PatternLibrary
from lifegrid.core.persistence import load_board, save_board
from lifegrid.core.settings import load_or_init_settings


def main():
    """Demonstrate programmatic usage of the lifegrid package."""
    # Random board from the settings file (written with defaults if missing)
    settings = load_or_init_settings()
    grid = Grid.from_settings(settings, seed=1)
    print(f"Random {grid.columns}x{grid.rows} board, population {grid.population}")

    # Glider gun on a fresh board
    gun = PatternLibrary().get_pattern("Gosper Glider Gun")
    grid = Grid(60, 30, live_density=0.0)
    gun.apply_to_grid(grid, offset_x=2, offset_y=2)

    for _ in range(60):
        grid.advance()

    print(grid)
    print(f"Population after 60 generations: {grid.population}")

    # Save and reload the board
    save_board(grid, "gun.txt")
    restored = load_board("gun.txt")
    print(f"Reloaded board matches: {restored == grid}")


if __name__ == "__main__":
    main()
