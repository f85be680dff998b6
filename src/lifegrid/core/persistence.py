"""Plain-text board files.

Layout::

    <columns>
    <rows>
    <cell size>
    <row 0: columns characters of '1'/'0'>
    ...
    <row rows-1>

Row 0 is the top of the grid and character ``x`` of a row is column ``x``.
"""

import re
from io import StringIO
from typing import IO, List

from .cell import decode_char
from .errors import BoardFormatError
from .grid import Grid


def serialize(grid: Grid, stream: IO[str]) -> None:
    """Write a grid to a text stream."""
    stream.write(f"{grid.columns}\n")
    stream.write(f"{grid.rows}\n")
    stream.write(f"{grid.cell_size}\n")

    for y in range(grid.rows):
        stream.write("".join(grid.cell(x, y).to_char() for x in range(grid.columns)))
        stream.write("\n")


def dumps(grid: Grid) -> str:
    """Serialize a grid to a string."""
    buffer = StringIO()
    serialize(grid, buffer)
    return buffer.getvalue()


_HEADER_PATTERN = re.compile(r"-?[0-9]+")


def _read_header(stream: IO[str], name: str) -> int:
    line = stream.readline()
    if not line:
        raise BoardFormatError(f"Board file ends before the {name} header")

    text = line.strip()
    if not _HEADER_PATTERN.fullmatch(text):
        raise BoardFormatError(f"Invalid {name} header {text!r}, expected a decimal integer")

    value = int(text)
    if value <= 0:
        raise BoardFormatError(f"Invalid {name} header {value}, must be positive")
    return value


def _read_row(stream: IO[str], y: int, rows: int, columns: int) -> List[bool]:
    line = stream.readline()
    if not line:
        raise BoardFormatError(f"Board file ends at row {y}, expected {rows} rows")

    line = line.rstrip("\r\n")
    if len(line) < columns:
        raise BoardFormatError(f"Row {y} has {len(line)} cells, expected {columns}")

    states = []
    for x in range(columns):
        try:
            states.append(decode_char(line[x]))
        except BoardFormatError as e:
            raise BoardFormatError(f"Row {y}, column {x}: {e}") from None
    return states


def deserialize(stream: IO[str]) -> Grid:
    """Read a grid from a text stream.

    Every row is read and checked before the grid is allocated. Characters
    past the declared column count on a row are ignored.

    Raises:
        BoardFormatError: If the header or any row is malformed
    """
    columns = _read_header(stream, "columns")
    rows = _read_header(stream, "rows")
    cell_size = _read_header(stream, "cell size")

    body = [_read_row(stream, y, rows, columns) for y in range(rows)]

    grid = Grid(columns, rows, cell_size, live_density=0.0)

    for y, states in enumerate(body):
        for x, alive in enumerate(states):
            grid.cell(x, y).alive = alive

    return grid


def loads(text: str) -> Grid:
    """Deserialize a grid from a string."""
    return deserialize(StringIO(text))


def save_board(grid: Grid, path: str) -> None:
    """Write a grid to a board file, replacing any existing file."""
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        serialize(grid, f)


def load_board(path: str) -> Grid:
    """Read a grid from a board file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        BoardFormatError: If the file is malformed or not UTF-8 text
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            return deserialize(f)
        except UnicodeDecodeError as e:
            raise BoardFormatError(f"Board file {path} is not UTF-8 text: {e}") from e
