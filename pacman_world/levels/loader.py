"""Level-file parsing.

Format::

    cols rows startX startY bonusProbability
    <rows lines of cols whitespace separated integers, 0=empty 1=wall>

Example (3x3 open cell surrounded by walls)::

    5 5 2 2 0.05
    1 1 1 1 1
    1 0 0 0 1
    1 0 0 0 1
    1 0 0 0 1
    1 1 1 1 1

Any deviation raises :class:`LevelFormatError`. Callers that treat a broken
level as fatal use :func:`load_level_or_exit`.
"""

import logging
from typing import List, Tuple

from pacman_world.components import Position
from pacman_world.levels.level import Level
from pacman_world.types import Cell

logger = logging.getLogger(__name__)

HEADER_FIELDS = 5
MAP_CELLS = (Cell.EMPTY, Cell.WALL)


class LevelFormatError(ValueError):
    """Raised when a level description cannot be parsed or is inconsistent."""


def _parse_int(token: str, what: str, line_no: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise LevelFormatError(
            f"line {line_no}: {what} must be an integer, got {token!r}"
        ) from None


def _parse_header(line: str) -> Tuple[int, int, Position, float]:
    fields = line.split()
    if len(fields) != HEADER_FIELDS:
        raise LevelFormatError(
            f"line 1: expected {HEADER_FIELDS} header fields "
            f"(cols rows startX startY bonusProbability), got {len(fields)}"
        )
    cols = _parse_int(fields[0], "cols", 1)
    rows = _parse_int(fields[1], "rows", 1)
    start = Position(_parse_int(fields[2], "startX", 1), _parse_int(fields[3], "startY", 1))
    try:
        probability = float(fields[4])
    except ValueError:
        raise LevelFormatError(
            f"line 1: bonusProbability must be a number, got {fields[4]!r}"
        ) from None

    if cols <= 0 or rows <= 0:
        raise LevelFormatError(f"line 1: dimensions must be positive, got {cols}x{rows}")
    if not 0.0 <= probability <= 1.0:
        raise LevelFormatError(
            f"line 1: bonusProbability must lie in [0, 1], got {probability}"
        )
    return cols, rows, start, probability


def _parse_row(line: str, cols: int, line_no: int) -> Tuple[Cell, ...]:
    tokens = line.split()
    if len(tokens) != cols:
        raise LevelFormatError(f"line {line_no}: expected {cols} cells, got {len(tokens)}")
    row: List[Cell] = []
    for token in tokens:
        value = _parse_int(token, "cell", line_no)
        if value not in MAP_CELLS:
            raise LevelFormatError(
                f"line {line_no}: cell must be 0 (empty) or 1 (wall), got {value}"
            )
        row.append(Cell(value))
    return tuple(row)


def parse_level(text: str) -> Level:
    """Parse the textual level description.

    Arguments:
        text: Whole file contents.

    Returns:
        Level: Validated level.

    Raises:
        LevelFormatError: On any malformed or inconsistent input.
    """
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise LevelFormatError("level is empty")

    cols, rows, start, probability = _parse_header(lines[0])

    body = lines[1:]
    if len(body) != rows:
        raise LevelFormatError(f"expected {rows} map rows, got {len(body)}")
    cells = tuple(_parse_row(line, cols, idx + 2) for idx, line in enumerate(body))

    if not (0 <= start.x < cols and 0 <= start.y < rows):
        raise LevelFormatError(f"start {start} lies outside the {cols}x{rows} grid")
    level = Level(
        width=cols,
        height=rows,
        cells=cells,
        start=start,
        bonus_probability=probability,
    )
    if level.cell_at(start) == Cell.WALL:
        raise LevelFormatError(f"start {start} is a wall")
    return level


def load_level(path: str) -> Level:
    """Read and parse a level file.

    Raises:
        OSError: If the file cannot be read.
        LevelFormatError: If its contents are malformed.
    """
    with open(path, encoding="utf-8") as f:
        text = f.read()
    level = parse_level(text)
    logger.debug(
        "Loaded level %s (%dx%d, start=%s, bonus_probability=%s)",
        path,
        level.width,
        level.height,
        level.start,
        level.bonus_probability,
    )
    return level


def load_level_or_exit(path: str) -> Level:
    """Load a level, terminating the process if it cannot be used."""
    try:
        return load_level(path)
    except (OSError, LevelFormatError) as exc:
        logger.error("Cannot load level %r: %s", path, exc)
        raise SystemExit(1) from exc
