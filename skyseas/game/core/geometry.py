"""Grid coordinate helpers."""

from __future__ import annotations

from collections.abc import Iterator

from skyseas.game.core.models import BOARD_SIZE, CELL_COUNT, Coord


def to_index(x: int, y: int) -> int:
    return y * BOARD_SIZE + x


def to_coord(index: int) -> Coord:
    return Coord(x=index % BOARD_SIZE, y=index // BOARD_SIZE)


def in_bounds(x: int, y: int) -> bool:
    """Return whether (x, y) lies on the grid."""
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def index_in_bounds(index: int) -> bool:
    return 0 <= index < CELL_COUNT


def column_label(x: int) -> str:
    return chr(ord("A") + x)


def cell_name(index: int) -> str:
    """Name a cell by column letter and 1-based row, e.g. index 0 -> ``A1``."""
    coord = to_coord(index)
    return f"{column_label(coord.x)}{coord.y + 1}"


def parse_cell_name(text: str) -> int | None:
    """Translate a name like ``c7`` into a cell index, or ``None`` if malformed."""
    value = text.strip().upper()
    if len(value) < 2 or not value[0].isalpha() or not value[1:].isdigit():
        return None
    x = ord(value[0]) - ord("A")
    y = int(value[1:]) - 1
    if not in_bounds(x, y):
        return None
    return to_index(x, y)


def neighborhood(center: int) -> Iterator[int]:
    """Yield the in-bounds cells of the 3x3 window around *center*."""
    origin = to_coord(center)
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            x = origin.x + dx
            y = origin.y + dy
            if in_bounds(x, y):
                yield to_index(x, y)
