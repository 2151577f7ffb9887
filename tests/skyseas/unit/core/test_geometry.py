from __future__ import annotations

from skyseas.game.core.geometry import (
    cell_name,
    in_bounds,
    index_in_bounds,
    neighborhood,
    parse_cell_name,
    to_coord,
    to_index,
)
from skyseas.game.core.models import Coord


def test_index_and_coord_are_row_major() -> None:
    assert to_index(3, 2) == 23
    assert to_coord(23) == Coord(3, 2)
    assert to_coord(99) == Coord(9, 9)


def test_bounds_checks() -> None:
    assert in_bounds(0, 0)
    assert in_bounds(9, 9)
    assert not in_bounds(10, 0)
    assert not in_bounds(0, -1)
    assert index_in_bounds(0)
    assert not index_in_bounds(100)
    assert not index_in_bounds(-1)


def test_cell_name_and_parse() -> None:
    assert cell_name(0) == "A1"
    assert cell_name(99) == "J10"
    assert parse_cell_name(" c2 ") == 12
    assert parse_cell_name("J10") == 99
    assert parse_cell_name("K1") is None
    assert parse_cell_name("A11") is None
    assert parse_cell_name("A") is None
    assert parse_cell_name("1A") is None


def test_neighborhood_interior_has_nine_cells() -> None:
    assert sorted(neighborhood(55)) == [44, 45, 46, 54, 55, 56, 64, 65, 66]


def test_neighborhood_clips_at_corner_and_edge() -> None:
    assert sorted(neighborhood(0)) == [0, 1, 10, 11]
    assert sorted(neighborhood(99)) == [88, 89, 98, 99]
    assert len(list(neighborhood(5))) == 6
