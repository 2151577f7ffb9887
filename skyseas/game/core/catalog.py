"""Unit catalog and footprint geometry."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from skyseas.game.core.errors import Rejection, ValidationError
from skyseas.game.core.geometry import in_bounds, to_coord, to_index
from skyseas.game.core.models import CELL_COUNT, Coord, Layer, Orientation, UnitKind, UnitType

Offset = tuple[int, int]


@dataclass(frozen=True, slots=True)
class UnitSpec:
    """Immutable catalog entry."""

    unit_type: UnitType
    name: str
    kind: UnitKind
    layer: Layer
    shape: tuple[Offset, ...]

    @property
    def size(self) -> int:
        return len(self.shape)


def _line(length: int) -> tuple[Offset, ...]:
    return tuple((dx, 0) for dx in range(length))


def _ship(unit_type: UnitType, name: str, length: int) -> UnitSpec:
    return UnitSpec(unit_type, name, UnitKind.SHIP, Layer.SEA, _line(length))


def _plane(unit_type: UnitType, name: str, shape: tuple[Offset, ...]) -> UnitSpec:
    return UnitSpec(unit_type, name, UnitKind.PLANE, Layer.AIR, shape)


SHIP_SPECS: tuple[UnitSpec, ...] = (
    _ship(UnitType.CARRIER, "Carrier", 5),
    _ship(UnitType.BATTLESHIP, "Battleship", 4),
    _ship(UnitType.SUBMARINE, "Submarine", 3),
    _ship(UnitType.DESTROYER, "Destroyer", 3),
    _ship(UnitType.PATROL, "Patrol Boat", 2),
)

PLANE_SPECS: tuple[UnitSpec, ...] = (
    _plane(UnitType.FIGHTER, "Fighter Jet", ((0, 0), (1, 0), (0, 1))),
    _plane(UnitType.BOMBER, "Bomber", ((0, 0), (1, 0), (2, 0), (3, 0))),
    _plane(UnitType.RECON, "Recon Plane", ((0, 0), (1, 0))),
)

CATALOG: tuple[UnitSpec, ...] = SHIP_SPECS + PLANE_SPECS
SPECS_BY_TYPE: dict[UnitType, UnitSpec] = {spec.unit_type: spec for spec in CATALOG}


def spec_for(unit_type: UnitType) -> UnitSpec:
    return SPECS_BY_TYPE[unit_type]


def rotate_offset(offset: Offset) -> Offset:
    """Rotate a relative offset by 90 degrees: (dx, dy) -> (dy, -dx).

    Only the 0 and 90 degree orientations exist in this game; there is no
    180 or 270 degree variant.
    """
    dx, dy = offset
    return dy, -dx


def compute_linear_cells(origin: Coord, size: int, orientation: Orientation) -> list[int]:
    """Compute absolute cells of a straight unit anchored at *origin*."""
    cells: list[int] = []
    for step in range(size):
        x = origin.x + (step if orientation is Orientation.HORIZONTAL else 0)
        y = origin.y + (step if orientation is Orientation.VERTICAL else 0)
        if not in_bounds(x, y):
            raise ValidationError(Rejection.OUT_OF_BOUNDS, "Placement out of bounds.")
        cells.append(to_index(x, y))
    return cells


def compute_shape_cells(origin: Coord, shape: Sequence[Offset], rotated90: bool) -> list[int]:
    """Compute absolute cells of a polyomino anchored at *origin*."""
    cells: list[int] = []
    for offset in shape:
        dx, dy = rotate_offset(offset) if rotated90 else offset
        x = origin.x + dx
        y = origin.y + dy
        if not in_bounds(x, y):
            raise ValidationError(Rejection.OUT_OF_BOUNDS, "Placement out of bounds.")
        cells.append(to_index(x, y))
    return cells


def cells_for(unit_type: UnitType, origin: Coord, orientation: Orientation) -> list[int]:
    """Compute the cells a catalog unit covers when anchored at *origin*."""
    spec = spec_for(unit_type)
    if spec.kind is UnitKind.SHIP:
        return compute_linear_cells(origin, spec.size, orientation)
    return compute_shape_cells(origin, spec.shape, orientation is Orientation.VERTICAL)


def matches_footprint(unit_type: UnitType, cells: Sequence[int]) -> bool:
    """Return whether *cells* are exactly the unit's footprint at some anchor."""
    wanted = set(cells)
    for index in range(CELL_COUNT):
        origin = to_coord(index)
        for orientation in Orientation:
            try:
                candidate = cells_for(unit_type, origin, orientation)
            except ValidationError:
                continue
            if set(candidate) == wanted:
                return True
    return False
