"""Per-player, per-layer grid state."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

import numpy as np

from skyseas.game.core.models import BOARD_SIZE, CELL_COUNT, Layer, UnitType


def _cells(dtype: type) -> np.ndarray:
    return np.zeros(CELL_COUNT, dtype=dtype)


@dataclass(slots=True)
class LayerState:
    """Numpy-backed occupancy and marker arrays, indexed by ``y * N + x``."""

    layer: Layer
    occupancy: np.ndarray = field(default_factory=lambda: _cells(np.int16))
    hits: np.ndarray = field(default_factory=lambda: _cells(np.bool_))
    misses: np.ndarray = field(default_factory=lambda: _cells(np.bool_))
    fog: np.ndarray = field(default_factory=lambda: _cells(np.bool_))

    def __post_init__(self) -> None:
        if self.occupancy.shape != (CELL_COUNT,):
            self.occupancy = _cells(np.int16)
        for name in ("hits", "misses", "fog"):
            if getattr(self, name).shape != (CELL_COUNT,):
                setattr(self, name, _cells(np.bool_))

    def owner(self, index: int) -> UnitType | None:
        """Return the unit occupying *index*, if any."""
        return UnitType.from_code(int(self.occupancy[index]))

    def is_occupied(self, index: int) -> bool:
        return bool(self.occupancy[index] != 0)

    def was_targeted(self, index: int) -> bool:
        """Return whether a strike already landed here."""
        return bool(self.hits[index] or self.misses[index])

    def claim(self, cells: Iterable[int], unit_type: UnitType) -> None:
        self.occupancy[list(cells)] = unit_type.code

    def vacate(self, cells: Iterable[int], unit_type: UnitType) -> None:
        """Free cells still owned by *unit_type*."""
        for index in cells:
            if self.occupancy[index] == unit_type.code:
                self.occupancy[index] = 0

    def all_hit(self, cells: Iterable[int]) -> bool:
        return bool(np.all(self.hits[list(cells)]))

    def clear_hits(self, cells: Iterable[int]) -> None:
        self.hits[list(cells)] = False

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.occupancy))

    @staticmethod
    def as_grid(values: np.ndarray) -> np.ndarray:
        """Row-major 2-D view of a flat cell array: ``grid[y, x]``."""
        return values.reshape(BOARD_SIZE, BOARD_SIZE)
