"""Player and unit instance state."""

from __future__ import annotations

from dataclasses import dataclass, field

from skyseas.game.core.catalog import CATALOG, UnitSpec, spec_for
from skyseas.game.core.layer import LayerState
from skyseas.game.core.models import Layer, UnitKind, UnitType


@dataclass(slots=True)
class Unit:
    """One player's instance of a catalog unit."""

    unit_type: UnitType
    placed: bool = False
    cells: tuple[int, ...] = ()
    disabled_turns: int = 0

    @property
    def spec(self) -> UnitSpec:
        return spec_for(self.unit_type)

    @property
    def kind(self) -> UnitKind:
        return self.spec.kind

    @property
    def layer(self) -> Layer:
        return self.spec.layer

    @property
    def name(self) -> str:
        return self.spec.name


def _fresh_units() -> dict[UnitType, Unit]:
    return {spec.unit_type: Unit(spec.unit_type) for spec in CATALOG}


@dataclass(slots=True)
class Player:
    """Setup and battle state for one side."""

    name: str
    locked: bool = False
    sea: LayerState = field(default_factory=lambda: LayerState(Layer.SEA))
    air: LayerState = field(default_factory=lambda: LayerState(Layer.AIR))
    units: dict[UnitType, Unit] = field(default_factory=_fresh_units)

    def layer(self, layer: Layer | str) -> LayerState:
        return self.sea if Layer(layer) is Layer.SEA else self.air

    def units_of(self, kind: UnitKind) -> list[Unit]:
        """Return units of *kind* in catalog order."""
        return [unit for unit in self.units.values() if unit.kind is kind]

    def unit_at(self, layer: Layer, index: int) -> Unit | None:
        unit_type = self.layer(layer).owner(index)
        return self.units[unit_type] if unit_type is not None else None


def new_player(name: str) -> Player:
    """Build a player with empty layers and every unit unplaced."""
    return Player(name=name)
