"""Rule violations raised by the game core.

Every non-fatal failure carries a :class:`Rejection` reason. Core functions raise
before they mutate anything, so a caught :class:`GameRuleError` always means the
session is unchanged. The controller converts these into ``Rejected`` results.
"""

from __future__ import annotations

from enum import StrEnum


class Rejection(StrEnum):
    """Reason codes for rejected commands."""

    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"
    OVERLAP = "OVERLAP"
    INVALID_SHAPE = "INVALID_SHAPE"
    UNKNOWN_UNIT = "UNKNOWN_UNIT"
    INVALID_QUERY_INPUT = "INVALID_QUERY_INPUT"
    ALREADY_TARGETED = "ALREADY_TARGETED"
    INCOMPLETE_PLACEMENT = "INCOMPLETE_PLACEMENT"
    NO_SUPERIORITY = "NO_SUPERIORITY"
    QUERY_ALREADY_USED = "QUERY_ALREADY_USED"
    WRONG_PHASE = "WRONG_PHASE"
    OUT_OF_ORDER = "OUT_OF_ORDER"
    INVALID_SELECTION = "INVALID_SELECTION"


class GameRuleError(Exception):
    """Base class for recoverable rule violations."""

    def __init__(self, reason: Rejection, message: str) -> None:
        super().__init__(message)
        self.reason = reason
        self.message = message


class ValidationError(GameRuleError):
    """Caller-correctable input problem (bounds, overlap, shape, unknown names)."""


class StateError(GameRuleError):
    """Command not allowed in the current game state."""


class PlacementExhaustedError(RuntimeError):
    """Random placement ran out of attempts; the catalog does not fit the grid."""
