"""
Core type definitions for the puzzle engine.

This module contains the fundamental types, enums, and constants used
throughout the system. No logic beyond small helpers, just data.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Tuple

# ============================================================================
# SPATIAL TYPES
# ============================================================================


class CellPos(NamedTuple):
    """
    Grid coordinate (x, y) of a single board cell.

    Equality and hashing are structural, so a plain ``(x, y)`` tuple compares
    equal to the matching CellPos. Validity is never checked here; it is
    always checked against a specific board's bounds.
    """
    x: int
    y: int

    def offset(self, dx: int, dy: int, steps: int = 1) -> CellPos:
        """Return the cell ``steps`` steps away along (dx, dy)."""
        return CellPos(self.x + dx * steps, self.y + dy * steps)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


Delta = Tuple[int, int]

# Direction order matters: movement options are returned in this order.
ORTHOGONAL_DIRECTIONS: Tuple[Delta, ...] = (
    (1, 0),   # RIGHT
    (-1, 0),  # LEFT
    (0, 1),   # UP
    (0, -1),  # DOWN
)

DIAGONAL_DIRECTIONS: Tuple[Delta, ...] = (
    (1, 1),
    (1, -1),
    (-1, 1),
    (-1, -1),
)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def unit_direction(from_pos: CellPos, to_pos: CellPos) -> Delta:
    """
    Unit step from one cell toward another, each component in {-1, 0, 1}.

    Returns (0, 0) when both cells are the same.
    """
    return _sign(to_pos[0] - from_pos[0]), _sign(to_pos[1] - from_pos[1])


# ============================================================================
# OBSTACLE POLICY
# ============================================================================

class ObstaclePassRule(Enum):
    """How a movement ray interacts with an occupied cell."""
    CANNOT_PASS_THROUGH = "CannotPassThrough"  # Blocked by the first obstacle
    CAN_PASS_THROUGH = "CanPassThrough"  # May fly over, never land on
    MUST_PASS_THROUGH = "MustPassThrough"  # May only land after crossing one
    PUSH_OBSTACLES = "PushObstacles"  # The first obstacle is a push target

    def __str__(self) -> str:
        return self.value


# ============================================================================
# ERRORS & VALIDATION
# ============================================================================

class BoardInvariantError(RuntimeError):
    """
    Raised when the board reaches an inconsistent state.

    This is a defect, never an expected runtime condition: all expected
    failures are reported as return values.
    """


@dataclass
class MoveValidation:
    """
    Structured result of validating a move request.

    Attributes:
        valid: Whether the move may be applied
        error_code: Machine-readable error code (None if valid)
        message: Human-readable message explaining the result

    Error codes:
        - "OUT_OF_BOUNDS": Origin or destination lies outside the board
        - "NO_TILE": There is no tile at the origin
        - "NO_DIRECTION": Origin and destination are the same cell
        - "PUSH_OUT_OF_BOUNDS": The push chain would leave the board
        - "PUSH_BLOCKED": The cell receiving the last pushed tile is occupied
        - "NO_SELECTION": No tile is selected (session level)
        - "NOT_AVAILABLE": Destination is not a legal option (session level)
    """
    valid: bool
    error_code: str | None = None
    message: str = ""

    @staticmethod
    def success(message: str = "") -> MoveValidation:
        """Create a validation success result."""
        return MoveValidation(valid=True, error_code=None, message=message)

    @staticmethod
    def fail(error_code: str, message: str) -> MoveValidation:
        """Create a validation failure result."""
        return MoveValidation(valid=False, error_code=error_code, message=message)
