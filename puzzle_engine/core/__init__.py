"""
Core types and value objects for the puzzle engine.
"""

# Instead of from puzzle_engine.core.types import CellPos, you can do: from puzzle_engine.core import CellPos
from .types import (
    CellPos,
    ObstaclePassRule,
    MoveValidation,
    BoardInvariantError,
    ORTHOGONAL_DIRECTIONS,
    DIAGONAL_DIRECTIONS,
    unit_direction,
)
from .rules import MovementRules, MoveOption
from .events import TileMoved, BoardPresenter
from .validation import validate_move


__all__ = [
    "CellPos",
    "ObstaclePassRule",
    "MoveValidation",
    "BoardInvariantError",
    "ORTHOGONAL_DIRECTIONS",
    "DIAGONAL_DIRECTIONS",
    "unit_direction",
    "MovementRules",
    "MoveOption",
    "TileMoved",
    "BoardPresenter",
    "validate_move",
]
