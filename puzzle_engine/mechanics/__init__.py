"""
Mechanics module - move calculation and resolution.

This module provides:
- compute_moves: Legal destinations for a tile (read-only)
- MoveExecutor: Applies simple and push moves (the only gameplay mutator)
- ObjectiveEvaluator: Checks win conditions after each move
"""

from .movement import compute_moves, destinations
from .executor import MoveExecutor, MoveResult
from .objectives import (
    Objective,
    ObjectiveEvaluator,
    TileAtPositionObjective,
    TilesAdjacentObjective,
)

__all__ = [
    "compute_moves",
    "destinations",
    "MoveExecutor",
    "MoveResult",
    "Objective",
    "ObjectiveEvaluator",
    "TileAtPositionObjective",
    "TilesAdjacentObjective",
]
