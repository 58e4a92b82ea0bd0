"""
Rules engine for a turn-based, grid-based tile puzzle.

Usage:
    from puzzle_engine import BoardState, MoveExecutor, compute_moves

    board = BoardState(3, 3)
    board.try_place_tile((0, 0), tile)
    options = compute_moves(board, (0, 0), tile.movement_rules)
    MoveExecutor(board).execute_move((0, 0), options[0].destination)
"""

from .core import CellPos, MovementRules, MoveOption, ObstaclePassRule, TileMoved
from .board import BoardState, Grid
from .tiles import AbilityDescriptor, Tile, TileDefinition, TileFactory, TileLibrary
from .mechanics import (
    MoveExecutor,
    MoveResult,
    ObjectiveEvaluator,
    TileAtPositionObjective,
    TilesAdjacentObjective,
    compute_moves,
)
from .utils import IDGenerator

__all__ = [
    "CellPos",
    "MovementRules",
    "MoveOption",
    "ObstaclePassRule",
    "TileMoved",
    "BoardState",
    "Grid",
    "AbilityDescriptor",
    "Tile",
    "TileDefinition",
    "TileFactory",
    "TileLibrary",
    "MoveExecutor",
    "MoveResult",
    "ObjectiveEvaluator",
    "TileAtPositionObjective",
    "TilesAdjacentObjective",
    "compute_moves",
    "IDGenerator",
]
