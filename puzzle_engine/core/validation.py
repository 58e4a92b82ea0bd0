"""
Shared move validation helpers.

The executor and the selection layer both use these checks, so a move that
the session would accept is exactly a move the executor would attempt.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from .types import CellPos, MoveValidation

if TYPE_CHECKING:
    from ..board.board import BoardState


def validate_move(board: BoardState, from_pos: CellPos, to_pos: CellPos) -> MoveValidation:
    """
    Validate the parts of a move request that do not depend on pushing.

    Checks, in order: both cells inside the board, a tile at the origin,
    and a non-zero direction. Push-chain checks happen in the executor
    once the chain is known.
    """
    if not board.is_inside_bounds(from_pos) or not board.is_inside_bounds(to_pos):
        return MoveValidation.fail(
            "OUT_OF_BOUNDS",
            f"Invalid move: {CellPos(*from_pos)} -> {CellPos(*to_pos)} out of bounds"
        )

    if board.tile_at(from_pos) is None:
        return MoveValidation.fail(
            "NO_TILE",
            f"No tile at origin {CellPos(*from_pos)}"
        )

    if tuple(from_pos) == tuple(to_pos):
        return MoveValidation.fail(
            "NO_DIRECTION",
            f"Origin and destination are the same cell {CellPos(*from_pos)}"
        )

    return MoveValidation.success()
