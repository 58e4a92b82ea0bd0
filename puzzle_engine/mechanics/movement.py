"""
Movement calculation - legal destinations for a tile.

This module handles:
- Building the direction set from MovementRules
- Ray casting from the origin up to max_steps per direction
- Applying the obstacle-pass policy to every occupied cell

The board is read-only here. Applying a move is the MoveExecutor's job.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from ..core.rules import MoveOption, MovementRules
from ..core.types import CellPos, Delta, ObstaclePassRule

if TYPE_CHECKING:
    from ..board.board import BoardState


def compute_moves(board: BoardState, origin: CellPos, rules: MovementRules) -> List[MoveOption]:
    """
    Calculate all legal destinations from ``origin`` under ``rules``.

    Options are grouped by direction, in the order given by
    ``MovementRules.directions()`` (orthogonal first), and within a direction
    ordered from nearest to furthest. The origin is never a destination.

    Obstacle policies:
        CANNOT_PASS_THROUGH: the first occupied cell ends the direction
        CAN_PASS_THROUGH: occupied cells are skipped, never landed on
        MUST_PASS_THROUGH: empty cells count only after an occupied one
        PUSH_OBSTACLES: the first occupied cell is itself a destination
            (a push) and ends the direction

    Args:
        board: Board to inspect (not modified)
        origin: Cell the moving tile starts from
        rules: Movement constraints for this move

    Returns:
        List of MoveOption, possibly empty
    """
    origin = CellPos(*origin)
    options: List[MoveOption] = []
    for delta in rules.directions():
        options.extend(_cast_ray(board, origin, delta, rules))
    return options


def _cast_ray(board: BoardState, origin: CellPos, delta: Delta, rules: MovementRules) -> List[MoveOption]:
    pass_rule = rules.pass_rule
    passed_obstacle = False
    found: List[MoveOption] = []

    for pos in board.grid.ray(origin, delta, rules.max_steps):
        if board.tile_at(pos) is not None:
            if pass_rule == ObstaclePassRule.CAN_PASS_THROUGH:
                continue
            if pass_rule == ObstaclePassRule.MUST_PASS_THROUGH:
                passed_obstacle = True
                continue
            if pass_rule == ObstaclePassRule.PUSH_OBSTACLES:
                found.append(MoveOption(pos))
            # CANNOT_PASS_THROUGH, and PUSH_OBSTACLES after recording the push
            break

        if pass_rule != ObstaclePassRule.MUST_PASS_THROUGH or passed_obstacle:
            found.append(MoveOption(pos))

    return found


def destinations(options: List[MoveOption]) -> List[CellPos]:
    """Plain list of destination cells, in option order."""
    return [option.destination for option in options]
