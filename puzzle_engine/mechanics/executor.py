"""
MoveExecutor - applies one player-requested move.

This module handles:
- Validating move requests (bounds, origin tile, direction)
- Choosing between a simple move and a push
- Resolving push chains and applying them back-to-front
- Notifying the presentation layer of every single relocation
- Triggering objective evaluation after a completed move

The executor is the only component that mutates the board during play.
Validation always happens before the first mutation, so a move either
completes fully or changes nothing.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from infra.logger import get_logger

from ..core.events import BoardPresenter, TileMoved
from ..core.types import BoardInvariantError, CellPos, MoveValidation, unit_direction
from ..core.validation import validate_move

if TYPE_CHECKING:
    from ..board.board import BoardState
    from .objectives import ObjectiveEvaluator

log = get_logger(__name__)


@dataclass
class MoveResult:
    """
    Result of resolving a single move request.

    Attributes:
        success: Whether the move was applied
        from_pos: Requested origin (None when there was nothing to move)
        to_pos: Requested destination
        pushed: True if the move shoved a chain of tiles
        relocations: Every single-cell relocation, in application order
        failure_reason: Machine-readable reason code when the move fails
        message: Human-readable explanation
    """
    success: bool
    from_pos: Optional[CellPos]
    to_pos: CellPos
    pushed: bool = False
    relocations: List[TileMoved] = field(default_factory=list)
    failure_reason: str | None = None
    message: str = ""

    @classmethod
    def rejected(cls, from_pos: Optional[CellPos], to_pos: CellPos, validation: MoveValidation) -> MoveResult:
        return cls(
            success=False,
            from_pos=from_pos,
            to_pos=to_pos,
            failure_reason=validation.error_code,
            message=validation.message,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize move result to a plain dict."""
        return {
            "success": self.success,
            "from_pos": list(self.from_pos) if self.from_pos is not None else None,
            "to_pos": list(self.to_pos),
            "pushed": self.pushed,
            "relocations": [event.to_dict() for event in self.relocations],
            "failure_reason": self.failure_reason,
            "message": self.message,
        }


class MoveExecutor:
    """
    Executes moves on a board and keeps observers in sync.

    Usage:
        executor = MoveExecutor(board, presenter=recorder, objectives=evaluator)
        if not executor.execute_move((0, 0), (1, 0)):
            ...  # surface the rejection to the player
    """

    def __init__(
        self,
        board: BoardState,
        presenter: Optional[BoardPresenter] = None,
        objectives: Optional[ObjectiveEvaluator] = None,
    ):
        """
        Initialize the executor.

        Args:
            board: Board to mutate
            presenter: Notified once per single-cell relocation
            objectives: Evaluated after every successful move
        """
        self._board = board
        self._presenter = presenter
        self._objectives = objectives

    def execute_move(self, from_pos: CellPos, to_pos: CellPos) -> bool:
        """
        Execute a move from one cell to another.

        Returns:
            True if the move (simple or push) was applied, False if it was
            rejected, in which case nothing changed.
        """
        return self.resolve_move(from_pos, to_pos).success

    def resolve_move(self, from_pos: CellPos, to_pos: CellPos) -> MoveResult:
        """
        Execute a move and report the full outcome.

        An empty destination is a simple move. An occupied destination is a
        push of the contiguous chain of tiles starting at the destination.
        """
        from_pos = CellPos(*from_pos)
        to_pos = CellPos(*to_pos)

        validation = validate_move(self._board, from_pos, to_pos)
        if not validation.valid:
            log.warning("Move rejected [%s]: %s", validation.error_code, validation.message)
            return MoveResult.rejected(from_pos, to_pos, validation)

        if self._board.tile_at(to_pos) is None:
            result = self._apply_simple_move(from_pos, to_pos)
        else:
            result = self._apply_push_move(from_pos, to_pos)

        if result.success and self._objectives is not None:
            self._objectives.evaluate(self._board)
        return result

    # ========================================================================
    # SIMPLE MOVE
    # ========================================================================

    def _apply_simple_move(self, from_pos: CellPos, to_pos: CellPos) -> MoveResult:
        event = self._relocate(from_pos, to_pos, pushed=False)
        log.info("Moved %s from %s to %s", event.type_key, from_pos, to_pos)
        return MoveResult(success=True, from_pos=from_pos, to_pos=to_pos, relocations=[event])

    # ========================================================================
    # PUSH MOVE
    # ========================================================================

    def _apply_push_move(self, from_pos: CellPos, to_pos: CellPos) -> MoveResult:
        dx, dy = unit_direction(from_pos, to_pos)
        chain = self.find_push_chain(to_pos, (dx, dy))

        validation = self._validate_push_target(to_pos.offset(dx, dy, len(chain)))
        if not validation.valid:
            log.warning("Push rejected [%s]: %s", validation.error_code, validation.message)
            return MoveResult.rejected(from_pos, to_pos, validation)

        # Back-to-front: the last tile moves into the free cell first, so no
        # relocation ever lands on a tile that has not moved yet.
        relocations = [
            self._relocate(cell, cell.offset(dx, dy), pushed=True)
            for cell in reversed(chain)
        ]
        relocations.append(self._relocate(from_pos, to_pos, pushed=False))

        log.info(
            "%s pushed %d tile(s) from %s toward (%d,%d)",
            relocations[-1].type_key, len(chain), to_pos, dx, dy
        )
        return MoveResult(
            success=True,
            from_pos=from_pos,
            to_pos=to_pos,
            pushed=True,
            relocations=relocations,
        )

    def find_push_chain(self, start: CellPos, direction: Tuple[int, int]) -> List[CellPos]:
        """
        Collect the contiguous occupied cells from ``start`` along ``direction``.

        Stops at the first empty cell or at the board edge.
        """
        dx, dy = direction
        if (dx, dy) == (0, 0):
            raise BoardInvariantError("Push chain requested without a direction")

        chain: List[CellPos] = []
        cursor = CellPos(*start)
        while self._board.is_inside_bounds(cursor) and self._board.tile_at(cursor) is not None:
            chain.append(cursor)
            cursor = cursor.offset(dx, dy)
        return chain

    def _validate_push_target(self, final_pos: CellPos) -> MoveValidation:
        if not self._board.is_inside_bounds(final_pos):
            return MoveValidation.fail(
                "PUSH_OUT_OF_BOUNDS",
                f"Push chain would leave the board at {final_pos}"
            )
        if self._board.tile_at(final_pos) is not None:
            return MoveValidation.fail(
                "PUSH_BLOCKED",
                f"Push chain blocked at {final_pos}"
            )
        return MoveValidation.success()

    # ========================================================================
    # RELOCATION
    # ========================================================================

    def _relocate(self, from_pos: CellPos, to_pos: CellPos, pushed: bool) -> TileMoved:
        tile = self._board.tile_at(from_pos)
        if tile is None:
            raise BoardInvariantError(f"No tile to relocate at {from_pos}")
        if self._board.tile_at(to_pos) is not None:
            raise BoardInvariantError(f"Relocation of {tile.label()} would overwrite {to_pos}")

        self._board.move_tile(from_pos, to_pos)
        event = TileMoved(
            tile_id=tile.id,
            type_key=tile.type_key,
            from_pos=from_pos,
            to_pos=to_pos,
            pushed=pushed,
        )
        log.debug("Relocated %s %s -> %s", tile.label(), from_pos, to_pos)
        if self._presenter is not None:
            self._presenter.on_tile_moved(event)
        return event
