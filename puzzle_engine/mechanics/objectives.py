"""
Objective evaluation for the puzzle engine.

This module provides:
- Objective: a named predicate over the board
- TileAtPositionObjective: a tile of a given type occupies a given cell
- TilesAdjacentObjective: tiles of two types touch each other
- ObjectiveEvaluator: AND-composition of objectives with one-shot
  completion notifications

Evaluation recomputes everything from scratch on every call. Boards are
small and moves are human-paced, so there is no incremental tracking.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Set

from infra.logger import get_logger

from ..core.types import CellPos

if TYPE_CHECKING:
    from ..board.board import BoardState

log = get_logger(__name__)


class Objective(ABC):
    """A named win-condition predicate over the board."""

    name: str

    @abstractmethod
    def is_satisfied(self, board: BoardState) -> bool:
        ...

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "kind": type(self).__name__}


@dataclass(frozen=True)
class TileAtPositionObjective(Objective):
    """A tile with ``type_key`` occupies ``pos``."""
    type_key: str
    pos: CellPos
    name: str = ""

    def __post_init__(self):
        object.__setattr__(self, "pos", CellPos(*self.pos))
        if not self.name:
            object.__setattr__(self, "name", f"{self.type_key} at {self.pos}")

    def is_satisfied(self, board: BoardState) -> bool:
        tile = board.tile_at(self.pos)
        return tile is not None and tile.type_key == self.type_key

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "type_key": self.type_key, "pos": list(self.pos)}


@dataclass(frozen=True)
class TilesAdjacentObjective(Objective):
    """
    Some tile of ``first_key`` is orthogonally (or, optionally, diagonally)
    adjacent to some tile of ``second_key``.
    """
    first_key: str
    second_key: str
    include_diagonals: bool = False
    name: str = ""

    def __post_init__(self):
        if not self.name:
            object.__setattr__(self, "name", f"{self.first_key} next to {self.second_key}")

    def is_satisfied(self, board: BoardState) -> bool:
        for pos in board.all_tile_positions():
            tile = board.tile_at(pos)
            if tile is None or tile.type_key != self.first_key:
                continue
            for neighbor in board.grid.get_neighbors(pos, self.include_diagonals):
                other = board.tile_at(neighbor)
                if other is not None and other.type_key == self.second_key:
                    return True
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {
            **super().to_dict(),
            "first_key": self.first_key,
            "second_key": self.second_key,
            "include_diagonals": self.include_diagonals,
        }


class ObjectiveEvaluator:
    """
    Polls objectives after each move and reports completion once.

    Usage:
        evaluator = ObjectiveEvaluator(on_all_completed=lambda: print("Solved!"))
        evaluator.add_objective(TileAtPositionObjective("Brain", (2, 2)))
        evaluator.evaluate(board)
    """

    def __init__(
        self,
        on_objective_completed: Optional[Callable[[Objective], None]] = None,
        on_all_completed: Optional[Callable[[], None]] = None,
    ):
        """
        Initialize the evaluator.

        Args:
            on_objective_completed: Called the first time each objective is
                found satisfied
            on_all_completed: Called once, when every objective is satisfied
        """
        self._objectives: List[Objective] = []
        self._completed: Set[int] = set()
        self._won = False
        self._on_objective_completed = on_objective_completed
        self._on_all_completed = on_all_completed

    @property
    def objectives(self) -> List[Objective]:
        return list(self._objectives)

    @property
    def is_won(self) -> bool:
        return self._won

    def add_objective(self, objective: Objective) -> None:
        self._objectives.append(objective)

    def evaluate(self, board: BoardState) -> bool:
        """
        Check objectives in order, stopping at the first unsatisfied one.

        No-op once won. An empty objective list never wins.

        Returns:
            True if the board is (or already was) in a winning state
        """
        if self._won:
            return True
        if not self._objectives:
            return False

        for index, objective in enumerate(self._objectives):
            if not objective.is_satisfied(board):
                return False
            if index not in self._completed:
                self._completed.add(index)
                log.info("Objective completed: %s", objective.name)
                if self._on_objective_completed is not None:
                    self._on_objective_completed(objective)

        self._won = True
        log.info("All %d objectives completed", len(self._objectives))
        if self._on_all_completed is not None:
            self._on_all_completed()
        return True

    def reset(self) -> None:
        """Drop all objectives and clear the won flag."""
        self._objectives.clear()
        self._completed.clear()
        self._won = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "won": self._won,
            "objectives": [
                {**objective.to_dict(), "completed": index in self._completed}
                for index, objective in enumerate(self._objectives)
            ],
        }
