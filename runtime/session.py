"""
GameSession - the selection and preview layer on top of the engine.

A session owns one board and wires together:
- a TileFactory with its own IDGenerator
- a MoveRecorder standing in for the view layer
- an ObjectiveEvaluator
- a MoveExecutor

and tracks the player's current selection. It only ever asks the engine
for destinations (compute_moves) and asks the executor to apply a move.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from puzzle_engine.board.board import BoardState
from puzzle_engine.core.rules import MoveOption
from puzzle_engine.core.types import CellPos, MoveValidation
from puzzle_engine.mechanics.executor import MoveExecutor, MoveResult
from puzzle_engine.mechanics.movement import compute_moves
from puzzle_engine.mechanics.objectives import Objective, ObjectiveEvaluator
from puzzle_engine.tiles.definitions import TileLibrary
from puzzle_engine.tiles.factory import TileFactory
from puzzle_engine.tiles.tile import Tile

from infra.logger import get_logger
from .events import MoveRecorder
from .layout import place_centered_formation

log = get_logger(__name__)


@dataclass
class SessionConfig:
    """
    Board setup parameters.

    Attributes:
        width: Board width
        height: Board height
        formation_columns: Columns of the initial centered tile block
        formation_rows: Rows of the initial centered tile block
        seed: Seed for the formation shuffle (None = nondeterministic)
    """
    width: int = 8
    height: int = 8
    formation_columns: int = 3
    formation_rows: int = 2
    seed: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "formation_columns": self.formation_columns,
            "formation_rows": self.formation_rows,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> SessionConfig:
        return cls(
            width=data.get("width", 8),
            height=data.get("height", 8),
            formation_columns=data.get("formation_columns", 3),
            formation_rows=data.get("formation_rows", 2),
            seed=data.get("seed"),
        )


class GameSession:
    """
    One puzzle being played.

    Usage:
        session = GameSession.from_placements(3, 3, library, [("Motor", (0, 0))])
        session.select((0, 0))
        options = session.preview()
        result = session.move_selected_to(options[0].destination)
    """

    def __init__(self, board: BoardState, factory: Optional[TileFactory] = None):
        self.board = board
        self.factory = factory if factory is not None else TileFactory()
        self.recorder = MoveRecorder()
        self.completed_objectives: List[str] = []
        self.objectives = ObjectiveEvaluator(
            on_objective_completed=self._on_objective_completed,
            on_all_completed=self._on_all_completed,
        )
        self.executor = MoveExecutor(board, presenter=self.recorder, objectives=self.objectives)
        self.move_count = 0
        self._selected: Optional[CellPos] = None

    # ========================================================================
    # CONSTRUCTION
    # ========================================================================

    @classmethod
    def from_config(
        cls,
        config: SessionConfig,
        library: TileLibrary,
        type_keys: Optional[Iterable[str]] = None,
    ) -> GameSession:
        """
        Build a session with a shuffled, centered formation.

        Without explicit type keys, one tile per library definition is
        created, up to the formation size.
        """
        factory = TileFactory(library)
        board = BoardState(config.width, config.height)

        capacity = config.formation_columns * config.formation_rows
        if type_keys is None:
            keys = [definition.type_key for definition in library.all()]
            if len(keys) < capacity:
                log.warning(
                    "Requested %d tiles, but library only has %d. Using all available.",
                    capacity, len(keys)
                )
            keys = keys[:capacity]
        else:
            keys = list(type_keys)

        tiles = factory.create_tiles(keys)
        place_centered_formation(
            board,
            tiles,
            config.formation_columns,
            config.formation_rows,
            random.Random(config.seed),
        )
        log.info("Session board %dx%d ready with %d tiles", board.width, board.height, len(board))
        return cls(board, factory)

    @classmethod
    def from_placements(
        cls,
        width: int,
        height: int,
        library: TileLibrary,
        placements: Iterable[Tuple[str, CellPos]],
    ) -> GameSession:
        """
        Build a session from explicit (type_key, cell) placements.

        Raises:
            KeyError: If a type key is not in the library
            ValueError: If a placement is out of bounds or on an occupied cell
        """
        factory = TileFactory(library)
        board = BoardState(width, height)
        for type_key, pos in placements:
            tile = factory.create_tile(type_key)
            if not board.try_place_tile(pos, tile):
                raise ValueError(f"Cannot place {type_key} at {CellPos(*pos)}")
        return cls(board, factory)

    # ========================================================================
    # SELECTION & PREVIEW
    # ========================================================================

    @property
    def selected(self) -> Optional[CellPos]:
        return self._selected

    @property
    def selected_tile(self) -> Optional[Tile]:
        if self._selected is None:
            return None
        return self.board.tile_at(self._selected)

    def select(self, pos: CellPos) -> bool:
        """
        Select the tile at ``pos``; selecting the selected cell deselects it.

        Returns:
            True if a tile is selected after the call
        """
        pos = CellPos(*pos)
        if self._selected == pos:
            self.deselect()
            return False

        tile = self.board.tile_at(pos)
        if tile is None:
            log.debug("Nothing to select at %s", pos)
            return self._selected is not None

        self._selected = pos
        log.info("Selected %s at %s", tile.label(), pos)
        return True

    def deselect(self) -> None:
        if self._selected is not None:
            log.info("Deselected %s", self._selected)
        self._selected = None

    def preview(self) -> List[MoveOption]:
        """Destinations available to the selected tile, using its own rules."""
        tile = self.selected_tile
        if tile is None:
            return []
        return compute_moves(self.board, self._selected, tile.movement_rules)

    def move_selected_to(self, destination: CellPos) -> MoveResult:
        """
        Move the selected tile to one of its previewed destinations.

        The selection is cleared after a successful move.
        """
        destination = CellPos(*destination)
        if self.selected_tile is None:
            return self._reject(
                self._selected, destination,
                MoveValidation.fail("NO_SELECTION", "No tile selected")
            )

        origin = self._selected
        if destination not in {option.destination for option in self.preview()}:
            return self._reject(
                origin, destination,
                MoveValidation.fail("NOT_AVAILABLE", f"Move to {destination} is not valid")
            )

        result = self.executor.resolve_move(origin, destination)
        if result.success:
            self.move_count += 1
            self.deselect()
        return result

    def _reject(self, origin: Optional[CellPos], destination: CellPos, validation: MoveValidation) -> MoveResult:
        log.warning("Move rejected [%s]: %s", validation.error_code, validation.message)
        return MoveResult.rejected(origin, destination, validation)

    # ========================================================================
    # OBJECTIVES
    # ========================================================================

    def add_objective(self, objective: Objective) -> None:
        self.objectives.add_objective(objective)

    @property
    def is_won(self) -> bool:
        return self.objectives.is_won

    def _on_objective_completed(self, objective: Objective) -> None:
        self.completed_objectives.append(objective.name)

    def _on_all_completed(self) -> None:
        log.info("Puzzle solved on board %s", self.board)

    # ========================================================================
    # UTILITY
    # ========================================================================

    def to_dict(self) -> Dict[str, Any]:
        """UI-friendly snapshot of the session."""
        return {
            "board": self.board.to_dict(),
            "selected": list(self._selected) if self._selected is not None else None,
            "move_count": self.move_count,
            "objectives": self.objectives.to_dict(),
            "won": self.is_won,
        }
