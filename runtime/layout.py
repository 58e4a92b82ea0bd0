"""
Board setup helpers.

Setup is the only phase where tiles are placed directly on the board;
afterwards every change goes through the MoveExecutor.
"""

from __future__ import annotations

import random
from typing import List, Optional, Sequence, Tuple

from puzzle_engine.board.board import BoardState
from puzzle_engine.core.types import CellPos
from puzzle_engine.tiles.tile import Tile

from infra.logger import get_logger

log = get_logger(__name__)


def formation_cells(board: BoardState, columns: int, rows: int) -> List[CellPos]:
    """
    Cells of a ``columns x rows`` block centered on the board.

    Cells falling outside the board (block larger than the board) are
    dropped.
    """
    offset_x = (board.width - columns) // 2
    offset_y = (board.height - rows) // 2
    cells = [
        CellPos(x + offset_x, y + offset_y)
        for y in range(rows)
        for x in range(columns)
    ]
    return [pos for pos in cells if board.is_inside_bounds(pos)]


def place_centered_formation(
    board: BoardState,
    tiles: Sequence[Tile],
    columns: int,
    rows: int,
    rng: Optional[random.Random] = None,
) -> List[Tuple[Tile, CellPos]]:
    """
    Place tiles on shuffled cells of a centered block.

    Tiles beyond the block's capacity are not placed and are logged as
    errors.

    Args:
        board: Board to populate
        tiles: Tiles to place, in order
        columns: Block width
        rows: Block height
        rng: Random source for the shuffle (seed it for reproducible boards)

    Returns:
        (tile, cell) pairs actually placed
    """
    rng = rng or random.Random()
    cells = formation_cells(board, columns, rows)
    rng.shuffle(cells)

    placed: List[Tuple[Tile, CellPos]] = []
    for index, tile in enumerate(tiles):
        if index >= len(cells):
            log.error("No formation cell left for %s (%d cells)", tile.label(), len(cells))
            continue
        pos = cells[index]
        if board.try_place_tile(pos, tile):
            placed.append((tile, pos))
        else:
            log.error("Failed to place tile %s at %s", tile.label(), pos)
    return placed
