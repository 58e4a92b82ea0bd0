"""
BoardState - the authoritative occupancy grid of one puzzle instance.

The BoardState:
- Owns fixed dimensions (through a Grid)
- Owns the only mapping from cell to tile
- Enforces bounds and single-occupancy on every mutation

It does NOT decide which moves are legal (MovementCalculator) nor
orchestrate moves and pushes (MoveExecutor).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from infra.logger import get_logger

from .grid import Grid
from ..core.types import CellPos
from ..tiles.tile import Tile

log = get_logger(__name__)


class BoardState:
    """
    A fixed-size board holding at most one tile per cell.

    All queries are total over any CellPos value: out-of-bounds lookups
    return "no tile" instead of raising.
    """

    def __init__(self, width: int, height: int):
        """
        Initialize an empty board.

        Args:
            width: Board width (number of columns)
            height: Board height (number of rows)

        Raises:
            ValueError: If dimensions are not positive
        """
        self.grid = Grid(width, height)
        self._tiles: Dict[CellPos, Tile] = {}

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    # ========================================================================
    # QUERIES
    # ========================================================================

    def is_inside_bounds(self, pos: CellPos) -> bool:
        """True if 0 <= x < width and 0 <= y < height."""
        return self.grid.in_bounds(pos)

    def tile_at(self, pos: CellPos) -> Optional[Tile]:
        """
        Get the tile at a position.

        Returns:
            The tile, or None if the cell is empty or out of bounds
        """
        return self._tiles.get(CellPos(*pos))

    def is_occupied(self, pos: CellPos) -> bool:
        return CellPos(*pos) in self._tiles

    def position_of(self, tile: Tile) -> Optional[CellPos]:
        """
        Find where a tile is, by ID.

        Returns:
            The tile's cell, or None if the tile is not on this board
        """
        for pos, placed in self._tiles.items():
            if placed.id == tile.id:
                return pos
        return None

    def all_tile_positions(self) -> List[CellPos]:
        """Snapshot of all occupied cells; unaffected by later mutations."""
        return list(self._tiles.keys())

    def all_tiles(self) -> List[Tile]:
        """Snapshot of all placed tiles; unaffected by later mutations."""
        return list(self._tiles.values())

    def __len__(self) -> int:
        return len(self._tiles)

    # ========================================================================
    # MUTATION
    # ========================================================================

    def try_place_tile(self, pos: CellPos, tile: Tile) -> bool:
        """
        Place a tile during board setup.

        Returns:
            False (and changes nothing) if the cell is out of bounds or
            already occupied, True otherwise
        """
        pos = CellPos(*pos)
        if not self.is_inside_bounds(pos):
            log.debug("Rejected placement of %s at %s: out of bounds", tile.label(), pos)
            return False
        if pos in self._tiles:
            log.debug("Rejected placement of %s at %s: occupied", tile.label(), pos)
            return False

        self._tiles[pos] = tile
        log.debug("Placed %s at %s", tile.label(), pos)
        return True

    def move_tile(self, from_pos: CellPos, to_pos: CellPos) -> None:
        """
        Move whatever is at from_pos to to_pos.

        Callers pre-validate both cells. Anything already at to_pos is
        dropped from the board. If from_pos is empty, to_pos ends up empty.
        A destination outside the board is ignored so that no tile is ever
        recorded out of bounds.
        """
        from_pos = CellPos(*from_pos)
        to_pos = CellPos(*to_pos)
        if not self.is_inside_bounds(to_pos):
            log.warning("Ignored move %s -> %s: destination out of bounds", from_pos, to_pos)
            return

        tile = self._tiles.pop(from_pos, None)
        self._tiles.pop(to_pos, None)
        if tile is None:
            log.debug("move_tile %s -> %s with empty origin cleared the destination", from_pos, to_pos)
            return
        self._tiles[to_pos] = tile

    # ========================================================================
    # UTILITY
    # ========================================================================

    def to_dict(self) -> Dict[str, Any]:
        """
        Snapshot of the board as a JSON-serializable dictionary.

        Tiles are listed in row-major order from the bottom-left cell.
        """
        return {
            "width": self.width,
            "height": self.height,
            "tiles": [
                {"pos": list(pos), **self._tiles[pos].to_dict()}
                for pos in sorted(self._tiles, key=lambda p: (p.y, p.x))
            ],
        }

    def render(self) -> str:
        """Text rendering, top row first, '.' for empty cells."""
        rows = []
        for screen_y in range(self.height):
            y = self.grid.to_screen_y(screen_y)
            row = []
            for x in range(self.width):
                tile = self._tiles.get(CellPos(x, y))
                row.append(tile.icon if tile else ".")
            rows.append(" ".join(row))
        return "\n".join(rows)

    def __str__(self) -> str:
        return f"BoardState({self.width}x{self.height}, tiles={len(self._tiles)})"

    def __repr__(self) -> str:
        return f"BoardState(grid={self.grid!r}, tiles={len(self._tiles)})"
