"""
Grid - Spatial logic for the puzzle board.

The Grid handles:
- Coordinate validation
- Ray walking along a direction
- Neighbor queries
- Coordinate system conversions

Coordinate System:
- X increases to the RIGHT
- Y increases UPWARD (mathematical convention)
- Origin (0, 0) is at BOTTOM-LEFT
"""

from __future__ import annotations
from typing import Iterator, List

from ..core.types import CellPos, Delta, DIAGONAL_DIRECTIONS, ORTHOGONAL_DIRECTIONS


class Grid:
    """
    A fixed-size 2D grid with mathematical coordinates (Y+ = UP).

    Provides spatial queries without any knowledge of tiles.

    Attributes:
        width: Grid width (X dimension)
        height: Grid height (Y dimension)
    """

    def __init__(self, width: int, height: int):
        """
        Initialize a grid.

        Args:
            width: Grid width (must be positive)
            height: Grid height (must be positive)

        Raises:
            ValueError: If dimensions are invalid
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive: {width}x{height}")

        self.width = width
        self.height = height

    def in_bounds(self, pos: CellPos) -> bool:
        """
        Check if a position is within grid boundaries.

        Args:
            pos: Position to check (x, y)

        Returns:
            True if position is valid, False otherwise
        """
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def ray(self, origin: CellPos, delta: Delta, max_steps: int) -> Iterator[CellPos]:
        """
        Walk from origin along delta, one step at a time.

        Yields the cells at steps 1..max_steps and stops at the first cell
        outside the grid. The origin itself is never yielded.

        Args:
            origin: Starting cell
            delta: Unit direction (dx, dy)
            max_steps: Maximum number of steps (non-positive yields nothing)
        """
        dx, dy = delta
        origin = CellPos(*origin)
        for step in range(1, max_steps + 1):
            pos = origin.offset(dx, dy, step)
            if not self.in_bounds(pos):
                return
            yield pos

    def get_neighbors(self, pos: CellPos, include_diagonals: bool = False) -> List[CellPos]:
        """
        Get neighboring positions (4 or 8 directions).

        Args:
            pos: Center position
            include_diagonals: If True, include diagonal neighbors (8 total)
                               If False, only cardinal directions (4 total)

        Returns:
            List of valid neighboring positions
        """
        deltas = ORTHOGONAL_DIRECTIONS + (DIAGONAL_DIRECTIONS if include_diagonals else ())
        center = CellPos(*pos)
        candidates = [center.offset(dx, dy) for dx, dy in deltas]
        return [p for p in candidates if self.in_bounds(p)]

    def cells(self) -> Iterator[CellPos]:
        """All cells, row by row from the bottom."""
        for y in range(self.height):
            for x in range(self.width):
                yield CellPos(x, y)

    def to_screen_y(self, math_y: int) -> int:
        """
        Convert mathematical Y coordinate to screen Y coordinate.

        Screen coordinates have Y=0 at top, mathematical has Y=0 at bottom.
        """
        return self.height - 1 - math_y

    def __str__(self) -> str:
        """String representation."""
        return f"Grid({self.width}x{self.height})"

    def __repr__(self) -> str:
        """Detailed representation."""
        return f"Grid(width={self.width}, height={self.height})"
