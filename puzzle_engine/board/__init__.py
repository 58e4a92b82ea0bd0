"""
Board state management for the puzzle engine.

This module provides:
- Grid: Spatial logic and geometry
- BoardState: Authoritative tile occupancy
"""

from .grid import Grid
from .board import BoardState

__all__ = [
    "Grid",
    "BoardState",
]
