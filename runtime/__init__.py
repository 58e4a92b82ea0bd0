"""
Runtime layer driving the puzzle engine.

This module provides:
- GameSession: selection, preview and move requests for one puzzle
- SessionConfig: board setup parameters
- MoveRecorder: ordered relocation history for the view layer
"""

from .events import MoveRecorder
from .layout import formation_cells, place_centered_formation
from .session import GameSession, SessionConfig

__all__ = [
    "GameSession",
    "SessionConfig",
    "MoveRecorder",
    "formation_cells",
    "place_centered_formation",
]
