"""
Utility helpers for the puzzle engine.
"""

from .id_generator import IDGenerator

__all__ = [
    "IDGenerator",
]
