"""
Tile definitions for the puzzle engine.

This module exports:
- Tile (immutable tile value)
- AbilityDescriptor (optional ability description)
- TileDefinition / TileLibrary (configuration)
- TileFactory (ID-allocating construction)
"""

from .tile import Tile, AbilityDescriptor
from .definitions import TileDefinition, TileLibrary
from .factory import TileFactory

__all__ = [
    "Tile",
    "AbilityDescriptor",
    "TileDefinition",
    "TileLibrary",
    "TileFactory",
]
