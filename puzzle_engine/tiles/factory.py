"""
Tile construction from definitions.
"""

from __future__ import annotations

from typing import List, Optional

from infra.logger import get_logger

from ..utils.id_generator import IDGenerator
from .definitions import TileDefinition, TileLibrary
from .tile import Tile

log = get_logger(__name__)


class TileFactory:
    """
    Creates tiles with unique IDs from a TileLibrary.

    The factory owns its IDGenerator, so two factories (for example two
    test sessions) produce independent, reproducible ID sequences.
    """

    def __init__(self, library: Optional[TileLibrary] = None, id_generator: Optional[IDGenerator] = None):
        self.library = library if library is not None else TileLibrary()
        self._ids = id_generator if id_generator is not None else IDGenerator()

    def create_from_definition(self, definition: TileDefinition) -> Tile:
        tile = Tile(
            id=self._ids.next_id(),
            type_key=definition.type_key,
            movement_rules=definition.to_movement_rules(),
            ability=definition.to_ability(),
            display_name=definition.display_name,
        )
        log.debug("Created tile %s", tile.label())
        return tile

    def create_tile(self, type_key: str) -> Tile:
        """
        Create a tile of a registered type.

        Raises:
            KeyError: If the type key is not in the library
        """
        return self.create_from_definition(self.library.get(type_key))

    def create_tiles(self, type_keys: List[str]) -> List[Tile]:
        return [self.create_tile(key) for key in type_keys]
