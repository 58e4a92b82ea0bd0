"""
Notifications emitted by the engine toward the presentation layer.

The engine never waits for or depends on a response: presenters receive
one TileMoved per single-cell relocation, in application order.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Protocol

from .types import CellPos


@dataclass(frozen=True)
class TileMoved:
    """
    One tile relocated from one cell to another.

    Attributes:
        tile_id: ID of the relocated tile
        type_key: Type key of the relocated tile
        from_pos: Cell the tile left
        to_pos: Cell the tile entered
        pushed: True when the tile was shoved by another tile's push
    """
    tile_id: int
    type_key: str
    from_pos: CellPos
    to_pos: CellPos
    pushed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the event to a plain dict."""
        return {
            "tile_id": self.tile_id,
            "type_key": self.type_key,
            "from_pos": list(self.from_pos),
            "to_pos": list(self.to_pos),
            "pushed": self.pushed,
        }


class BoardPresenter(Protocol):
    """Presentation collaborator notified of every cell relocation."""

    def on_tile_moved(self, event: TileMoved) -> None:
        ...
