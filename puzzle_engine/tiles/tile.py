"""
Tile entity.

A tile is an immutable value: a process-unique ID, a type key used for rule
lookup and objective matching, the movement rules it moves with, and an
optional ability descriptor. A tile never stores its own position; the
board is the only source of truth for where a tile is.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..core.rules import MovementRules


@dataclass(frozen=True)
class AbilityDescriptor:
    """
    Describes a tile's special ability.

    Abilities are only described here; resolving them is not part of the
    engine yet.
    """
    key: str
    available: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"key": self.key, "available": self.available}


@dataclass(frozen=True)
class Tile:
    """
    A tile on the puzzle board.

    Attributes:
        id: Unique ID, assigned by an IDGenerator and never reused
        type_key: Stable type key, e.g. "Brain" or "Motor"
        movement_rules: Rules used when previewing this tile's moves
        ability: Optional ability descriptor
        display_name: Human-readable name, falls back to type_key
    """
    id: int
    type_key: str
    movement_rules: MovementRules = field(default_factory=MovementRules)
    ability: Optional[AbilityDescriptor] = None
    display_name: str = ""

    @property
    def is_ability_available(self) -> bool:
        """Whether the tile's ability can currently be used."""
        return self.ability is not None and self.ability.available

    @property
    def icon(self) -> str:
        """Single-character icon used by text renderings."""
        return self.type_key[:1].upper() if self.type_key else "?"

    def label(self) -> str:
        """Short label for logs, e.g. ``Brain#3``."""
        return f"{self.display_name or self.type_key}#{self.id}"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the tile to a plain dict."""
        return {
            "id": self.id,
            "type_key": self.type_key,
            "display_name": self.display_name or self.type_key,
            "movement_rules": self.movement_rules.to_dict(),
            "ability": self.ability.to_dict() if self.ability else None,
        }
