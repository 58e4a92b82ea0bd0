"""
Designer-facing tile definitions.

TileDefinition is the configuration boundary of the engine: it carries the
values a designer edits (movement distance, direction flags, obstacle
policy) and converts them to engine values. TileLibrary is a collection of
definitions keyed by type key, loadable from JSON.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.rules import MovementRules
from ..core.types import ObstaclePassRule
from .tile import AbilityDescriptor


class TileDefinition(BaseModel):
    """
    Configuration of one tile type.

    ``max_move_distance`` is deliberately not range-checked: a negative
    value is accepted and simply produces no destinations.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    type_key: str = Field(min_length=1)
    display_name: str = ""
    max_move_distance: int = 1
    allow_orthogonal: bool = True
    allow_diagonal: bool = False
    pass_rule: ObstaclePassRule = ObstaclePassRule.CANNOT_PASS_THROUGH
    ability: Optional[str] = None
    ability_available: bool = False

    def to_movement_rules(self) -> MovementRules:
        """Build the engine movement rules for this definition."""
        return MovementRules(
            max_steps=self.max_move_distance,
            allow_orthogonal=self.allow_orthogonal,
            allow_diagonal=self.allow_diagonal,
            pass_rule=self.pass_rule,
        )

    def to_ability(self) -> Optional[AbilityDescriptor]:
        if self.ability is None:
            return None
        return AbilityDescriptor(key=self.ability, available=self.ability_available)


class TileLibrary:
    """
    Tile definitions keyed by type key.

    Usage:
        library = TileLibrary.load_json("storage/tiles/default_library.json")
        brain = library.get("Brain")
    """

    def __init__(self, definitions: Iterable[TileDefinition] = ()):
        self._definitions: Dict[str, TileDefinition] = {}
        for definition in definitions:
            self.add(definition)

    def add(self, definition: TileDefinition) -> None:
        """
        Register a definition.

        Raises:
            ValueError: If the type key is already registered
        """
        if definition.type_key in self._definitions:
            raise ValueError(f"Duplicate tile type key: {definition.type_key}")
        self._definitions[definition.type_key] = definition

    def get(self, type_key: str) -> TileDefinition:
        """
        Look up a definition by type key.

        Raises:
            KeyError: If the type key is unknown
        """
        try:
            return self._definitions[type_key]
        except KeyError:
            raise KeyError(f"Unknown tile type key: {type_key}") from None

    def all(self) -> List[TileDefinition]:
        """All definitions in registration order."""
        return list(self._definitions.values())

    def __contains__(self, type_key: object) -> bool:
        return type_key in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    # ========================================================================
    # SERIALIZATION
    # ========================================================================

    def to_dict(self) -> Dict[str, Any]:
        return {"tiles": [d.model_dump(mode="json") for d in self._definitions.values()]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> TileLibrary:
        """
        Build a library from ``{"tiles": [...]}``.

        Raises:
            ValueError: If the document has no 'tiles' list
            pydantic.ValidationError: If a definition is malformed
        """
        tiles = data.get("tiles")
        if not isinstance(tiles, list):
            raise ValueError("Tile library document must contain a 'tiles' list")
        return cls(TileDefinition.model_validate(item) for item in tiles)

    def save_json(self, path: str | Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")

    @classmethod
    def load_json(cls, path: str | Path) -> TileLibrary:
        return cls.from_dict(json.loads(Path(path).read_text(encoding="utf-8")))
