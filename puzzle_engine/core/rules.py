"""
Movement rule values.

MovementRules describe how far, in which directions and under which
obstacle policy one move action may travel. They are supplied per move
(usually derived from a tile's configured behavior) rather than owned by
the movement code.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .types import (
    CellPos,
    Delta,
    DIAGONAL_DIRECTIONS,
    ORTHOGONAL_DIRECTIONS,
    ObstaclePassRule,
)


@dataclass(frozen=True)
class MovementRules:
    """
    Constraints applied to a single movement action.

    Attributes:
        max_steps: Maximum number of steps along one direction. Zero (or a
            negative value, which is accepted as-is) prevents movement.
        allow_orthogonal: Permit the four cardinal directions
        allow_diagonal: Permit the four diagonal directions
        pass_rule: How the path interacts with occupied cells
    """
    max_steps: int = 1
    allow_orthogonal: bool = True
    allow_diagonal: bool = False
    pass_rule: ObstaclePassRule = ObstaclePassRule.CANNOT_PASS_THROUGH

    def directions(self) -> Tuple[Delta, ...]:
        """Allowed unit directions, orthogonal first, then diagonal."""
        directions: Tuple[Delta, ...] = ()
        if self.allow_orthogonal:
            directions += ORTHOGONAL_DIRECTIONS
        if self.allow_diagonal:
            directions += DIAGONAL_DIRECTIONS
        return directions

    def to_dict(self) -> Dict[str, Any]:
        """Serialize movement rules to a plain dict."""
        return {
            "max_steps": self.max_steps,
            "allow_orthogonal": self.allow_orthogonal,
            "allow_diagonal": self.allow_diagonal,
            "pass_rule": self.pass_rule.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> MovementRules:
        """Deserialize movement rules from a dict."""
        return cls(
            max_steps=data.get("max_steps", 1),
            allow_orthogonal=data.get("allow_orthogonal", True),
            allow_diagonal=data.get("allow_diagonal", False),
            pass_rule=ObstaclePassRule(data.get("pass_rule", ObstaclePassRule.CANNOT_PASS_THROUGH.value)),
        )


@dataclass(frozen=True)
class MoveOption:
    """One legal destination produced by the movement calculator."""
    destination: CellPos

    def to_dict(self) -> Dict[str, Any]:
        return {"destination": list(self.destination)}
