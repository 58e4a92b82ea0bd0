from pathlib import Path
import sys

import pytest

# Add repository root to sys.path so tests can import local modules without installation.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from puzzle_engine.board import BoardState
from puzzle_engine.core import MovementRules, ObstaclePassRule
from puzzle_engine.tiles import Tile, TileDefinition, TileLibrary
from puzzle_engine.utils import IDGenerator


@pytest.fixture
def ids():
    return IDGenerator()


@pytest.fixture
def make_tile(ids):
    """Build tiles with session-scoped IDs: make_tile("A", rules=...)."""
    def _make(type_key: str, rules: MovementRules | None = None) -> Tile:
        return Tile(id=ids.next_id(), type_key=type_key, movement_rules=rules or MovementRules())
    return _make


@pytest.fixture
def board():
    return BoardState(3, 3)


@pytest.fixture
def library():
    return TileLibrary([
        TileDefinition(type_key="Brain", max_move_distance=1, allow_diagonal=True),
        TileDefinition(type_key="Motor", max_move_distance=3, pass_rule=ObstaclePassRule.PUSH_OBSTACLES),
        TileDefinition(type_key="Coil", max_move_distance=4, pass_rule=ObstaclePassRule.MUST_PASS_THROUGH),
    ])
