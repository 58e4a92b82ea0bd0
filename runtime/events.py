"""
Presentation-side event collection.

MoveRecorder stands in for the view layer: it receives every TileMoved
notification from the MoveExecutor and keeps them in order, so a UI can
replay them as animations and tests can assert on the exact sequence.
"""

from __future__ import annotations

from typing import Any, Dict, List

from puzzle_engine.core.events import TileMoved

from infra.logger import get_logger

log = get_logger(__name__)


class MoveRecorder:
    """Ordered history of single-cell relocations."""

    def __init__(self):
        self._events: List[TileMoved] = []
        self._cursor = 0

    def on_tile_moved(self, event: TileMoved) -> None:
        self._events.append(event)
        log.debug("View sync: %s %s -> %s", event.type_key, event.from_pos, event.to_pos)

    @property
    def events(self) -> List[TileMoved]:
        """All relocations so far (copy)."""
        return list(self._events)

    def drain(self) -> List[TileMoved]:
        """Relocations recorded since the previous drain()."""
        fresh = self._events[self._cursor:]
        self._cursor = len(self._events)
        return fresh

    def clear(self) -> None:
        self._events.clear()
        self._cursor = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"events": [event.to_dict() for event in self._events]}

    def __len__(self) -> int:
        return len(self._events)
