# entities.py
"""
Entity records for the snake arena.

Every thing on the grid (head, body segment, food) is a small tagged record:
a Kind, a Position and a render size. Records live in an EntityArena keyed
by opaque integer ids, so the snake can refer to its segments by id and
storage order never has to match render order.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from itertools import count
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class Position:
    """Integer grid cell. (0, 0) is the bottom-left corner."""
    x: int
    y: int

    def step(self, direction: "Direction") -> "Position":
        dx, dy = direction.delta
        return Position(self.x + dx, self.y + dy)

    def in_bounds(self, width: int, height: int) -> bool:
        return 0 <= self.x < width and 0 <= self.y < height


class Direction(Enum):
    LEFT = "left"
    UP = "up"
    RIGHT = "right"
    DOWN = "down"

    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def delta(self) -> Tuple[int, int]:
        # Up is +y: the arena's origin is bottom-left
        return _DELTAS[self]


_OPPOSITES = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}

_DELTAS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
}


class Kind(Enum):
    HEAD = "head"
    SEGMENT = "segment"
    FOOD = "food"


@dataclass
class Entity:
    id: int
    kind: Kind
    position: Position
    size: float


class EntityArena:
    """Owns every live entity; hands out a fresh id per spawn."""

    def __init__(self):
        self._entities: Dict[int, Entity] = {}
        self._ids = count(1)

    def spawn(self, kind: Kind, position: Position, size: float) -> Entity:
        entity = Entity(id=next(self._ids), kind=kind, position=position, size=size)
        self._entities[entity.id] = entity
        return entity

    def despawn(self, entity_id: int) -> Entity:
        return self._entities.pop(entity_id)

    def get(self, entity_id: int) -> Entity:
        return self._entities[entity_id]

    def of_kind(self, *kinds: Kind) -> List[Entity]:
        return [e for e in self._entities.values() if e.kind in kinds]

    def positions(self, *kinds: Kind) -> List[Position]:
        return [e.position for e in self.of_kind(*kinds)]

    def clear(self) -> None:
        # ids keep counting so a stale id never aliases a new entity
        self._entities.clear()

    def __len__(self) -> int:
        return len(self._entities)

