# view.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List

import numpy as np  # type: ignore

from .entities import Kind
from .game import GameState

# Cell codes for board()
EMPTY, HEAD, SEGMENT, FOOD = 0, 1, 2, 3

_CODES = {Kind.HEAD: HEAD, Kind.SEGMENT: SEGMENT, Kind.FOOD: FOOD}
_GLYPHS = {EMPTY: ".", HEAD: "H", SEGMENT: "o", FOOD: "*"}


@dataclass(frozen=True)
class RenderItem:
    kind: Kind
    x: int
    y: int
    size: float   # fraction of one cell


def render_items(state: GameState) -> List[RenderItem]:
    """Everything a renderer needs for one frame: food first, then the snake tail to head."""
    items = [
        RenderItem(f.kind, f.position.x, f.position.y, f.size)
        for f in state.arena.of_kind(Kind.FOOD)
    ]
    for entity_id in reversed(state.segments):
        e = state.arena.get(entity_id)
        items.append(RenderItem(e.kind, e.position.x, e.position.y, e.size))
    return items


def to_screen(pos: float, window_extent: float, arena_extent: float) -> float:
    """
    Map a grid coordinate to a window coordinate centred on the window middle,
    landing on the middle of the cell.
    """
    tile = window_extent / arena_extent
    return pos / arena_extent * window_extent - window_extent / 2 + tile / 2


def scale_to_screen(size: float, window_extent: float, arena_extent: float) -> float:
    return size / arena_extent * window_extent


def board(state: GameState) -> np.ndarray:
    """
    Occupancy grid of shape (height, width); row index is y.
    The head is written last so it stays visible on a collision frame.
    """
    grid = np.full((state.config.height, state.config.width), EMPTY, dtype=np.int8)
    drawn = state.arena.of_kind(Kind.FOOD, Kind.SEGMENT) + state.arena.of_kind(Kind.HEAD)
    for e in drawn:
        if e.position.in_bounds(state.config.width, state.config.height):
            grid[e.position.y, e.position.x] = _CODES[e.kind]
    return grid


def format_board(state: GameState) -> str:
    """Text board with (0, 0) at the bottom left, since Up is +y."""
    grid = board(state)
    rows = []
    for y in range(grid.shape[0] - 1, -1, -1):
        rows.append(f"{y:2d} " + " ".join(_GLYPHS[int(c)] for c in grid[y]))
    rows.append("   " + " ".join(str(x % 10) for x in range(grid.shape[1])))
    return "\n".join(rows)
