# autoplay.py
"""
Scripted input sources for running the game without a keyboard.

Each policy returns the set of keys it is "holding" this frame, which the
game feeds through the same input latch as real key presses.
"""
from __future__ import annotations

from typing import Set
import random

from .entities import Direction, Position
from .game import GameState, foods, head, snake_positions


def _manhattan(a: Position, b: Position) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def _would_hit(state: GameState, direction: Direction) -> bool:
    """True if moving the head one cell in ``direction`` ends the game."""
    snake_head = head(state)
    if snake_head is None:
        return False
    nxt = snake_head.position.step(direction)
    if not nxt.in_bounds(state.config.width, state.config.height):
        return True
    return nxt in snake_positions(state)


def policy_random(state: GameState, rng: random.Random) -> Set[Direction]:
    """Hold one uniformly random arrow key."""
    return {rng.choice(list(Direction))}


def policy_greedy(state: GameState) -> Set[Direction]:
    """
    Head for the nearest food:
    - prefer moves that shrink the Manhattan distance
    - skip any move that would be fatal if a safe one exists
    - never ask for the reverse of the current heading
    With no food on the board, keep going straight while it is safe.
    """
    snake_head = head(state)
    if snake_head is None:
        return set()

    allowed = [d for d in Direction if d is not state.current_direction.opposite()]
    pos = snake_head.position
    targets = [f.position for f in foods(state)]

    if targets:
        target = min(targets, key=lambda t: _manhattan(pos, t))
        ranked = sorted(allowed, key=lambda d: _manhattan(pos.step(d), target))
    else:
        ranked = sorted(allowed, key=lambda d: d is not state.current_direction)

    for direction in ranked:
        if not _would_hit(state, direction):
            return {direction}
    # boxed in
    return {ranked[0]}
