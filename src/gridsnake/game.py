# game.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional
import logging
import random

from .config import (
    CFG, Config,
    START_HEAD, START_BODY,
    HEAD_SIZE, SEGMENT_SIZE, FOOD_SIZE,
)
from .entities import Direction, Entity, EntityArena, Kind, Position

logger = logging.getLogger(__name__)

START_DIRECTION = Direction.UP

# First pressed key in this order wins when several are held
KEY_PRIORITY = (Direction.LEFT, Direction.DOWN, Direction.UP, Direction.RIGHT)


# ---------- State ----------
@dataclass
class GameState:
    config: Config
    rng: random.Random
    arena: EntityArena = field(default_factory=EntityArena)
    segments: List[int] = field(default_factory=list)   # entity ids, head at index 0
    current_direction: Direction = START_DIRECTION      # applied on the last tick
    buffered_direction: Direction = START_DIRECTION     # applied on the next tick
    last_tail: Optional[Position] = None                # tail cell before the last move

    @property
    def length(self) -> int:
        return len(self.segments)


@dataclass(frozen=True)
class TickResult:
    """What one movement tick did. ``died`` means the snake was reset."""
    moved: bool
    ate: bool = False
    grew: bool = False
    died: bool = False
    reason: Optional[str] = None   # "wall" or "self" when died


def new_game_state(config: Config = CFG) -> GameState:
    state = GameState(config=config, rng=random.Random(config.seed))
    spawn_snake(state)
    return state


# ---------- Helpers ----------
def head(state: GameState) -> Optional[Entity]:
    if not state.segments:
        return None
    return state.arena.get(state.segments[0])


def snake_positions(state: GameState) -> List[Position]:
    return [state.arena.get(i).position for i in state.segments]


def foods(state: GameState) -> List[Entity]:
    return state.arena.of_kind(Kind.FOOD)


def spawn_segment(state: GameState, position: Position) -> Entity:
    segment = state.arena.spawn(Kind.SEGMENT, position, SEGMENT_SIZE)
    state.segments.append(segment.id)
    return segment


def spawn_snake(state: GameState) -> None:
    """Place the starting two-cell snake heading up."""
    snake_head = state.arena.spawn(Kind.HEAD, Position(*START_HEAD), HEAD_SIZE)
    state.segments = [snake_head.id]
    spawn_segment(state, Position(*START_BODY))
    state.current_direction = START_DIRECTION
    state.buffered_direction = START_DIRECTION
    state.last_tail = None


def reset(state: GameState) -> None:
    """Wipe the snake and all food, then respawn the starting snake."""
    state.arena.clear()
    state.segments = []
    spawn_snake(state)


# ---------- Input ----------
def direction_from_keys(pressed: Iterable[Direction], fallback: Direction) -> Direction:
    """Pick one candidate direction from the held keys; no keys gives ``fallback``."""
    held = set(pressed)
    for direction in KEY_PRIORITY:
        if direction in held:
            return direction
    return fallback


def latch_input(state: GameState, pressed: Iterable[Direction]) -> Optional[Direction]:
    """
    Sample one frame of input into the buffered direction.
    A request for the exact reverse of the current heading is ignored, and a
    frame with no keys held keeps whatever turn is already buffered.
    Returns the buffered direction, or None when there is no snake.
    """
    if not state.segments:
        return None
    cand = direction_from_keys(pressed, state.buffered_direction)
    if cand is not state.current_direction.opposite():
        state.buffered_direction = cand
    return state.buffered_direction


# ---------- Update ----------
def advance(state: GameState) -> TickResult:
    """
    Run one movement tick, in order:
    commit heading, move head, collision check, shift body, record tail,
    then either reset on game over or eat and grow.
    """
    if not state.segments:
        return TickResult(moved=False)

    # Body follows the pre-move cells, not the live ones
    before = snake_positions(state)

    state.current_direction = state.buffered_direction
    snake_head = state.arena.get(state.segments[0])
    new_head = before[0].step(state.current_direction)
    snake_head.position = new_head

    reason = None
    if not new_head.in_bounds(state.config.width, state.config.height):
        reason = "wall"
    elif new_head in before:
        reason = "self"

    for segment_id, pos in zip(state.segments[1:], before):
        state.arena.get(segment_id).position = pos
    state.last_tail = before[-1]

    if reason is not None:
        logger.info("Game over (%s) at %s, length %d", reason, new_head, len(before))
        reset(state)
        return TickResult(moved=True, died=True, reason=reason)

    ate = False
    for food in foods(state):
        if food.position == new_head:
            state.arena.despawn(food.id)
            ate = True

    grew = False
    if ate:
        spawn_segment(state, state.last_tail)
        grew = True
        logger.info("Ate food at %s, length now %d", new_head, state.length)

    return TickResult(moved=True, ate=ate, grew=grew)


def spawn_food(state: GameState) -> Optional[Entity]:
    """
    Drop one food on a random cell not covered by the snake.
    Unless ``stack_food`` is set, does nothing while a food is still on the board.
    Never returns if the snake fills the whole arena.
    """
    if not state.config.stack_food and foods(state):
        return None

    occupied = set(state.arena.positions(Kind.HEAD, Kind.SEGMENT))
    while True:
        cell = Position(
            state.rng.randrange(state.config.width),
            state.rng.randrange(state.config.height),
        )
        if cell not in occupied:
            break

    food = state.arena.spawn(Kind.FOOD, cell, FOOD_SIZE)
    logger.debug("Spawned food %d at %s", food.id, cell)
    return food
