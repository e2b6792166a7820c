# scheduler.py
"""
Fixed-step scheduling for the two game clocks.

The host feeds real elapsed time once per frame; each clock accumulates it
and fires once for every whole period that has passed. Work that fell due
inside the same frame runs in the order it fell due, movement first on ties,
and every callback runs to completion before the next one starts.
"""
from __future__ import annotations

from typing import List
import logging

from .game import GameState, TickResult, advance, spawn_food

logger = logging.getLogger(__name__)

MOVE, FOOD = 0, 1


class FixedTimer:
    """Accumulator that reports how many fixed periods have elapsed."""

    def __init__(self, period: float):
        if period <= 0:
            raise ValueError(f"period must be positive, got {period}")
        self.period = period
        self.elapsed = 0.0

    def advance(self, dt: float) -> List[float]:
        """
        Add ``dt`` seconds. Returns one entry per completed period: the offset
        into this ``dt`` at which that period ended.
        """
        if dt < 0:
            raise ValueError(f"time cannot run backwards (dt={dt})")
        start = self.elapsed
        self.elapsed += dt
        fired: List[float] = []
        while self.elapsed >= self.period:
            self.elapsed -= self.period
            fired.append(self.period * (len(fired) + 1) - start)
        return fired


class Scheduler:
    def __init__(self, state: GameState):
        self.state = state
        self.move_timer = FixedTimer(state.config.move_every)
        self.food_timer = FixedTimer(state.config.spawn_every)

    def update(self, dt: float) -> List[TickResult]:
        """Advance both clocks by ``dt`` and run whatever fell due."""
        due = [(offset, MOVE) for offset in self.move_timer.advance(dt)]
        due += [(offset, FOOD) for offset in self.food_timer.advance(dt)]
        due.sort()

        if len(due) > 2:
            logger.debug("Catching up %d scheduled events in one frame", len(due))

        results: List[TickResult] = []
        for _, event in due:
            if event == MOVE:
                results.append(advance(self.state))
            else:
                spawn_food(self.state)
        return results
