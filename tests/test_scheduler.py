"""
Tests for scheduler.py - fixed-step timers driving movement and food.
"""

import pytest

from gridsnake.entities import Direction, Position
from gridsnake.game import foods, head, latch_input
from gridsnake.scheduler import FixedTimer, Scheduler


class TestFixedTimer:
    """Tests for the accumulator timer."""

    def test_short_frames_accumulate(self):
        """Two frames that together pass one period fire once."""
        timer = FixedTimer(0.25)
        assert timer.advance(0.125) == []
        assert timer.advance(0.125) == [pytest.approx(0.125)]
        assert timer.elapsed == pytest.approx(0.0)

    def test_long_frame_fires_every_period(self):
        """One long frame catches up every whole period it covers."""
        timer = FixedTimer(0.25)
        assert timer.advance(1.0) == [0.25, 0.5, 0.75, 1.0]

    def test_remainder_carries_over(self):
        """Leftover time counts towards the next period."""
        timer = FixedTimer(0.5)
        assert len(timer.advance(0.75)) == 1
        assert timer.elapsed == pytest.approx(0.25)
        assert timer.advance(0.25) == [pytest.approx(0.25)]

    def test_non_positive_period_rejected(self):
        """A zero period is refused."""
        with pytest.raises(ValueError):
            FixedTimer(0)

    def test_negative_dt_rejected(self):
        """Time never runs backwards."""
        with pytest.raises(ValueError):
            FixedTimer(1.0).advance(-0.1)


class TestScheduler:
    """Tests for Scheduler.update."""

    def test_ticks_then_food_in_due_order(self, make_state):
        """Four movement ticks run, and the food due with the last one comes after it."""
        state = make_state(tick_period=0.25, food_period=1.0)
        results = Scheduler(state).update(1.0)
        assert len(results) == 4
        assert all(r.moved and not r.died for r in results)
        assert head(state).position == Position(3, 7)
        assert len(foods(state)) == 1

    def test_nothing_due_runs_nothing(self, make_state):
        """A frame shorter than every period changes nothing."""
        state = make_state()
        assert Scheduler(state).update(0.1) == []
        assert head(state).position == Position(3, 3)
        assert foods(state) == []

    def test_time_scale_stretches_both_clocks(self, make_state):
        """Doubling the time scale halves the tick rate."""
        state = make_state(tick_period=0.25, food_period=1.0, time_scale=2.0)
        scheduler = Scheduler(state)
        assert len(scheduler.update(1.0)) == 2
        assert foods(state) == []
        scheduler.update(1.0)
        assert len(foods(state)) == 1

    def test_input_between_ticks_applies_latest(self, make_state):
        """Only the last accepted input before a tick is applied."""
        state = make_state(tick_period=0.25)
        scheduler = Scheduler(state)
        scheduler.update(0.125)
        latch_input(state, {Direction.RIGHT})
        latch_input(state, {Direction.LEFT})
        latch_input(state, {Direction.DOWN})
        results = scheduler.update(0.125)
        assert len(results) == 1
        assert head(state).position == Position(2, 3)
        assert state.current_direction is Direction.LEFT

    def test_tapped_turn_survives_key_release(self, make_state):
        """A key pressed and released between two ticks still turns the snake."""
        state = make_state(tick_period=0.25)
        scheduler = Scheduler(state)
        latch_input(state, {Direction.LEFT})
        assert scheduler.update(0.125) == []
        latch_input(state, set())
        results = scheduler.update(0.125)
        assert len(results) == 1
        assert head(state).position == Position(2, 3)
        assert state.current_direction is Direction.LEFT
