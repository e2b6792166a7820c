import pytest

from gridsnake.config import Config, HEAD_SIZE
from gridsnake.entities import Kind, Position
from gridsnake.game import new_game_state, spawn_segment


@pytest.fixture
def make_state():
    """Build a game with the snake laid out on the given cells, head first."""

    def _make(cells=None, direction=None, **config_kwargs):
        config_kwargs.setdefault("seed", 0)
        state = new_game_state(Config(**config_kwargs))
        if cells is not None:
            state.arena.clear()
            head = state.arena.spawn(Kind.HEAD, Position(*cells[0]), HEAD_SIZE)
            state.segments = [head.id]
            for cell in cells[1:]:
                spawn_segment(state, Position(*cell))
        if direction is not None:
            state.current_direction = direction
            state.buffered_direction = direction
        return state

    return _make
