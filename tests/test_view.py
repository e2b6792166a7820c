"""
Tests for view.py - render read model and board snapshots.
"""

import numpy as np
import pytest

from gridsnake.config import FOOD_SIZE, HEAD_SIZE, SEGMENT_SIZE
from gridsnake.entities import Kind, Position
from gridsnake.view import (
    EMPTY, FOOD, HEAD, SEGMENT,
    board, format_board, render_items, scale_to_screen, to_screen,
)


class TestScreenTransform:
    """Tests for the grid-to-window transform."""

    def test_corner_cells_land_on_cell_centres(self):
        """Cell 0 and cell 9 of a 10-wide arena in a 500px window."""
        assert to_screen(0, 500, 10) == pytest.approx(-225.0)
        assert to_screen(9, 500, 10) == pytest.approx(225.0)

    def test_sizes_scale_with_cell(self):
        """Head, segment and food sizes are fractions of a 50px cell."""
        assert scale_to_screen(HEAD_SIZE, 500, 10) == pytest.approx(40.0)
        assert scale_to_screen(SEGMENT_SIZE, 500, 10) == pytest.approx(32.5)
        assert scale_to_screen(FOOD_SIZE, 500, 10) == pytest.approx(40.0)


class TestRenderItems:
    """Tests for render_items."""

    def test_start_snake(self, make_state):
        """The start snake gives one segment then the head, with their sizes."""
        state = make_state()
        items = render_items(state)
        assert [(i.kind, i.x, i.y, i.size) for i in items] == [
            (Kind.SEGMENT, 3, 2, SEGMENT_SIZE),
            (Kind.HEAD, 3, 3, HEAD_SIZE),
        ]

    def test_food_is_listed_first(self, make_state):
        """Food is drawn underneath the snake."""
        state = make_state()
        state.arena.spawn(Kind.FOOD, Position(6, 6), FOOD_SIZE)
        assert render_items(state)[0].kind is Kind.FOOD


class TestBoard:
    """Tests for board and format_board."""

    def test_board_codes(self, make_state):
        """Row index is y, column index is x."""
        state = make_state()
        state.arena.spawn(Kind.FOOD, Position(7, 1), FOOD_SIZE)
        grid = board(state)
        assert grid.shape == (10, 10)
        assert grid[3, 3] == HEAD
        assert grid[2, 3] == SEGMENT
        assert grid[1, 7] == FOOD
        assert np.count_nonzero(grid == EMPTY) == 97

    def test_format_board_has_origin_bottom_left(self, make_state):
        """The top text row is y=9 and the head shows on the y=3 row."""
        state = make_state()
        lines = format_board(state).splitlines()
        assert len(lines) == 11
        assert lines[0].startswith(" 9")
        assert lines[6].startswith(" 3")
        assert "H" in lines[6]
        assert "o" in lines[7]
