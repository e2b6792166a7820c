# src/gridsnake/__init__.py
"""Tick-driven grid snake: game state, input latch, movement and food timers."""

from gridsnake.config import Config, ConfigError, CFG
from gridsnake.entities import Direction, Kind, Position
from gridsnake.game import (
    GameState, TickResult,
    new_game_state, latch_input, advance, spawn_food, reset,
)
from gridsnake.scheduler import Scheduler

__all__ = [
    "Config", "ConfigError", "CFG",
    "Direction", "Kind", "Position",
    "GameState", "TickResult",
    "new_game_state", "latch_input", "advance", "spawn_food", "reset",
    "Scheduler",
]
