# config.py
from dataclasses import dataclass


class ConfigError(ValueError):
    """Raised when the game is configured with values it cannot start from."""


# ----- Arena (grid cells) -----
ARENA_WIDTH, ARENA_HEIGHT = 10, 10

# ----- Timers (seconds, before TIME_SCALE) -----
TICK_PERIOD = 0.15
FOOD_PERIOD = 1.0
TIME_SCALE = 1.0

# ----- Starting snake -----
START_HEAD = (3, 3)
START_BODY = (3, 2)

# ----- Sizes (fraction of one arena cell) -----
HEAD_SIZE = 0.8
SEGMENT_SIZE = 0.65
FOOD_SIZE = 0.8

# ----- Window & colors (pygame host only) -----
WINDOW_WIDTH, WINDOW_HEIGHT = 500, 500
FPS = 60
BG = (0, 0, 0)
HEAD_COLOR = (51, 153, 51)
SEGMENT_COLOR = (26, 77, 26)
FOOD_COLOR = (255, 0, 0)


# ----- Tunables -----
@dataclass
class Config:
    width: int = ARENA_WIDTH
    height: int = ARENA_HEIGHT
    tick_period: float = TICK_PERIOD
    food_period: float = FOOD_PERIOD
    time_scale: float = TIME_SCALE
    seed: int | None = None
    stack_food: bool = False   # spawn even while a food is still uneaten

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"arena must be at least 1x1, got {self.width}x{self.height}")
        if self.tick_period <= 0 or self.food_period <= 0:
            raise ConfigError("tick and food periods must be positive")
        if self.time_scale <= 0:
            raise ConfigError(f"time scale must be positive, got {self.time_scale}")
        for x, y in (START_HEAD, START_BODY):
            if not (0 <= x < self.width and 0 <= y < self.height):
                raise ConfigError(
                    f"start cell ({x}, {y}) lies outside a {self.width}x{self.height} arena"
                )

    @property
    def move_every(self) -> float:
        return self.tick_period * self.time_scale

    @property
    def spawn_every(self) -> float:
        return self.food_period * self.time_scale


CFG = Config()
