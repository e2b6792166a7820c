# main.py
from __future__ import annotations
from typing import List, Optional
import argparse
import logging
import random

import pygame  # type: ignore

from .config import (
    Config, ConfigError,
    ARENA_WIDTH, ARENA_HEIGHT, TICK_PERIOD, FOOD_PERIOD, TIME_SCALE,
    WINDOW_WIDTH, WINDOW_HEIGHT, FPS,
    BG, HEAD_COLOR, SEGMENT_COLOR, FOOD_COLOR,
)
from .entities import Direction, Kind
from .game import GameState, latch_input, new_game_state
from .scheduler import Scheduler
from .view import format_board, render_items, scale_to_screen, to_screen
from .autoplay import policy_greedy, policy_random

logger = logging.getLogger(__name__)

COLORS = {Kind.HEAD: HEAD_COLOR, Kind.SEGMENT: SEGMENT_COLOR, Kind.FOOD: FOOD_COLOR}


# ---------- Window host (pygame) ----------
def pressed_directions(keys) -> set:
    mapping = {
        pygame.K_LEFT: Direction.LEFT,
        pygame.K_DOWN: Direction.DOWN,
        pygame.K_UP: Direction.UP,
        pygame.K_RIGHT: Direction.RIGHT,
    }
    return {d for key, d in mapping.items() if keys[key]}


def draw(screen, state: GameState) -> None:
    w, h = screen.get_size()
    screen.fill(BG)
    for item in render_items(state):
        # to_screen is centred with +y up; pygame's origin is top-left with +y down
        cx = to_screen(item.x, w, state.config.width) + w / 2
        cy = h / 2 - to_screen(item.y, h, state.config.height)
        sw = scale_to_screen(item.size, w, state.config.width)
        sh = scale_to_screen(item.size, h, state.config.height)
        rect = pygame.Rect(0, 0, round(sw), round(sh))
        rect.center = (round(cx), round(cy))
        pygame.draw.rect(screen, COLORS[item.kind], rect)


def run_window(config: Config) -> None:
    pygame.init()
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    pygame.display.set_caption("Snake!")
    clock = pygame.time.Clock()

    state = new_game_state(config)
    scheduler = Scheduler(state)
    running = True
    clock.tick()  # the first frame should not count setup time

    while running:
        # 1) input
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
        if not running:
            break
        latch_input(state, pressed_directions(pygame.key.get_pressed()))

        # 2) update: movement and food clocks run off the frame time
        dt = clock.tick(FPS) / 1000.0
        scheduler.update(dt)

        # 3) render
        draw(screen, state)
        pygame.display.flip()

    pygame.quit()


# ---------- Headless host ----------
def run_headless(config: Config, ticks: int, policy: str = "greedy",
                 frame_dt: float = 1.0 / FPS, show: bool = True) -> dict:
    """
    Play ``ticks`` movement ticks with a scripted input source.
    Returns a summary: ticks, deaths, foods eaten, longest and final length.
    """
    if policy not in ("random", "greedy"):
        raise ValueError(f"Unknown policy: {policy}")

    state = new_game_state(config)
    scheduler = Scheduler(state)
    rng = random.Random(config.seed)

    done = deaths = eaten = 0
    longest = state.length
    while done < ticks:
        keys = policy_random(state, rng) if policy == "random" else policy_greedy(state)
        latch_input(state, keys)
        for result in scheduler.update(frame_dt):
            done += 1
            deaths += result.died
            eaten += result.ate
            longest = max(longest, state.length)
            if show:
                status = f" [{result.reason}]" if result.died else ""
                print(f"tick {done} length={state.length}{status}")
                print(format_board(state))
            if done >= ticks:
                break

    summary = {
        "ticks": done,
        "deaths": deaths,
        "eaten": eaten,
        "longest": longest,
        "length": state.length,
    }
    logger.info("Headless run finished: %s", summary)
    return summary


# ---------- CLI ----------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gridsnake", description="Grid snake game.")
    parser.add_argument("--headless", action="store_true",
                        help="Run without a window, driven by --policy.")
    parser.add_argument("--ticks", type=int, default=100,
                        help="Movement ticks to play in headless mode.")
    parser.add_argument("--policy", choices=["random", "greedy"], default="greedy",
                        help="Input source for headless mode.")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--width", type=int, default=ARENA_WIDTH)
    parser.add_argument("--height", type=int, default=ARENA_HEIGHT)
    parser.add_argument("--tick-period", type=float, default=TICK_PERIOD)
    parser.add_argument("--food-period", type=float, default=FOOD_PERIOD)
    parser.add_argument("--time-scale", type=float, default=TIME_SCALE)
    parser.add_argument("--stack-food", action="store_true",
                        help="Keep spawning food even while one is uneaten.")
    parser.add_argument("--quiet", action="store_true",
                        help="Headless: print only the summary.")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = Config(
            width=args.width,
            height=args.height,
            tick_period=args.tick_period,
            food_period=args.food_period,
            time_scale=args.time_scale,
            seed=args.seed,
            stack_food=args.stack_food,
        )
    except ConfigError as e:
        parser.error(str(e))

    if args.headless:
        summary = run_headless(config, args.ticks, args.policy, show=not args.quiet)
        print(
            f"\nticks={summary['ticks']} deaths={summary['deaths']} "
            f"eaten={summary['eaten']} longest={summary['longest']}"
        )
    else:
        run_window(config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
