# main.py
import argparse
import logging
import random
from typing import List, Optional

import pygame # type: ignore

from .config import CFG, TITLE, Config
from .controls import KEY_DIRECTIONS, apply_control, control_for_key, handle_key
from .game import GameState, Phase, new_game_state, snapshot, step_game
from .render import WINDOW_SIZE, draw_game, draw_overlay

logger = logging.getLogger(__name__)

# Timer ticks and key presses share the pygame event queue, so each one
# runs to completion before the next is handled.
TICK_EVENT = pygame.USEREVENT + 1


def sync_timer(was_running: bool, is_running: bool, tick_ms: int) -> None:
    """Install the tick timer when play starts, remove it when play stops."""
    if is_running and not was_running:
        pygame.time.set_timer(TICK_EVENT, tick_ms)
        logger.debug("tick timer started (%d ms)", tick_ms)
    elif was_running and not is_running:
        pygame.time.set_timer(TICK_EVENT, 0)
        logger.debug("tick timer stopped")

def dispatch(state: GameState, event: pygame.event.Event, rng: random.Random) -> GameState:
    """Route one event to the engine and return the resulting state."""
    if event.type == TICK_EVENT:
        return step_game(state, rng)
    if event.type == pygame.KEYDOWN:
        if event.key in KEY_DIRECTIONS:
            return handle_key(state, event.key)
        control = control_for_key(event.key, state.phase)
        if control is not None:
            return apply_control(state, control)
    return state

def _positive_int(raw: str) -> int:
    value = int(raw)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {raw}")
    return value

def parse_args(argv: Optional[List[str]] = None) -> Config:
    parser = argparse.ArgumentParser(description="Single-screen Snake.")
    parser.add_argument("--seed", type=int, default=CFG.seed,
                        help="seed for food placement (random if omitted)")
    parser.add_argument("--tick-ms", type=_positive_int, default=CFG.tick_ms,
                        help="milliseconds between snake moves")
    parser.add_argument("--fps", type=_positive_int, default=CFG.fps,
                        help="frame rate cap for redraws")
    parser.add_argument("--log-level", type=str.upper, default=CFG.log_level,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)
    return Config(seed=args.seed, tick_ms=args.tick_ms, fps=args.fps, log_level=args.log_level)

def run(cfg: Config) -> int:
    pygame.init()
    font = pygame.font.SysFont("monospace", 14, bold=True)
    screen = pygame.display.set_mode(WINDOW_SIZE)
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()

    rng = random.Random(cfg.seed)
    state = new_game_state()
    running = True

    try:
        while running:
            # 1) events (ticks + input)
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False
                    break
                was_running = state.phase is Phase.RUNNING
                state = dispatch(state, event, rng)
                sync_timer(was_running, state.phase is Phase.RUNNING, cfg.tick_ms)

            # 2) render
            snap = snapshot(state)
            draw_game(screen, font, snap)
            draw_overlay(screen, font, snap)
            pygame.display.flip()
            clock.tick(cfg.fps)
    finally:
        pygame.time.set_timer(TICK_EVENT, 0)
        pygame.quit()

    logger.info("exiting with score %d", state.score)
    return state.score

def main(argv: Optional[List[str]] = None) -> None:
    cfg = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, cfg.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run(cfg)

if __name__ == "__main__":
    main()
