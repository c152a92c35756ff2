# game.py
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Collection, Iterable, Optional, Tuple
import logging
import random

from .config import (
    GRID_SIZE, DIRECTIONS,
    INITIAL_SNAKE, INITIAL_DIRECTION, INITIAL_FOOD,
    FOOD_REWARD, FOOD_RETRY_CAP,
)
from .grid import Cell, Direction, all_cells, in_bounds, is_opposite, move

logger = logging.getLogger(__name__)


# ---------- Errors ----------
class SnakeError(Exception):
    """Base class for errors raised by the game engine."""


class NoSpaceAvailable(SnakeError):
    """Raised when food is requested but every cell of the grid is occupied."""


# ---------- Helpers ----------
def check_collision(head: Cell, body: Iterable[Cell], size: int = GRID_SIZE) -> bool:
    """
    True if 'head' is off the grid or lands on any cell of 'body'.
    'body' is the snake before the move, tail included.
    """
    if not in_bounds(head, size):
        return True
    return head in body

def spawn_food(
    occupied: Collection[Cell],
    rng: Optional[random.Random] = None,
    size: int = GRID_SIZE,
    retry_cap: int = FOOD_RETRY_CAP,
) -> Cell:
    """
    Return a random cell not in 'occupied'.

    Rejection sampling is tried 'retry_cap' times; after that the free cells
    are enumerated and one is picked directly. Raises NoSpaceAvailable when
    the grid is full.
    """
    rng = rng or random
    occupied = set(occupied)
    if len(occupied) >= size * size:
        raise NoSpaceAvailable(f"all {size * size} cells are occupied")

    for _ in range(retry_cap):
        cell = (rng.randrange(size), rng.randrange(size))
        if cell not in occupied:
            return cell

    free = [cell for cell in all_cells(size) if cell not in occupied]
    if not free:
        raise NoSpaceAvailable(f"all {size * size} cells are occupied")
    return rng.choice(free)


# ---------- State ----------
class Phase(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameState:
    snake: Tuple[Cell, ...]        # head at index 0
    direction: Direction           # heading used by the last tick
    pending: Direction             # heading the next tick will use
    food: Cell
    score: int
    phase: Phase

    @property
    def head(self) -> Cell:
        return self.snake[0]


@dataclass(frozen=True)
class Snapshot:
    """Read-only view handed to the renderer."""
    snake: Tuple[Cell, ...]
    food: Cell
    score: int
    phase: Phase


def new_game_state() -> GameState:
    return GameState(
        snake=INITIAL_SNAKE,
        direction=INITIAL_DIRECTION,
        pending=INITIAL_DIRECTION,
        food=INITIAL_FOOD,
        score=0,
        phase=Phase.NOT_STARTED,
    )

def snapshot(state: GameState) -> Snapshot:
    return Snapshot(snake=state.snake, food=state.food, score=state.score, phase=state.phase)


# ---------- Transitions ----------
def start(state: GameState) -> GameState:
    if state.phase is not Phase.NOT_STARTED:
        logger.debug("start ignored in phase %s", state.phase.name)
        return state
    logger.info("game started")
    return replace(state, phase=Phase.RUNNING)

def toggle_pause(state: GameState) -> GameState:
    if state.phase is Phase.RUNNING:
        return replace(state, phase=Phase.PAUSED)
    if state.phase is Phase.PAUSED:
        return replace(state, phase=Phase.RUNNING)
    logger.debug("toggle_pause ignored in phase %s", state.phase.name)
    return state

def restart(state: GameState) -> GameState:
    logger.info("game restarted from phase %s (score %d)", state.phase.name, state.score)
    return new_game_state()

def set_direction(state: GameState, direction: Direction) -> GameState:
    """Queue a heading for the next tick; 180° turns are ignored."""
    if state.phase is not Phase.RUNNING:
        return state
    if direction not in DIRECTIONS:
        logger.debug("unknown direction %r ignored", direction)
        return state
    if is_opposite(direction, state.direction):
        logger.debug("reversal %r -> %r ignored", state.direction, direction)
        return state
    return replace(state, pending=direction)


# ---------- Update ----------
def step_game(state: GameState, rng: Optional[random.Random] = None) -> GameState:
    """
    Advance the game by one tick.

    Does nothing unless the game is running. Hitting a wall or the body
    (as it was before this move) ends the game and leaves snake, food and
    score as they were.
    """
    if state.phase is not Phase.RUNNING:
        return state

    # Commit direction once per tick
    direction = state.pending
    new_head = move(state.head, direction)

    if check_collision(new_head, state.snake):
        reason = "wall" if not in_bounds(new_head) else "self"
        logger.info("game over (%s) at %r, score %d", reason, new_head, state.score)
        return replace(state, direction=direction, phase=Phase.GAME_OVER)

    snake = (new_head,) + state.snake

    if new_head != state.food:
        return replace(state, snake=snake[:-1], direction=direction)

    # Eat & grow
    score = state.score + FOOD_REWARD
    try:
        food = spawn_food(snake, rng)
    except NoSpaceAvailable:
        logger.info("board full, score %d", score)
        return replace(
            state, snake=snake, direction=direction, score=score, phase=Phase.GAME_OVER,
        )
    logger.debug("food eaten at %r, next food at %r", new_head, food)
    return replace(state, snake=snake, direction=direction, food=food, score=score)
