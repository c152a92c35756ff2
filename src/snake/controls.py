# controls.py
from enum import Enum
from typing import Dict, Optional, Tuple
import logging

import pygame # type: ignore

from .config import UP, DOWN, LEFT, RIGHT
from .game import GameState, Phase, restart, set_direction, start, toggle_pause
from .grid import Direction

logger = logging.getLogger(__name__)

# ---------- Direction keys ----------
KEY_DIRECTIONS: Dict[int, Direction] = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}

def direction_for_key(key: int) -> Optional[Direction]:
    return KEY_DIRECTIONS.get(key)

def handle_key(state: GameState, key: int) -> GameState:
    """Forward a direction key to the engine; other keys are ignored."""
    direction = direction_for_key(key)
    if direction is None:
        return state
    return set_direction(state, direction)


# ---------- Start / Pause / Restart ----------
class Control(Enum):
    START = "START"
    PAUSE = "PAUSE"
    RESUME = "RESUME"
    RESTART = "RESTART"


VISIBLE_CONTROLS: Dict[Phase, Tuple[Control, ...]] = {
    Phase.NOT_STARTED: (Control.START,),
    Phase.RUNNING: (Control.PAUSE,),
    Phase.PAUSED: (Control.RESUME,),
    Phase.GAME_OVER: (Control.RESTART,),
}

CONTROL_KEYS: Dict[int, Tuple[Control, ...]] = {
    pygame.K_SPACE: (Control.START,),
    pygame.K_RETURN: (Control.START,),
    pygame.K_p: (Control.PAUSE, Control.RESUME),
    pygame.K_r: (Control.RESTART,),
}

KEY_LABELS: Dict[Control, str] = {
    Control.START: "SPACE",
    Control.PAUSE: "P",
    Control.RESUME: "P",
    Control.RESTART: "R",
}

def visible_controls(phase: Phase) -> Tuple[Control, ...]:
    return VISIBLE_CONTROLS[phase]

def control_for_key(key: int, phase: Phase) -> Optional[Control]:
    """The visible control bound to 'key', if any."""
    for control in CONTROL_KEYS.get(key, ()):
        if control in visible_controls(phase):
            return control
    return None

def apply_control(state: GameState, control: Control) -> GameState:
    """Fire a control; hidden controls do nothing."""
    if control not in visible_controls(state.phase):
        logger.debug("%s is not available in phase %s", control.name, state.phase.name)
        return state
    if control is Control.START:
        return start(state)
    if control in (Control.PAUSE, Control.RESUME):
        return toggle_pause(state)
    return restart(state)
