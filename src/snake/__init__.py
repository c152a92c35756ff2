"""Single-screen Snake: pure game engine plus a pygame driver and renderer."""

from .game import (
    GameState, Phase, Snapshot, SnakeError, NoSpaceAvailable,
    check_collision, spawn_food, new_game_state, snapshot,
    start, toggle_pause, restart, set_direction, step_game,
)

__all__ = [
    "GameState", "Phase", "Snapshot", "SnakeError", "NoSpaceAvailable",
    "check_collision", "spawn_food", "new_game_state", "snapshot",
    "start", "toggle_pause", "restart", "set_direction", "step_game",
]
