from dataclasses import dataclass
from typing import Optional

# ----- Grid & canvas -----
GRID_SIZE = 15
CELL_SIZE = 15
CANVAS_SIZE = GRID_SIZE * CELL_SIZE
HUD_HEIGHT = 48

# ----- Titles -----
TITLE = "Samuel's Favorite Game"
CREDIT = "Created by Samuel - 2025"

# ----- Colors -----
BG    = (0, 0, 0)
GREEN = (0, 255, 0)
RED   = (255, 0, 0)
TEXT  = (74, 222, 128)
DIM   = (156, 163, 175)
ALERT = (248, 113, 113)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# ----- Game rules -----
INITIAL_SNAKE = ((7, 7),)
INITIAL_DIRECTION = RIGHT
INITIAL_FOOD = (10, 10)
FOOD_REWARD = 10
FOOD_RETRY_CAP = 10_000

# ----- Tunables (overridable from the command line) -----
@dataclass
class Config:
    seed: Optional[int] = None
    tick_ms: int = 150
    fps: int = 60
    log_level: str = "WARNING"

CFG = Config()
