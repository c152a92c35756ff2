# render.py
from typing import Tuple

import numpy as np  # type: ignore
import pygame       # type: ignore

from .config import (
    GRID_SIZE, CELL_SIZE, CANVAS_SIZE, HUD_HEIGHT,
    BG, GREEN, RED, TEXT, DIM, ALERT, TITLE, CREDIT,
)
from .controls import KEY_LABELS, visible_controls
from .game import Phase, Snapshot
from .grid import Cell

WINDOW_SIZE = (CANVAS_SIZE, CANVAS_SIZE + HUD_HEIGHT)


# ---------- Board ----------
def _paint_cell(frame: np.ndarray, cell: Cell, color: Tuple[int, int, int], cell_size: int) -> None:
    # leave a 2px gap so neighbouring segments stay distinguishable
    x, y = cell
    inner = max(cell_size - 2, 1)
    top, left = y * cell_size, x * cell_size
    frame[top:top + inner, left:left + inner] = color

def frame_array(snap: Snapshot, cell_size: int = CELL_SIZE, size: int = GRID_SIZE) -> np.ndarray:
    """
    Compose the board as an RGB array of shape (rows_px, cols_px, 3).
    Snake cells first, food on top.
    """
    px = size * cell_size
    frame = np.empty((px, px, 3), dtype=np.uint8)
    frame[:, :] = BG
    for cell in snap.snake:
        _paint_cell(frame, cell, GREEN, cell_size)
    _paint_cell(frame, snap.food, RED, cell_size)
    return frame


# ---------- Screen ----------
def _blit_centered(screen: pygame.Surface, font: pygame.font.Font, text: str,
                   color: Tuple[int, int, int], center: Tuple[int, int]) -> None:
    surf = font.render(text, True, color)
    screen.blit(surf, surf.get_rect(center=center))

def draw_game(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    screen.fill(BG)

    # score + controls available in this phase
    _blit_centered(screen, font, f"Score: {snap.score}", TEXT, (CANVAS_SIZE // 2, 12))
    hints = "  ".join(f"{KEY_LABELS[c]}: {c.value}" for c in visible_controls(snap.phase))
    _blit_centered(screen, font, hints, DIM, (CANVAS_SIZE // 2, 34))

    board = pygame.Surface((CANVAS_SIZE, CANVAS_SIZE))
    # surfarray indexes (x, y); the frame is (row, col)
    pygame.surfarray.blit_array(board, np.ascontiguousarray(frame_array(snap).transpose(1, 0, 2)))
    screen.blit(board, (0, HUD_HEIGHT))

def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    """Dim the board and print the phase message; running games get none."""
    if snap.phase is Phase.RUNNING:
        return

    overlay = pygame.Surface((CANVAS_SIZE, CANVAS_SIZE), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 204))  # RGBA
    screen.blit(overlay, (0, HUD_HEIGHT))

    cx = CANVAS_SIZE // 2
    cy = HUD_HEIGHT + CANVAS_SIZE // 2
    if snap.phase is Phase.NOT_STARTED:
        _blit_centered(screen, font, "Press START to begin", TEXT, (cx, cy - 12))
        _blit_centered(screen, font, "Use arrow keys to control", DIM, (cx, cy + 12))
    elif snap.phase is Phase.PAUSED:
        _blit_centered(screen, font, "PAUSED", TEXT, (cx, cy))
    else:
        _blit_centered(screen, font, TITLE, TEXT, (cx, cy - 33))
        _blit_centered(screen, font, "GAME OVER", ALERT, (cx, cy - 11))
        _blit_centered(screen, font, f"Final Score: {snap.score}", TEXT, (cx, cy + 11))
        _blit_centered(screen, font, CREDIT, DIM, (cx, cy + 33))
