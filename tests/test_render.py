"""Tests for frame composition and drawing onto an offscreen surface."""

import numpy as np
import pygame
import pytest

from snake.config import BG, GREEN, RED, CELL_SIZE, CANVAS_SIZE, HUD_HEIGHT, TITLE, CREDIT
from snake.game import Phase, Snapshot
from snake.render import WINDOW_SIZE, draw_game, draw_overlay, frame_array


@pytest.fixture
def snap():
    return Snapshot(snake=((1, 0), (0, 0)), food=(3, 2), score=20, phase=Phase.RUNNING)


class TestFrameArray:
    def test_shape_and_dtype(self, snap):
        frame = frame_array(snap)
        assert frame.shape == (CANVAS_SIZE, CANVAS_SIZE, 3)
        assert frame.dtype == np.uint8

    def test_cells_are_painted(self, snap):
        frame = frame_array(snap)
        # (row, col) = (y, x)
        assert tuple(frame[0, 0]) == GREEN
        assert tuple(frame[0, CELL_SIZE]) == GREEN
        assert tuple(frame[2 * CELL_SIZE, 3 * CELL_SIZE]) == RED
        assert tuple(frame[5 * CELL_SIZE, 5 * CELL_SIZE]) == BG

    def test_gap_between_cells(self, snap):
        frame = frame_array(snap)
        assert tuple(frame[0, CELL_SIZE - 1]) == BG
        assert tuple(frame[CELL_SIZE - 2, 0]) == BG

    def test_counts(self, snap):
        frame = frame_array(snap)
        inner = (CELL_SIZE - 2) ** 2
        green = np.all(frame == GREEN, axis=-1).sum()
        red = np.all(frame == RED, axis=-1).sum()
        assert green == 2 * inner
        assert red == inner

    def test_custom_cell_size(self, snap):
        assert frame_array(snap, cell_size=4).shape == (60, 60, 3)


class TestDraw:
    @pytest.fixture(autouse=True)
    def _fonts(self):
        pygame.font.init()
        yield
        pygame.font.quit()

    @pytest.mark.parametrize("phase", list(Phase))
    def test_draws_every_phase(self, snap, phase):
        screen = pygame.Surface(WINDOW_SIZE)
        font = pygame.font.Font(None, 16)
        shown = Snapshot(snake=snap.snake, food=snap.food, score=snap.score, phase=phase)
        draw_game(screen, font, shown)
        draw_overlay(screen, font, shown)
        # food pixel inside the board area
        fx, fy = snap.food
        color = screen.get_at((fx * CELL_SIZE + 1, HUD_HEIGHT + fy * CELL_SIZE + 1))
        if phase is Phase.RUNNING:
            assert tuple(color)[:3] == RED
        else:
            # dimmed by the overlay
            assert tuple(color)[0] < RED[0]


def test_game_over_overlay_carries_title_and_credit(monkeypatch, snap):
    pygame.font.init()
    try:
        shown = []
        monkeypatch.setattr("snake.render._blit_centered",
                            lambda screen, font, text, color, center: shown.append(text))
        over = Snapshot(snake=snap.snake, food=snap.food, score=40, phase=Phase.GAME_OVER)
        draw_overlay(pygame.Surface(WINDOW_SIZE), pygame.font.Font(None, 16), over)
        assert shown == [TITLE, "GAME OVER", "Final Score: 40", CREDIT]
    finally:
        pygame.font.quit()
