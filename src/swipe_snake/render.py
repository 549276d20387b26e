# render.py
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Sequence, Tuple

import numpy as np  # type: ignore
import pygame  # type: ignore

from .config import (
    CANVAS_SIZE, CELL_SIZE, INDICATOR_MS,
    BG, HEAD, BODY, FOOD, EYE, TEXT, TEXT_DIM, ACCENT,
    UP, DOWN, LEFT, RIGHT,
)
from .game import RunState

HUD_HEIGHT = 40          # logical units above the board
CELL_GAP = 1
CELL_RADIUS = 4
EYE_RADIUS = 2
EYE_OFFSETS = ((6, 6), (14, 6))
FOOD_GLOW = 10


# ---------- Viewport ----------
@dataclass
class Viewport:
    """
    Maps logical units (a 400x400 board plus the HUD strip) to window pixels.
    Game code only ever sees logical coordinates; scale absorbs both the
    window size and the display's pixel density.
    """
    window_size: Tuple[int, int]
    scale: float
    offset: Tuple[int, int]

    @classmethod
    def fit(cls, window_size: Tuple[int, int], pixel_ratio: Optional[float] = None) -> "Viewport":
        w, h = window_size
        scale = max(min(w / CANVAS_SIZE, h / (CANVAS_SIZE + HUD_HEIGHT)), 0.1)
        if pixel_ratio:
            # a fixed density never grows the board past the window
            scale = min(float(pixel_ratio), scale)
        ox = int((w - CANVAS_SIZE * scale) // 2)
        oy = int((h - (CANVAS_SIZE + HUD_HEIGHT) * scale) // 2)
        return cls(window_size=(w, h), scale=scale, offset=(ox, oy))

    def px(self, length: float) -> int:
        return max(int(round(length * self.scale)), 1)

    def to_px(self, x: float, y: float) -> Tuple[int, int]:
        """Board coordinates (logical units) to window pixels."""
        ox, oy = self.offset
        return (ox + int(round(x * self.scale)), oy + int(round((y + HUD_HEIGHT) * self.scale)))

    def board_rect(self) -> pygame.Rect:
        x, y = self.to_px(0, 0)
        side = self.px(CANVAS_SIZE)
        return pygame.Rect(x, y, side, side)

    def hud_rect(self) -> pygame.Rect:
        ox, oy = self.offset
        return pygame.Rect(ox, oy, self.px(CANVAS_SIZE), self.px(HUD_HEIGHT))


# ---------- Sprites ----------
@lru_cache(maxsize=8)
def glow_sprite(radius: int, color: Tuple[int, int, int], peak: int = 140) -> pygame.Surface:
    """Soft radial halo: alpha falls off quadratically from the center to radius."""
    size = radius * 2
    surf = pygame.Surface((size, size), pygame.SRCALPHA)
    surf.fill((*color, 0))
    coords = np.arange(size, dtype=np.float32) - radius + 0.5
    dist = np.hypot(coords[:, None], coords[None, :]) / radius
    alpha = (np.clip(1.0 - dist, 0.0, 1.0) ** 2) * peak
    pixels = pygame.surfarray.pixels_alpha(surf)
    pixels[:, :] = alpha.astype(np.uint8)
    del pixels  # unlock the surface
    return surf


@lru_cache(maxsize=16)
def _font(size: int) -> pygame.font.Font:
    return pygame.font.SysFont(None, size)


# ---------- Board ----------
def draw_cell(surface: pygame.Surface, view: Viewport, gx: int, gy: int, color) -> None:
    x, y = view.to_px(gx * CELL_SIZE + CELL_GAP, gy * CELL_SIZE + CELL_GAP)
    side = view.px(CELL_SIZE - 2 * CELL_GAP)
    pygame.draw.rect(surface, color, pygame.Rect(x, y, side, side), border_radius=view.px(CELL_RADIUS))


def draw_eyes(surface: pygame.Surface, view: Viewport, gx: int, gy: int) -> None:
    for ex, ey in EYE_OFFSETS:
        center = view.to_px(gx * CELL_SIZE + ex, gy * CELL_SIZE + ey)
        pygame.draw.circle(surface, EYE, center, view.px(EYE_RADIUS))


def draw_food(surface: pygame.Surface, view: Viewport, gx: int, gy: int) -> None:
    center = view.to_px(gx * CELL_SIZE + CELL_SIZE / 2, gy * CELL_SIZE + CELL_SIZE / 2)
    radius = view.px((CELL_SIZE - 2 * CELL_GAP) / 2)
    halo = glow_sprite(radius + view.px(FOOD_GLOW), FOOD)
    surface.blit(halo, halo.get_rect(center=center))
    pygame.draw.circle(surface, FOOD, center, radius)


def draw_board(surface: pygame.Surface, state, view: Viewport) -> None:
    """Clear the board and draw the food and snake. Reads state only."""
    surface.fill(BG, view.board_rect())
    if state.food is not None:
        draw_food(surface, view, *state.food)
    # tail first so the head is painted on top
    for index in range(len(state.snake) - 1, -1, -1):
        gx, gy = state.snake[index]
        if index == 0:
            draw_cell(surface, view, gx, gy, HEAD)
            draw_eyes(surface, view, gx, gy)
        else:
            draw_cell(surface, view, gx, gy, BODY)


# ---------- HUD / overlays ----------
def draw_hud(surface: pygame.Surface, view: Viewport, score: int, high_score: int, pulsing: bool = False) -> None:
    rect = view.hud_rect()
    surface.fill(BG, rect)
    size = view.px(30 if pulsing else 26)
    score_txt = _font(size).render(f"Score: {score}", True, ACCENT if pulsing else TEXT)
    best_txt = _font(view.px(26)).render(f"Best: {high_score}", True, TEXT_DIM)
    surface.blit(score_txt, score_txt.get_rect(midleft=(rect.left + view.px(8), rect.centery)))
    surface.blit(best_txt, best_txt.get_rect(midright=(rect.right - view.px(8), rect.centery)))


def draw_overlay(
    surface: pygame.Surface, view: Viewport, title: str,
    lines: Sequence[str] = (), highlight: Sequence[str] = (),
) -> None:
    """Dim the board and print a title with a few lines under it."""
    board = view.board_rect()
    overlay = pygame.Surface(board.size, pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 150))
    surface.blit(overlay, board.topleft)

    title_surf = _font(view.px(44)).render(title, True, TEXT)
    y = board.centery - view.px(16 * len(lines))
    surface.blit(title_surf, title_surf.get_rect(center=(board.centerx, y)))
    for line in lines:
        y += view.px(32)
        color = ACCENT if line in highlight else TEXT_DIM
        line_surf = _font(view.px(24)).render(line, True, color)
        surface.blit(line_surf, line_surf.get_rect(center=(board.centerx, y)))


def arrow_points(direction, center: Tuple[int, int], size: int):
    """Triangle pointing along direction, centered on center."""
    cx, cy = center
    dx, dy = direction
    # perpendicular for the base corners
    px, py = -dy, dx
    tip = (cx + dx * size, cy + dy * size)
    left = (cx - dx * size // 2 + px * size, cy - dy * size // 2 + py * size)
    right = (cx - dx * size // 2 - px * size, cy - dy * size // 2 - py * size)
    return [tip, left, right]


def draw_indicator(surface: pygame.Surface, view: Viewport, direction, alpha: int) -> None:
    if direction not in (UP, DOWN, LEFT, RIGHT):
        return
    size = view.px(40)
    sprite = pygame.Surface((size * 4, size * 4), pygame.SRCALPHA)
    pygame.draw.polygon(sprite, (*TEXT, max(0, min(alpha, 255))), arrow_points(direction, (size * 2, size * 2), size))
    surface.blit(sprite, sprite.get_rect(center=view.board_rect().center))


def draw_frame(surface: pygame.Surface, session, view: Viewport, now_ms: int) -> None:
    """Full redraw: HUD, board, swipe indicator and the overlay for the run state."""
    state = session.state
    surface.fill(BG)
    draw_hud(surface, view, state.score, session.high_score, session.score_pulsing(now_ms))
    draw_board(surface, state, view)

    indicator = session.indicator
    if indicator is not None and indicator.visible(now_ms):
        fade = (indicator.expires_at - now_ms) / INDICATOR_MS
        draw_indicator(surface, view, indicator.direction, int(120 * fade))

    if state.run_state is RunState.IDLE:
        draw_overlay(surface, view, "SNAKE", ["Arrows or swipe to steer", "Enter or tap to start"])
    elif state.run_state is RunState.PAUSED:
        draw_overlay(surface, view, "PAUSED", ["Space or tap to resume"])
    elif state.run_state is RunState.GAME_OVER:
        result = session.last_result
        title = "BOARD CLEARED" if result is not None and result.reason == "board_full" else "GAME OVER"
        lines = [f"Final score: {state.score}"]
        if session.new_high_score:
            lines.append("NEW HIGH SCORE!")
        lines.append("Enter or tap to restart")
        draw_overlay(surface, view, title, lines, highlight=("NEW HIGH SCORE!",))
