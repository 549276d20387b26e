import pygame

from swipe_snake.config import BODY, FOOD, HEAD
from swipe_snake.render import HUD_HEIGHT, Viewport, draw_board, glow_sprite

from conftest import make_state


def test_viewport_fits_logical_size_exactly():
    view = Viewport.fit((400, 400 + HUD_HEIGHT))
    assert view.scale == 1.0
    assert view.offset == (0, 0)
    assert view.board_rect() == pygame.Rect(0, HUD_HEIGHT, 400, 400)


def test_viewport_scales_and_centers():
    view = Viewport.fit((800, 1000))
    assert view.scale == 2.0
    assert view.offset == (0, 60)
    assert view.to_px(20, 20) == (40, 60 + (20 + HUD_HEIGHT) * 2)


def test_fixed_pixel_ratio_keeps_logical_coordinates():
    view = Viewport.fit((1000, 1000), pixel_ratio=2.0)
    assert view.scale == 2.0
    assert view.board_rect().size == (800, 800)


def test_draw_board_paints_head_body_and_food():
    view = Viewport.fit((400, 400 + HUD_HEIGHT))
    surface = pygame.Surface(view.window_size)
    state = make_state([(10, 10), (9, 10), (8, 10)], food=(3, 4))
    draw_board(surface, state, view)

    def color_at(x, y):
        return tuple(surface.get_at(view.to_px(x, y)))[:3]

    assert color_at(210, 212) == HEAD
    assert color_at(190, 210) == BODY
    assert color_at(70, 90) == FOOD
    # eyes are white
    assert color_at(206, 206) == (255, 255, 255)


def test_draw_board_without_food():
    view = Viewport.fit((400, 400 + HUD_HEIGHT))
    surface = pygame.Surface(view.window_size)
    state = make_state([(0, 0)], food=None)
    draw_board(surface, state, view)
    assert tuple(surface.get_at(view.to_px(10, 12)))[:3] == HEAD


def test_glow_sprite_fades_outward():
    sprite = glow_sprite(20, FOOD)
    assert sprite.get_size() == (40, 40)
    center = sprite.get_at((20, 20)).a
    mid = sprite.get_at((30, 20)).a
    assert center > mid > 0
    assert sprite.get_at((0, 0)).a == 0


def test_fixed_pixel_ratio_shrinks_to_fit_small_window():
    view = Viewport.fit((300, 340), pixel_ratio=2.0)
    assert view.scale == 0.75
    assert view.offset == (0, 5)
    assert view.board_rect() == pygame.Rect(0, 35, 300, 300)
    assert pygame.Rect((0, 0), view.window_size).contains(view.board_rect())
