import pygame
import pytest

from swipe_snake.config import DOWN, LEFT, RIGHT, UP
from swipe_snake.controls import InputRouter, classify_swipe
from swipe_snake.game import RunState
from swipe_snake.render import Viewport


@pytest.mark.parametrize("start,end,expected", [
    ((100, 100), (100, 130), None),
    ((100, 100), (100, 150), DOWN),
    ((100, 100), (100, 40), UP),
    ((100, 100), (160, 110), RIGHT),
    ((100, 100), (20, 130), LEFT),
    ((100, 100), (139, 139), None),
    ((100, 100), (150, 150), DOWN),
])
def test_classify_swipe(start, end, expected):
    assert classify_swipe(start, end) == expected


def test_classify_swipe_custom_threshold():
    assert classify_swipe((0, 0), (0, 30), threshold=20) == DOWN


@pytest.fixture
def router(session):
    return InputRouter(session, Viewport.fit((400, 400)))


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def test_quit_event_stops_loop(router):
    assert router.handle(pygame.event.Event(pygame.QUIT), 0) is False


def test_enter_starts_and_space_toggles_pause(router, session):
    router.handle(key(pygame.K_RETURN), 0)
    assert session.run_state is RunState.RUNNING
    router.handle(key(pygame.K_SPACE), 10)
    assert session.run_state is RunState.PAUSED
    router.handle(key(pygame.K_ESCAPE), 20)
    assert session.run_state is RunState.RUNNING


def test_arrow_keys_steer(router, session):
    session.start(0)
    router.handle(key(pygame.K_LEFT), 10)
    assert session.state.pending == RIGHT
    router.handle(key(pygame.K_UP), 20)
    assert session.state.pending == UP
    assert session.indicator.direction == UP


def finger(kind, x, y, fid=0):
    return pygame.event.Event(kind, x=x, y=y, finger_id=fid, touch_id=0)


def test_short_finger_swipe_is_ignored(router, session):
    session.start(0)
    router.handle(finger(pygame.FINGERDOWN, 0.25, 0.25), 10)
    # 100px -> 130px: below the threshold, so it counts as a tap on the board
    router.handle(finger(pygame.FINGERUP, 0.25, 0.325), 20)
    assert session.state.pending == RIGHT
    assert session.indicator is None
    assert session.run_state is RunState.PAUSED


def test_finger_swipe_down_sets_pending(router, session):
    session.start(0)
    router.handle(finger(pygame.FINGERDOWN, 0.25, 0.25), 10)
    router.handle(finger(pygame.FINGERUP, 0.25, 0.375), 20)
    assert session.state.pending == (0, 1)


def test_tap_on_board_toggles_pause(router, session):
    session.start(0)
    center = router.viewport.board_rect().center
    router.handle(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=center, button=1, touch=False), 10)
    router.handle(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=center, button=1, touch=False), 20)
    assert session.run_state is RunState.PAUSED


def test_touch_emulated_mouse_is_ignored(router, session):
    session.start(0)
    center = router.viewport.board_rect().center
    router.handle(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=center, button=1, touch=True), 10)
    router.handle(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=center, button=1, touch=True), 20)
    assert session.run_state is RunState.RUNNING


def test_tap_starts_idle_game(router, session):
    center = router.viewport.board_rect().center
    router.handle(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=center, button=1), 0)
    router.handle(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=center, button=1), 5)
    assert session.run_state is RunState.RUNNING


def test_second_tap_resumes_paused_game(router, session):
    session.start(0)
    center = router.viewport.board_rect().center
    for now in (10, 100):
        router.handle(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=center, button=1), now)
        router.handle(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=center, button=1), now + 5)
    assert session.run_state is RunState.RUNNING
    assert session.ticker.active
