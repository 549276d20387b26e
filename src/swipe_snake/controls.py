# controls.py
from typing import Dict, Optional, Tuple
import logging

import pygame  # type: ignore

from .config import DOWN, LEFT, MIN_SWIPE_DISTANCE, RIGHT, UP
from .game import Direction, RunState
from .render import Viewport
from .session import Session

logger = logging.getLogger(__name__)

Point = Tuple[float, float]

DIRECTION_KEYS: Dict[int, Direction] = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_w: UP,
    pygame.K_s: DOWN,
    pygame.K_a: LEFT,
    pygame.K_d: RIGHT,
}
PAUSE_KEYS = (pygame.K_SPACE, pygame.K_ESCAPE)
START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_r, pygame.K_SPACE)


def classify_swipe(start: Point, end: Point, threshold: float = MIN_SWIPE_DISTANCE) -> Optional[Direction]:
    """
    Map a gesture to one of the four directions, or None if it is too short.
    The longer axis wins; equal displacement counts as vertical.
    """
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    if abs(dx) < threshold and abs(dy) < threshold:
        return None
    if abs(dx) > abs(dy):
        return RIGHT if dx > 0 else LEFT
    return DOWN if dy > 0 else UP


class InputRouter:
    """Translate pygame events into session calls."""

    def __init__(self, session: Session, viewport: Viewport, threshold: float = MIN_SWIPE_DISTANCE):
        self.session = session
        self.viewport = viewport
        self.threshold = threshold
        self._gestures: Dict[object, Point] = {}

    def handle(self, event: pygame.event.Event, now_ms: int) -> bool:
        """Process one event. Return False to quit."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            self._on_key(event.key, now_ms)
        elif event.type == pygame.FINGERDOWN:
            self._gestures[("finger", event.finger_id)] = self._finger_pos(event)
        elif event.type == pygame.FINGERUP:
            start = self._gestures.pop(("finger", event.finger_id), None)
            if start is not None:
                self._on_gesture(start, self._finger_pos(event), now_ms)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            # SDL also reports touches as mouse events; fingers are handled above.
            if not getattr(event, "touch", False):
                self._gestures["mouse"] = event.pos
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            start = self._gestures.pop("mouse", None)
            if start is not None:
                self._on_gesture(start, event.pos, now_ms)
        return True

    def _finger_pos(self, event: pygame.event.Event) -> Point:
        w, h = self.viewport.window_size
        return (event.x * w, event.y * h)

    def _on_key(self, key: int, now_ms: int) -> None:
        session = self.session
        in_round = session.run_state in (RunState.RUNNING, RunState.PAUSED)
        if key in DIRECTION_KEYS:
            session.steer(DIRECTION_KEYS[key], now_ms)
        elif in_round and key in PAUSE_KEYS:
            session.toggle_pause(now_ms)
        elif not in_round and key in START_KEYS:
            session.start(now_ms)

    def _on_gesture(self, start: Point, end: Point, now_ms: int) -> None:
        direction = classify_swipe(start, end, self.threshold)
        logger.debug("Gesture %s -> %s classified as %s", start, end, direction)
        if direction is not None:
            self.session.steer(direction, now_ms)
            return
        if not self.viewport.board_rect().collidepoint(end):
            return
        if self.session.run_state in (RunState.RUNNING, RunState.PAUSED):
            self.session.toggle_pause(now_ms)
        else:
            self.session.start(now_ms)
