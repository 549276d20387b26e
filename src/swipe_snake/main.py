# main.py
import argparse
import logging
from pathlib import Path
from typing import List, Optional

import pygame  # type: ignore

from .config import CANVAS_SIZE, Config
from .controls import InputRouter
from .render import HUD_HEIGHT, Viewport, draw_frame
from .session import Session
from .storage import HighScoreStore

logger = logging.getLogger(__name__)

HAPTIC_MS = 50


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Snake with keyboard and swipe controls")
    parser.add_argument("--tick-ms", type=int, default=None, help="Milliseconds per game step")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement")
    parser.add_argument("--storage", type=Path, default=None, help="File that keeps the high score")
    parser.add_argument("--pixel-ratio", type=float, default=None,
                        help="Fixed pixels per logical unit (default: fit the window)")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    """Environment first, then command-line flags on top."""
    cfg = Config.from_env()
    if args.tick_ms is not None:
        if args.tick_ms <= 0:
            raise SystemExit("--tick-ms must be positive")
        cfg.tick_ms = args.tick_ms
    if args.seed is not None:
        cfg.seed = args.seed
    if args.storage is not None:
        cfg.storage_path = args.storage
    if args.pixel_ratio is not None:
        if args.pixel_ratio <= 0:
            raise SystemExit("--pixel-ratio must be positive")
        cfg.pixel_ratio = args.pixel_ratio
    return cfg


def _haptic_pulse(joysticks):
    def pulse(_state) -> None:
        for js in joysticks:
            js.rumble(0.5, 0.5, HAPTIC_MS)
    return pulse


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    cfg = build_config(args)

    pygame.init()
    ratio = cfg.pixel_ratio or 1.0
    window = (int(CANVAS_SIZE * ratio), int((CANVAS_SIZE + HUD_HEIGHT) * ratio))
    screen = pygame.display.set_mode(window, pygame.RESIZABLE)
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()
    joysticks = [pygame.joystick.Joystick(i) for i in range(pygame.joystick.get_count())]

    session = Session(cfg, HighScoreStore(cfg.storage_path), on_food=_haptic_pulse(joysticks))
    viewport = Viewport.fit(screen.get_size(), cfg.pixel_ratio)
    router = InputRouter(session, viewport, cfg.swipe_threshold)
    logger.info("Window %dx%d, scale %.2f, tick %d ms", *viewport.window_size, viewport.scale, cfg.tick_ms)

    running = True
    dirty = True
    was_animating = False
    while running:
        now = pygame.time.get_ticks()

        # 1) input
        for event in pygame.event.get():
            if event.type == pygame.VIDEORESIZE or event.type == pygame.WINDOWSIZECHANGED:
                viewport = Viewport.fit(screen.get_size(), cfg.pixel_ratio)
                router.viewport = viewport
            if not router.handle(event, now):
                running = False
                break
            dirty = True
        if not running:
            break

        # 2) update
        if session.update(now) is not None:
            dirty = True

        # 3) render
        animating = session.score_pulsing(now) or (
            session.indicator is not None and session.indicator.visible(now)
        )
        # one more frame after an animation ends to clear it
        if dirty or animating or was_animating:
            draw_frame(screen, session, viewport, now)
            pygame.display.flip()
            dirty = False
        was_animating = animating
        clock.tick(cfg.fps)

    pygame.quit()


if __name__ == "__main__":
    main()
