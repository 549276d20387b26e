from dataclasses import dataclass
from typing import Callable, Optional
import logging
import random

from .config import Config, INDICATOR_MS, SCORE_PULSE_MS
from .game import (
    Direction, GameState, RunState, TickResult,
    new_game_state, reset, set_pending_direction, tick,
    pause as pause_state, resume as resume_state,
)
from .grid import Grid
from .storage import HighScoreStore
from .ticker import Ticker

logger = logging.getLogger(__name__)


@dataclass
class SwipeIndicator:
    direction: Direction
    expires_at: int

    def visible(self, now_ms: int) -> bool:
        return now_ms < self.expires_at


class Session:
    """
    Owns one game and everything around it: the ticker, the stored best score
    and the short-lived UI signals the renderer reads.

    Ticker start/stop always happens together with the run-state change, so
    no tick can fire once a round is paused or over.
    """

    def __init__(
        self,
        cfg: Config,
        store: Optional[HighScoreStore] = None,
        grid: Optional[Grid] = None,
        on_food: Optional[Callable[[GameState], None]] = None,
    ):
        self.cfg = cfg
        self.store = store
        self.state = new_game_state(grid or Grid(), random.Random(cfg.seed))
        self.ticker = Ticker(cfg.tick_ms)
        self.high_score = store.load() if store is not None else 0
        self.new_high_score = False
        self.indicator: Optional[SwipeIndicator] = None
        self.score_pulse_until = 0
        self.last_result: Optional[TickResult] = None
        self.on_food = on_food
        logger.info("Loaded high score %d", self.high_score)

    @property
    def run_state(self) -> RunState:
        return self.state.run_state

    # ----- Run-state transitions -----
    def start(self, now_ms: int) -> None:
        """Begin a fresh round. Ignored while a round is in progress."""
        if self.run_state in (RunState.RUNNING, RunState.PAUSED):
            return
        reset(self.state)
        self.new_high_score = False
        self.indicator = None
        self.last_result = None
        self.ticker.start(now_ms)

    def pause(self) -> bool:
        if not pause_state(self.state):
            return False
        self.ticker.stop()
        logger.debug("Paused at score %d", self.state.score)
        return True

    def resume(self, now_ms: int) -> bool:
        if not resume_state(self.state):
            return False
        self.ticker.start(now_ms)
        return True

    def toggle_pause(self, now_ms: int) -> bool:
        if self.run_state is RunState.PAUSED:
            return self.resume(now_ms)
        return self.pause()

    # ----- Input -----
    def steer(self, direction: Direction, now_ms: int) -> bool:
        accepted = set_pending_direction(self.state, direction)
        if accepted:
            self.indicator = SwipeIndicator(direction, now_ms + INDICATOR_MS)
        return accepted

    # ----- Simulation -----
    def update(self, now_ms: int) -> Optional[TickResult]:
        """Run one tick if the ticker is due. None when nothing happened."""
        if not self.ticker.poll(now_ms):
            return None
        result = tick(self.state)
        self.last_result = result
        if result.ate:
            self.score_pulse_until = now_ms + SCORE_PULSE_MS
            if self.on_food is not None:
                self.on_food(self.state)
        if not result.alive:
            self.ticker.stop()
            self._record_score()
        return result

    def _record_score(self) -> None:
        score = self.state.score
        if score <= self.high_score:
            return
        self.high_score = score
        self.new_high_score = True
        logger.info("New high score %d", score)
        if self.store is not None:
            self.store.save(score)

    def score_pulsing(self, now_ms: int) -> bool:
        return now_ms < self.score_pulse_until
