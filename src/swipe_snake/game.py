# game.py
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple
import logging
import random

from .config import FOOD_SCORE, RIGHT
from .grid import Cell, Grid

logger = logging.getLogger(__name__)

Direction = Tuple[int, int]


class SnakeError(Exception):
    """Base class for game errors."""


class InvalidTransition(SnakeError):
    """Raised when an operation is not allowed in the current run state."""


class RunState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


# ---------- Helpers ----------
def spawn_food(snake: List[Cell], grid: Grid, rng: random.Random) -> Optional[Cell]:
    """Rejection-sample a free cell. None when the snake fills the board."""
    occupied = set(snake)
    if len(occupied) >= grid.size:
        return None
    while True:
        cell = grid.random_cell(rng)
        if cell not in occupied:
            return cell


def _check_direction(direction: Direction) -> None:
    dx, dy = direction
    if (abs(dx), abs(dy)) not in ((1, 0), (0, 1)):
        raise ValueError(f"Not a unit grid direction: {direction!r}")


# ---------- State ----------
@dataclass
class TickResult:
    alive: bool
    ate: bool = False
    reason: Optional[str] = None  # "wall" | "self" | "board_full"


@dataclass
class GameState:
    snake: List[Cell]              # head at index 0
    direction: Direction           # committed velocity
    pending: Direction             # applied at the start of the next tick
    food: Optional[Cell]
    score: int = 0
    run_state: RunState = RunState.IDLE
    grid: Grid = field(default_factory=Grid)
    rng: random.Random = field(default_factory=random.Random, repr=False)

    @property
    def head(self) -> Cell:
        return self.snake[0]


def _starting_snake(grid: Grid) -> List[Cell]:
    cx, cy = grid.center()
    return [(cx, cy), (cx - 1, cy), (cx - 2, cy)]


def new_game_state(grid: Optional[Grid] = None, rng: Optional[random.Random] = None) -> GameState:
    """Idle state holding the starting layout, drawn behind the start screen."""
    grid = grid or Grid()
    rng = rng or random.Random()
    snake = _starting_snake(grid)
    return GameState(
        snake=snake,
        direction=RIGHT,
        pending=RIGHT,
        food=spawn_food(snake, grid, rng),
        grid=grid,
        rng=rng,
    )


def reset(state: GameState) -> None:
    state.snake = _starting_snake(state.grid)
    state.direction = RIGHT
    state.pending = RIGHT
    state.score = 0
    state.food = spawn_food(state.snake, state.grid, state.rng)
    state.run_state = RunState.RUNNING
    logger.debug("New round, food at %s", state.food)


# ---------- Input / Update ----------
def set_pending_direction(state: GameState, direction: Direction) -> bool:
    """
    Buffer a turn for the next tick. Only turns onto the axis perpendicular
    to the committed direction are taken; reversals and repeats are ignored.
    Returns True if the turn was buffered.
    """
    _check_direction(direction)
    if state.run_state not in (RunState.RUNNING, RunState.PAUSED):
        return False
    dx, dy = direction
    if dx != 0 and state.direction[0] != 0:
        return False
    if dy != 0 and state.direction[1] != 0:
        return False
    state.pending = direction
    return True


def tick(state: GameState) -> TickResult:
    """
    Advance the game by one step.
    - commit the pending direction
    - push the new head; drop the tail unless food was eaten
    - end the round on a wall or self collision
    """
    if state.run_state is not RunState.RUNNING:
        raise InvalidTransition(f"tick() while {state.run_state.value}")

    state.direction = state.pending
    hx, hy = state.snake[0]
    dx, dy = state.direction
    new_head = (hx + dx, hy + dy)

    state.snake.insert(0, new_head)
    ate = new_head == state.food
    if ate:
        state.score += FOOD_SCORE
        state.food = spawn_food(state.snake, state.grid, state.rng)
    else:
        state.snake.pop()

    if not state.grid.contains(new_head):
        return _end_round(state, ate, "wall")
    if new_head in state.snake[1:]:
        return _end_round(state, ate, "self")
    if ate and state.food is None:
        return _end_round(state, ate, "board_full")
    return TickResult(alive=True, ate=ate)


def _end_round(state: GameState, ate: bool, reason: str) -> TickResult:
    state.run_state = RunState.GAME_OVER
    logger.info("Game over (%s) with score %d, length %d", reason, state.score, len(state.snake))
    return TickResult(alive=False, ate=ate, reason=reason)


def pause(state: GameState) -> bool:
    if state.run_state is not RunState.RUNNING:
        return False
    state.run_state = RunState.PAUSED
    return True


def resume(state: GameState) -> bool:
    if state.run_state is not RunState.PAUSED:
        return False
    state.run_state = RunState.RUNNING
    return True


def toggle_pause(state: GameState) -> bool:
    """Flip between running and paused. Returns True if the state changed."""
    if state.run_state is RunState.PAUSED:
        return resume(state)
    return pause(state)
