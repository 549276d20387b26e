from dataclasses import dataclass
from typing import Tuple
import random

from .config import TILE_COUNT

Cell = Tuple[int, int]


@dataclass(frozen=True)
class Grid:
    """Fixed discrete coordinate space every cell is checked against."""
    width: int = TILE_COUNT
    height: int = TILE_COUNT

    @property
    def size(self) -> int:
        return self.width * self.height

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def random_cell(self, rng: random.Random) -> Cell:
        return (rng.randrange(self.width), rng.randrange(self.height))

    def center(self) -> Cell:
        return (self.width // 2, self.height // 2)
