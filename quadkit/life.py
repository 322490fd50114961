"""Conway's Game of Life on a bounded grid."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, auto
from itertools import product


class CellState(Enum):
    """State of a single cell."""

    ALIVE = auto()
    DEAD = auto()


def next_state(cell: CellState, neighbors: int) -> CellState:
    """State of a cell in the next generation given its live neighbour count."""
    if cell is CellState.ALIVE:
        if neighbors < 2 or neighbors > 3:
            return CellState.DEAD
        return CellState.ALIVE
    if neighbors == 3:
        return CellState.ALIVE
    return cell


@dataclass
class LifeGrid:
    """A `width` x `height` grid; cells beyond the edges count as dead."""

    width: int
    height: int
    cells: list[list[CellState]]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("grid dimensions must be positive")
        if len(self.cells) != self.height or any(len(row) != self.width for row in self.cells):
            raise ValueError("cells do not match the grid dimensions")

    @classmethod
    def random(cls, width: int, height: int, rng: random.Random | None = None) -> LifeGrid:
        """A grid where each cell starts alive with probability 1/5."""
        if width <= 0 or height <= 0:
            raise ValueError("grid dimensions must be positive")
        rng = rng if rng is not None else random.Random()
        cells = [
            [CellState.ALIVE if rng.randrange(5) == 0 else CellState.DEAD for _ in range(width)]
            for _ in range(height)
        ]
        return cls(width, height, cells)

    def neighbors(self, x: int, y: int) -> int:
        """Number of live cells among the up to eight cells around (x, y)."""
        count = 0
        for dy, dx in product((-1, 0, 1), repeat=2):
            if dx == 0 and dy == 0:
                continue
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.width and 0 <= ny < self.height:
                if self.cells[ny][nx] is CellState.ALIVE:
                    count += 1
        return count

    def step(self) -> None:
        """Advance the whole grid by one generation."""
        self.cells = [
            [next_state(cell, self.neighbors(x, y)) for x, cell in enumerate(row)]
            for y, row in enumerate(self.cells)
        ]