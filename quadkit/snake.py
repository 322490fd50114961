"""Snake on a square board: steering, growing and the game-over rules."""

from __future__ import annotations

import random
from collections import deque
from typing import Optional

Point = tuple[int, int]

UP: Point = (0, -1)
DOWN: Point = (0, 1)
LEFT: Point = (-1, 0)
RIGHT: Point = (1, 0)

SQUARES = 16
INITIAL_SPEED = 0.3
FRUIT_SCORE = 100
SPEEDUP = 0.9


class SnakeGame:
    """State of one snake game; the snake advances one square per `speed` seconds."""

    def __init__(
        self,
        squares: int = SQUARES,
        rng: Optional[random.Random] = None,
        now: float = 0.0,
    ) -> None:
        if squares <= 0:
            raise ValueError("board must have at least one square")
        self.squares = squares
        self._rng = rng if rng is not None else random.Random()
        self._now = now
        self.reset()

    def _random_point(self) -> Point:
        return (self._rng.randrange(self.squares), self._rng.randrange(self.squares))

    def reset(self) -> None:
        """Start a new game at the top-left corner heading right."""
        self.head: Point = (0, 0)
        self.direction: Point = RIGHT
        self.body: deque[Point] = deque()
        self.fruit: Point = self._random_point()
        self.score = 0
        self.speed = INITIAL_SPEED
        self.last_update = self._now
        self.navigation_lock = False
        self.game_over = False

    def steer(self, direction: Point) -> bool:
        """Turn the snake; reversing, or a second turn before it moves, is ignored."""
        if self.game_over or self.navigation_lock:
            return False
        if direction == (-self.direction[0], -self.direction[1]):
            return False
        self.direction = direction
        self.navigation_lock = True
        return True

    def tick(self) -> None:
        """Move the snake one square, eating fruit and checking for collisions."""
        self.body.appendleft(self.head)
        self.head = (self.head[0] + self.direction[0], self.head[1] + self.direction[1])
        if self.head == self.fruit:
            self.fruit = self._random_point()
            self.score += FRUIT_SCORE
            self.speed *= SPEEDUP
        else:
            self.body.pop()
        x, y = self.head
        if not (0 <= x < self.squares and 0 <= y < self.squares):
            self.game_over = True
        if self.head in self.body:
            self.game_over = True
        self.navigation_lock = False

    def update(self, now: float) -> bool:
        """Advance the game to time `now`; True when the snake moved."""
        self._now = now
        if self.game_over or now - self.last_update <= self.speed:
            return False
        self.last_update = now
        self.tick()
        return True