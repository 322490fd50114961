"""Arkanoid: a paddle, a bouncing ball and a wall of blocks in a 20x20 world."""

from __future__ import annotations

from quadkit.geometry import Rect

BLOCKS_W = 10
BLOCKS_H = 10
SCREEN_WIDTH = 20.0
SCREEN_HEIGHT = 20.0
BLOCK_AREA_HEIGHT = 7.0
BLOCK_GAP = 0.05
PLATFORM_WIDTH = 5.0
PLATFORM_HEIGHT = 0.2
PLATFORM_SPEED = 3.0


class ArkanoidGame:
    """Game state; the ball rests on the paddle until launched with space."""

    def __init__(self) -> None:
        self.blocks: list[list[bool]] = [[True] * BLOCKS_W for _ in range(BLOCKS_H)]
        self.ball_x = 12.0
        self.ball_y = 7.0
        self.dx = 3.5
        self.dy = -3.5
        self.platform_x = 10.0
        self.stick = True

    @property
    def remaining_blocks(self) -> int:
        return sum(row.count(True) for row in self.blocks)

    @staticmethod
    def block_rect(i: int, j: int) -> Rect:
        """Area of the block in column `i`, row `j`, used for hit testing."""
        block_w = SCREEN_WIDTH / BLOCKS_W
        block_h = BLOCK_AREA_HEIGHT / BLOCKS_H
        return Rect(i * block_w + BLOCK_GAP, j * block_h + BLOCK_GAP, block_w, block_h)

    def step(
        self, delta: float, left: bool = False, right: bool = False, space: bool = False
    ) -> None:
        """Advance by `delta` seconds with the given keys held down."""
        half = PLATFORM_WIDTH / 2.0
        if right and self.platform_x < SCREEN_WIDTH - half:
            self.platform_x += PLATFORM_SPEED * delta
        if left and self.platform_x > half:
            self.platform_x -= PLATFORM_SPEED * delta

        if not self.stick:
            self.ball_x += self.dx * delta
            self.ball_y += self.dy * delta
        else:
            self.ball_x = self.platform_x
            self.ball_y = SCREEN_HEIGHT - 0.5
            self.stick = not space

        if self.ball_x <= 0.0 or self.ball_x > SCREEN_WIDTH:
            self.dx = -self.dx
        on_platform = (
            self.ball_y > SCREEN_HEIGHT - PLATFORM_HEIGHT - 0.15 / 2.0
            and self.platform_x - half <= self.ball_x <= self.platform_x + half
        )
        if self.ball_y <= 0.0 or on_platform:
            self.dy = -self.dy
        if self.ball_y >= SCREEN_HEIGHT:
            self.ball_y = 10.0
            self.dy = -abs(self.dy)
            self.stick = True

        for j, row in enumerate(self.blocks):
            for i, alive in enumerate(row):
                if not alive:
                    continue
                rect = self.block_rect(i, j)
                if rect.left <= self.ball_x < rect.right and rect.top <= self.ball_y < rect.bottom:
                    self.dy = -self.dy
                    row[i] = False