"""Asteroids: a ship that thrusts, turns and shoots, and rocks that split when hit."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Optional

from quadkit.geometry import Vec2

SHIP_HEIGHT = 25.0
SHIP_BASE = 22.0
MAX_SHIP_SPEED = 5.0
THRUST = 1.0 / 3.0
FRICTION = 100.0
TURN_STEP = 5.0
SHOT_COOLDOWN = 0.5
BULLET_SPEED = 7.0
BULLET_LIFETIME = 1.5
ASTEROID_COUNT = 10
SPLIT_SHRINK = 0.8


def wrap_around(pos: Vec2, width: float, height: float) -> Vec2:
    """Move a point that left the screen to the opposite edge."""
    x, y = pos.x, pos.y
    if x > width:
        x = 0.0
    if x < 0.0:
        x = width
    if y > height:
        y = 0.0
    if y < 0.0:
        y = height
    return Vec2(x, y)


@dataclass
class Ship:
    """The player's ship; `rot` is in degrees, 0 pointing up the screen."""

    pos: Vec2
    rot: float = 0.0
    vel: Vec2 = field(default_factory=Vec2)


@dataclass
class Bullet:
    """A shot fired at time `shot_at`."""

    pos: Vec2
    vel: Vec2
    shot_at: float
    collided: bool = False


@dataclass
class Asteroid:
    """A drifting, spinning polygonal rock."""

    pos: Vec2
    vel: Vec2
    rot: float
    rot_speed: float
    size: float
    sides: int
    collided: bool = False


def _heading(rotation: float) -> Vec2:
    return Vec2(math.sin(rotation), -math.cos(rotation))


class AsteroidsGame:
    """Game state advanced one frame at a time by `step`."""

    def __init__(
        self,
        width: float = 800.0,
        height: float = 600.0,
        rng: Optional[random.Random] = None,
        now: float = 0.0,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("screen dimensions must be positive")
        self.width = width
        self.height = height
        self._rng = rng if rng is not None else random.Random()
        self.last_shot = now
        self.reset()

    @property
    def center(self) -> Vec2:
        return Vec2(self.width / 2.0, self.height / 2.0)

    @property
    def won(self) -> bool:
        """True once the game is over because every asteroid was destroyed."""
        return self.game_over and not self.asteroids

    def _random_direction(self) -> Vec2:
        while True:
            v = Vec2(self._rng.uniform(-1.0, 1.0), self._rng.uniform(-1.0, 1.0))
            if v.length() > 0.0:
                return v.normalize()

    def reset(self) -> None:
        """Start a new round: ship in the centre, a ring of fresh asteroids."""
        self.ship = Ship(pos=self.center)
        self.bullets: list[Bullet] = []
        self.game_over = False
        short_side = min(self.width, self.height)
        rng = self._rng
        self.asteroids: list[Asteroid] = [
            Asteroid(
                pos=self.center + self._random_direction() * short_side / 2.0,
                vel=Vec2(rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0)),
                rot=0.0,
                rot_speed=rng.uniform(-2.0, 2.0),
                size=short_side / 10.0,
                sides=rng.randrange(3, 8),
            )
            for _ in range(ASTEROID_COUNT)
        ]

    def _split(self, asteroid: Asteroid, bullet: Bullet) -> list[Asteroid]:
        rng = self._rng
        directions = (
            Vec2(bullet.vel.y, -bullet.vel.x),
            Vec2(-bullet.vel.y, bullet.vel.x),
        )
        return [
            Asteroid(
                pos=asteroid.pos,
                vel=direction.normalize() * rng.uniform(1.0, 3.0),
                rot=rng.uniform(0.0, 360.0),
                rot_speed=rng.uniform(-2.0, 2.0),
                size=asteroid.size * SPLIT_SHRINK,
                sides=asteroid.sides - 1,
            )
            for direction in directions
        ]

    def step(
        self,
        now: float,
        forward: bool = False,
        shoot: bool = False,
        left: bool = False,
        right: bool = False,
    ) -> bool:
        """Advance one frame at time `now`; returns whether the game is over."""
        if self.game_over:
            return True

        ship = self.ship
        rotation = math.radians(ship.rot)

        acc = -ship.vel / FRICTION
        if forward:
            acc = _heading(rotation) * THRUST

        if shoot and now - self.last_shot > SHOT_COOLDOWN:
            heading = _heading(rotation)
            self.bullets.append(
                Bullet(
                    pos=ship.pos + heading * SHIP_HEIGHT / 2.0,
                    vel=heading * BULLET_SPEED,
                    shot_at=now,
                )
            )
            self.last_shot = now

        if right:
            ship.rot += TURN_STEP
        elif left:
            ship.rot -= TURN_STEP

        ship.vel = ship.vel + acc
        if ship.vel.length() > MAX_SHIP_SPEED:
            ship.vel = ship.vel.normalize() * MAX_SHIP_SPEED
        ship.pos = wrap_around(ship.pos + ship.vel, self.width, self.height)

        for bullet in self.bullets:
            bullet.pos = bullet.pos + bullet.vel
        for asteroid in self.asteroids:
            asteroid.pos = wrap_around(asteroid.pos + asteroid.vel, self.width, self.height)
            asteroid.rot += asteroid.rot_speed

        self.bullets = [b for b in self.bullets if b.shot_at + BULLET_LIFETIME > now]

        fragments: list[Asteroid] = []
        for asteroid in self.asteroids:
            if (asteroid.pos - ship.pos).length() < asteroid.size + SHIP_HEIGHT / 3.0:
                self.game_over = True
                break
            for bullet in self.bullets:
                if (asteroid.pos - bullet.pos).length() < asteroid.size:
                    asteroid.collided = True
                    bullet.collided = True
                    if asteroid.sides > 3:
                        fragments.extend(self._split(asteroid, bullet))
                    break

        self.bullets = [
            b for b in self.bullets if b.shot_at + BULLET_LIFETIME > now and not b.collided
        ]
        self.asteroids = [a for a in self.asteroids if not a.collided]
        self.asteroids.extend(fragments)

        if not self.asteroids:
            self.game_over = True
        return self.game_over

    def ship_vertices(self) -> tuple[Vec2, Vec2, Vec2]:
        """The ship's triangle: nose, then the two rear corners."""
        pos = self.ship.pos
        rotation = math.radians(self.ship.rot)
        sin, cos = math.sin(rotation), math.cos(rotation)
        half_h = SHIP_HEIGHT / 2.0
        half_b = SHIP_BASE / 2.0
        nose = Vec2(pos.x + sin * half_h, pos.y - cos * half_h)
        rear_left = Vec2(
            pos.x - cos * half_b - sin * half_h,
            pos.y - sin * half_b + cos * half_h,
        )
        rear_right = Vec2(
            pos.x + cos * half_b - sin * half_h,
            pos.y + sin * half_b + cos * half_h,
        )
        return nose, rear_left, rear_right