"""Configuration of a particle emitter: spawn regions, particle meshes, atlases."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, NamedTuple, Optional, Union

from quadkit.curves import ColorCurve, Curve
from quadkit.geometry import Vec2, polar_to_cartesian

_VERTEX_STRIDE = 9  # position (3), uv (2), colour (4)


class Mesh(NamedTuple):
    """Interleaved vertex data (position, uv, colour) and triangle indices."""

    vertices: tuple[float, ...]
    indices: tuple[int, ...]


@dataclass(frozen=True)
class PointShape:
    """Every particle is emitted from the emitter position itself."""

    def gen_random_point(self, rng: random.Random) -> Vec2:
        return Vec2(0.0, 0.0)


@dataclass(frozen=True)
class RectShape:
    """Particles are emitted anywhere inside a rectangle centred on the emitter."""

    width: float
    height: float

    def gen_random_point(self, rng: random.Random) -> Vec2:
        return Vec2(
            rng.uniform(-self.width / 2.0, self.width / 2.0),
            rng.uniform(-self.height / 2.0, self.height / 2.0),
        )


@dataclass(frozen=True)
class SphereShape:
    """Particles are emitted uniformly inside a disc centred on the emitter."""

    radius: float

    def gen_random_point(self, rng: random.Random) -> Vec2:
        rho = math.sqrt(rng.uniform(0.0, self.radius * self.radius))
        phi = rng.uniform(0.0, math.pi * 2.0)
        return polar_to_cartesian(rho, phi)


EmissionShape = Union[PointShape, RectShape, SphereShape]


@dataclass(frozen=True)
class RectangleParticle:
    """A quad particle, stretched horizontally by `aspect_ratio`."""

    aspect_ratio: float = 1.0

    def mesh(self) -> Mesh:
        a = self.aspect_ratio
        vertices = (
            -a, -1.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0,
            a, -1.0, 0.0, 1.0, 0.0, 1.0, 1.0, 1.0, 1.0,
            a, 1.0, 0.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
            -a, 1.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0, 1.0,
        )
        return Mesh(vertices, (0, 1, 2, 0, 2, 3))


@dataclass(frozen=True)
class CircleParticle:
    """A unit disc particle built as a triangle fan."""

    subdivisions: int

    def mesh(self) -> Mesh:
        if self.subdivisions <= 0:
            raise ValueError("a circle needs at least one subdivision")
        vertices: list[float] = [0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0]
        indices: list[int] = []
        for i in range(self.subdivisions + 1):
            angle = i / self.subdivisions * math.pi * 2.0
            rx, ry = math.cos(angle), math.sin(angle)
            vertices.extend((rx, ry, 0.0, rx, ry, 1.0, 1.0, 1.0, 1.0))
            if i != self.subdivisions:
                indices.extend((0, i + 1, i + 2))
        return Mesh(tuple(vertices), tuple(indices))


@dataclass(frozen=True)
class CustomMeshParticle:
    """A particle with caller-supplied interleaved vertices and indices."""

    vertices: tuple[float, ...]
    indices: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertices", tuple(self.vertices))
        object.__setattr__(self, "indices", tuple(self.indices))
        if len(self.vertices) % _VERTEX_STRIDE:
            raise ValueError(
                f"vertex data length must be a multiple of {_VERTEX_STRIDE}"
            )

    def mesh(self) -> Mesh:
        return Mesh(self.vertices, self.indices)


ParticleShape = Union[RectangleParticle, CircleParticle, CustomMeshParticle]


class BlendMode(Enum):
    """How overlapping particles are combined."""

    ALPHA = auto()
    """Colours are blended by their alpha channel."""
    ADDITIVE = auto()
    """Colours are added to each other."""


@dataclass(frozen=True)
class AtlasConfig:
    """Sprite-sheet layout: `n` columns, `m` rows, animated over a frame range."""

    n: int
    m: int
    start_index: int
    end_index: int

    @classmethod
    def from_range(
        cls,
        n: int,
        m: int,
        start: Optional[int] = None,
        end: Optional[int] = None,
        end_inclusive: bool = False,
    ) -> AtlasConfig:
        """Build from a frame range; a missing end means the whole sheet."""
        if n <= 0 or m <= 0:
            raise ValueError("atlas dimensions must be positive")
        start_index = 0 if start is None else start
        if end is None:
            end_index = n * m
        elif end_inclusive:
            if end == 0:
                raise ValueError("inclusive end frame must be positive")
            end_index = end - 1
        else:
            end_index = end
        return cls(n, m, start_index, end_index)

    def frame_uv(self, frame: int) -> tuple[float, float, float, float]:
        """Texture rectangle (u, v, width, height) of a frame in the sheet."""
        x = frame % self.n
        y = frame // self.n
        return (x / self.n, y / self.m, 1.0 / self.n, 1.0 / self.m)


@dataclass(frozen=True)
class ParticleMaterial:
    """Custom vertex and fragment shader sources for particles."""

    vertex: str
    fragment: str


@dataclass
class EmitterConfig:
    """All the parameters that control how an emitter spawns and shapes particles."""

    local_coords: bool = False
    emission_shape: EmissionShape = field(default_factory=PointShape)
    one_shot: bool = False
    lifetime: float = 1.0
    lifetime_randomness: float = 0.0
    explosiveness: float = 0.0
    amount: int = 8
    shape: ParticleShape = field(default_factory=lambda: RectangleParticle(1.0))
    emitting: bool = True
    initial_direction: Vec2 = field(default_factory=lambda: Vec2(0.0, -1.0))
    initial_direction_spread: float = 0.0
    initial_velocity: float = 50.0
    initial_velocity_randomness: float = 0.0
    linear_accel: float = 0.0
    initial_rotation: float = 0.0
    initial_rotation_randomness: float = 0.0
    initial_angular_velocity: float = 0.0
    initial_angular_velocity_randomness: float = 0.0
    angular_accel: float = 0.0
    angular_damping: float = 0.0
    size: float = 10.0
    size_randomness: float = 0.0
    size_curve: Optional[Curve] = None
    blend_mode: BlendMode = BlendMode.ALPHA
    colors_curve: ColorCurve = field(default_factory=ColorCurve)
    gravity: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))
    texture: Any = None
    atlas: Optional[AtlasConfig] = None
    material: Optional[ParticleMaterial] = None
    post_processing: bool = False