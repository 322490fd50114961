"""Key-point curves and colour gradients used to shape particles over their lifetime."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class Interpolation(Enum):
    """How the points between two key points of a curve are built."""

    LINEAR = auto()
    BEZIER = auto()


@dataclass(frozen=True)
class BatchedCurve:
    """A curve sampled at evenly spaced steps, ready for fast lookups."""

    points: tuple[float, ...]

    def get(self, t: float) -> float:
        """Value at `t` in [0, 1], linearly blended between neighbouring samples."""
        if not self.points:
            raise ValueError("cannot sample an empty curve")
        last = len(self.points) - 1
        t_scaled = t * len(self.points)
        previous_ix = min(max(int(t_scaled), 0), last)
        next_ix = min(previous_ix + 1, last)
        previous = self.points[previous_ix]
        following = self.points[next_ix]
        return previous + (following - previous) * (t_scaled - previous_ix)


@dataclass
class Curve:
    """A piecewise curve given by (x, y) key points with x running from 0 to 1."""

    points: list[tuple[float, float]] = field(default_factory=list)
    interpolation: Interpolation = Interpolation.LINEAR
    resolution: int = 20

    def batch(self) -> BatchedCurve:
        """Sample the curve every 1/resolution along x."""
        if self.interpolation is Interpolation.BEZIER:
            raise ValueError("bezier interpolation is unsupported; use linear")
        step = 1.0 / self.resolution
        x = 0.0
        samples: list[float] = []
        for (start_x, start_y), (end_x, end_y) in zip(self.points, self.points[1:]):
            while x <= end_x:
                t = (x - start_x) / (end_x - start_x)
                samples.append(start_y + (end_y - start_y) * t)
                x += step
        return BatchedCurve(tuple(samples))


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components in [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)

    def _mix(self, other: Color, t: float) -> Color:
        return Color(
            *(a * (1.0 - t) + b * t for a, b in zip(self.to_tuple(), other.to_tuple()))
        )


WHITE = Color(1.0, 1.0, 1.0, 1.0)


@dataclass(frozen=True)
class ColorCurve:
    """A three-stop colour gradient: start, middle and end of a lifetime."""

    start: Color = WHITE
    mid: Color = WHITE
    end: Color = WHITE

    def at(self, t: float) -> Color:
        """Colour at lifetime fraction `t`: start to mid over [0, 0.5), mid to end after."""
        if t < 0.5:
            return self.start._mix(self.mid, t * 2.0)
        return self.mid._mix(self.end, (t - 0.5) * 2.0)