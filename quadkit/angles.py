"""Angle helpers for smoothly turning a camera or sprite, in degrees."""

from __future__ import annotations

import math

_FULL_TURN = 360.0


def short_angle_dist(a0: float, a1: float) -> float:
    """Signed shortest rotation, in degrees, that takes `a0` to `a1`."""
    da = math.fmod(a1 - a0, _FULL_TURN)
    return math.fmod(2.0 * da, _FULL_TURN) - da


def angle_lerp(a0: float, a1: float, t: float) -> float:
    """Interpolate from `a0` towards `a1` along the shorter way round."""
    return a0 + short_angle_dist(a0, a1) * t


def wrap_rotation(angle: float) -> float:
    """Bring an angle that stepped just outside [0, 360) back by one turn."""
    if angle >= _FULL_TURN:
        return angle - _FULL_TURN
    if angle < 0.0:
        return angle + _FULL_TURN
    return angle