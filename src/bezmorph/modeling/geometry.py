"""Point, vector and angle math shared by the curve and morph modules.

Angles follow canvas conventions: radians measured from the +x axis, growing
clockwise because y grows downward.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, TypeVar

import numpy as np

from bezmorph.validation import InvalidParameterError

TAU = 2.0 * math.pi

T = TypeVar("T", float, np.ndarray)


def as_vec2(value: object) -> np.ndarray:
    """Return a float vector of shape (2,) for a point-like value."""
    xy = getattr(value, "xy", None)
    if xy is not None:
        return np.asarray(xy, dtype=float)
    return np.asarray(value, dtype=float).reshape(2)


def normalize_angle(angle: float) -> float:
    """Wrap an angle into [0, 2π)."""
    wrapped = math.fmod(float(angle), TAU)
    if wrapped < 0.0:
        wrapped += TAU
    # fmod of a tiny negative value can round up to exactly TAU.
    if wrapped >= TAU:
        wrapped -= TAU
    return wrapped


@dataclass(frozen=True)
class Handle:
    """Bezier control handle in polar form relative to its owning point."""

    angle: float = 0.0
    length: float = 0.0

    def __post_init__(self) -> None:
        angle = float(self.angle)
        length = float(self.length)
        if not math.isfinite(angle):
            raise InvalidParameterError("Handle angle must be finite.")
        if not math.isfinite(length) or length < 0.0:
            raise InvalidParameterError(f"Handle length must be a finite value >= 0, got {length}.")
        object.__setattr__(self, "angle", normalize_angle(angle))
        object.__setattr__(self, "length", length)

    def scaled(self, factor: float) -> "Handle":
        return Handle(angle=self.angle, length=self.length * float(factor))


def distance(a: object, b: object) -> float:
    return float(np.linalg.norm(as_vec2(a) - as_vec2(b)))


def lerp(t: float, a: T, b: T) -> T:
    """Linear interpolation from ``a`` to ``b`` for scalars or vectors.

    Written as ``(1 - t) * a + t * b`` so both endpoints are reproduced exactly.
    """
    return (1 - t) * a + t * b


def lerp_point(t: float, a: object, b: object) -> np.ndarray:
    return lerp(float(t), as_vec2(a), as_vec2(b))


def lerp_angle(t: float, a: float, b: float) -> float:
    """Interpolate two angles along the shorter arc between them."""
    a_norm = normalize_angle(a)
    b_norm = normalize_angle(b)
    if abs(a_norm - b_norm) > math.pi:
        if a_norm < b_norm:
            a_norm += TAU
        else:
            b_norm += TAU
    return normalize_angle(lerp(float(t), a_norm, b_norm))


def angle_between(a: float, b: float) -> float:
    """Return the unsigned shorter-arc distance between two angles."""
    diff = abs(normalize_angle(a) - normalize_angle(b))
    return min(diff, TAU - diff)


def to_cartesian(origin: object, handle: Handle) -> np.ndarray:
    """Expand a polar handle into the absolute position of its tip."""
    base = as_vec2(origin)
    return base + handle.length * np.array([math.cos(handle.angle), math.sin(handle.angle)])


def to_polar(origin: object, point: Sequence[float] | np.ndarray) -> Handle:
    """Collapse an absolute handle tip into a handle relative to ``origin``."""
    delta = as_vec2(point) - as_vec2(origin)
    dx, dy = float(delta[0]), float(delta[1])
    length = math.hypot(dx, dy)
    if length == 0.0:
        return Handle(angle=0.0, length=0.0)
    return Handle(angle=math.atan2(dy, dx), length=length)


__all__ = [
    "TAU",
    "Handle",
    "angle_between",
    "as_vec2",
    "distance",
    "lerp",
    "lerp_angle",
    "lerp_point",
    "normalize_angle",
    "to_cartesian",
    "to_polar",
]
