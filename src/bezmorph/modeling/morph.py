from __future__ import annotations

from typing import Iterator, Sequence

import numpy as np

from bezmorph.validation import InvalidParameterError, require_same_length, require_unit_interval

from .correspondence import align
from .drawing2d import Point, Shape
from .equalize import equalize
from .geometry import Handle, lerp, lerp_angle
from .keyframe import EasingFunc, linear


def _as_shape(value: Shape | Sequence[Point]) -> Shape:
    return value if isinstance(value, Shape) else Shape(tuple(value))


def _lerp_handle(t: float, a: Handle, b: Handle) -> Handle:
    return Handle(angle=lerp_angle(t, a.angle, b.angle), length=lerp(t, a.length, b.length))


def interpolate_between(
    t: float,
    start: Shape | Sequence[Point],
    end: Shape | Sequence[Point],
) -> Shape:
    """Blend two shapes with the same point count, point by point.

    Positions and handle lengths are interpolated linearly; handle angles turn
    along the shorter arc.
    """
    start = _as_shape(start)
    end = _as_shape(end)
    require_same_length(start, end)
    t = require_unit_interval(t)

    points = []
    for a, b in zip(start, end):
        points.append(
            Point(
                x=lerp(t, a.x, b.x),
                y=lerp(t, a.y, b.y),
                handle_in=_lerp_handle(t, a.handle_in, b.handle_in),
                handle_out=_lerp_handle(t, a.handle_out, b.handle_out),
            )
        )
    return Shape(tuple(points))


def prepare_pair(start: Shape | Sequence[Point], end: Shape | Sequence[Point]) -> tuple[Shape, Shape]:
    """Equalize both shapes to a common point count and align ``end`` to ``start``."""
    start = _as_shape(start)
    end = _as_shape(end)
    count = max(len(start), len(end))
    start = equalize(count, start)
    end = equalize(count, end)
    return start, align(start, end)


def morph_shapes(
    t: float,
    start: Shape | Sequence[Point],
    end: Shape | Sequence[Point],
) -> Shape:
    """Morph between two shapes that may differ in point count."""
    a, b = prepare_pair(start, end)
    return interpolate_between(t, a, b)


def morph_frames(
    start: Shape | Sequence[Point],
    end: Shape | Sequence[Point],
    frames: int,
    easing: EasingFunc = linear,
) -> Iterator[Shape]:
    """Yield ``frames`` shapes from ``start`` to ``end`` inclusive."""
    frames = int(frames)
    if frames < 2:
        raise InvalidParameterError("frames must be >= 2.")
    a, b = prepare_pair(start, end)
    for progress in np.linspace(0.0, 1.0, frames):
        t = min(max(float(easing(float(progress))), 0.0), 1.0)
        yield interpolate_between(t, a, b)


def advance_progress(progress: float, speed: float) -> float:
    """Step a wrapping progress value by ``speed`` thousandths."""
    return (float(progress) + float(speed) / 1000.0) % 1.0


def ping_pong(progress: float) -> float:
    """Map a wrapping progress in [0, 1) to a forward-then-back ``t``."""
    progress = require_unit_interval(progress, "progress")
    if progress < 0.5:
        return 2.0 * progress
    return 2.0 - 2.0 * progress


__all__ = [
    "advance_progress",
    "interpolate_between",
    "morph_frames",
    "morph_shapes",
    "ping_pong",
    "prepare_pair",
]
