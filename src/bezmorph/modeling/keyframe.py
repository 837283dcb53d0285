from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from bezmorph.validation import require_closed_shape

from .drawing2d import Shape

EasingFunc = Callable[[float], float]


def linear(t: float) -> float:
    return t


def ease_in_quad(t: float) -> float:
    return t * t


def ease_out_quad(t: float) -> float:
    return t * (2.0 - t)


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4.0 * t**3
    return 1.0 - (-2.0 * t + 2.0) ** 3 / 2.0


def smoothstep(t: float) -> float:
    return t * t * (3.0 - 2.0 * t)


@dataclass(frozen=True)
class Keyframe:
    """A shape together with the easing used when entering and leaving it."""

    shape: Shape
    ease_in: EasingFunc = linear
    ease_out: EasingFunc = linear

    def __post_init__(self) -> None:
        if not isinstance(self.shape, Shape):
            object.__setattr__(self, "shape", Shape(tuple(self.shape)))
        require_closed_shape(self.shape, "keyframe shape")


__all__ = [
    "EasingFunc",
    "Keyframe",
    "ease_in_out_cubic",
    "ease_in_quad",
    "ease_out_quad",
    "linear",
    "smoothstep",
]
