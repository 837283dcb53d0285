from __future__ import annotations

from typing import Sized

import numpy as np


class MorphError(ValueError):
    """Base class for caller errors raised by the morphing engine."""


class InsufficientPointsError(MorphError):
    """Raised when a closed shape has fewer than three points."""


class CannotRemovePointsError(MorphError):
    """Raised when equalization is asked to shrink a shape."""


class ShapeLengthMismatchError(MorphError):
    """Raised when two shapes must have the same number of points but do not."""


class InvalidParameterError(MorphError):
    """Raised when a numeric parameter lies outside its allowed range."""


MIN_CLOSED_POINTS = 3


def require_closed_shape(points: Sized, label: str = "shape") -> None:
    if len(points) < MIN_CLOSED_POINTS:
        raise InsufficientPointsError(
            f"{label} needs at least {MIN_CLOSED_POINTS} points to form a closed curve, got {len(points)}."
        )


def require_same_length(a: Sized, b: Sized) -> None:
    if len(a) != len(b):
        raise ShapeLengthMismatchError(f"Shapes have different numbers of points ({len(a)} != {len(b)}).")


def require_unit_interval(value: float, label: str = "t") -> float:
    value = float(value)
    if not np.isfinite(value) or value < 0.0 or value > 1.0:
        raise InvalidParameterError(f"{label} must be in [0, 1], got {value}.")
    return value


def require_open_unit_interval(value: float, label: str = "t") -> float:
    value = float(value)
    if not np.isfinite(value) or value <= 0.0 or value >= 1.0:
        raise InvalidParameterError(f"{label} must be strictly between 0 and 1, got {value}.")
    return value
