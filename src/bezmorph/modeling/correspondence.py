from __future__ import annotations

import logging
import math
from typing import Sequence, TypeVar

import numpy as np

from bezmorph.validation import require_same_length

from .drawing2d import Shape

logger = logging.getLogger(__name__)

P = TypeVar("P")


def _coords_array(points: Shape | Sequence[Sequence[float]] | np.ndarray) -> np.ndarray:
    if isinstance(points, Shape):
        return points.coords()
    arr = np.asarray([getattr(p, "xy", p) for p in points], dtype=float)
    return arr.reshape(-1, 2)


def find_best_offset(
    a: Shape | Sequence[Sequence[float]] | np.ndarray,
    b: Shape | Sequence[Sequence[float]] | np.ndarray,
) -> int:
    """Return the rotation of ``b`` whose points lie closest to ``a`` in total.

    The result ``offset`` minimises ``sum(distance(a[j], b[(j + offset) % m]))``.
    Only cyclic rotations are considered; the smallest optimal offset wins.
    """
    coords_a = _coords_array(a)
    coords_b = _coords_array(b)
    require_same_length(coords_a, coords_b)
    count = coords_a.shape[0]

    best_total = math.inf
    best_offset = 0
    for offset in range(count):
        total = 0.0
        for j in range(count):
            delta = coords_a[j] - coords_b[(j + offset) % count]
            total += math.hypot(float(delta[0]), float(delta[1]))
            if total > best_total:
                break
        if total < best_total:
            best_total = total
            best_offset = offset
    logger.debug("Best rotation offset %d (total distance %.6g)", best_offset, best_total)
    return best_offset


def rotate_points(points: Sequence[P], offset: int) -> list[P]:
    """Return ``points`` re-indexed so that ``result[j] == points[(j + offset) % m]``."""
    items = list(points)
    if not items:
        return items
    k = int(offset) % len(items)
    return items[k:] + items[:k]


def align(reference: Shape, shape: Shape) -> Shape:
    """Rotate ``shape`` so its point order best matches ``reference``."""
    return shape.rotated(find_best_offset(reference, shape))


__all__ = ["align", "find_best_offset", "rotate_points"]
