from __future__ import annotations

import logging
from typing import Sequence

from bezmorph.validation import CannotRemovePointsError, InvalidParameterError, require_closed_shape

from .curves import estimate_length, split_into
from .drawing2d import Point, Shape

logger = logging.getLogger(__name__)


def distribute_points(lengths: Sequence[float], extra: int) -> list[int]:
    """Allot ``extra`` additional points across segments of the given lengths.

    Every segment starts with a divisor of one. Each extra point goes to the
    segment whose ``length / divisor`` is currently largest; ties go to the
    longer segment, then to the lower index.
    """
    if extra < 0:
        raise InvalidParameterError(f"extra must be >= 0, got {extra}.")
    lengths = [float(v) for v in lengths]
    divisors = [1] * len(lengths)
    if not lengths:
        return divisors
    sizes = list(lengths)
    for _ in range(int(extra)):
        best = 0
        for j in range(1, len(sizes)):
            if sizes[j] > sizes[best]:
                best = j
            elif sizes[j] == sizes[best] and lengths[j] > lengths[best]:
                best = j
        divisors[best] += 1
        sizes[best] = lengths[best] / divisors[best]
    return divisors


def equalize(count: int, shape: Shape | Sequence[Point]) -> Shape:
    """Raise the point count of ``shape`` to ``count`` by subdividing its segments.

    Original points keep their position, order and handle directions; new
    points are only inserted between original neighbours, with more of them on
    longer segments.
    """
    shape = shape if isinstance(shape, Shape) else Shape(tuple(shape))
    points = shape.points
    require_closed_shape(points)
    n = len(points)
    if int(count) != count:
        raise InvalidParameterError(f"count must be an integer, got {count}.")
    count = int(count)
    if count < n:
        raise CannotRemovePointsError(f"Cannot reduce a shape from {n} to {count} points.")
    if count == n:
        return Shape(points)

    lengths = [estimate_length(points[i], points[(i + 1) % n]) for i in range(n)]
    divisors = distribute_points(lengths, count - n)
    logger.debug("Equalizing %d -> %d points with divisors %s", n, count, divisors)

    out: list[Point] = []
    for i in range(n):
        # The previous segment's last point is this segment's first; it carries
        # the incoming handle produced by that split.
        current = out.pop() if out else points[i]
        nxt = points[(i + 1) % n]
        out.extend(split_into(divisors[i], current, nxt))

    closing = out.pop()
    out[0] = out[0].with_handles(handle_in=closing.handle_in)
    return Shape(tuple(out))


__all__ = ["distribute_points", "equalize"]
