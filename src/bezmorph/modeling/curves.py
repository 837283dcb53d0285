"""Length estimation and subdivision of single cubic Bezier segments.

A segment is described by its two end points: ``a`` contributes its outgoing
handle and ``b`` its incoming handle.
"""

from __future__ import annotations

from bezmorph.validation import InvalidParameterError, require_open_unit_interval

from .drawing2d import Point
from .geometry import distance, lerp, to_polar


def estimate_length(a: Point, b: Point) -> float:
    """Cheap closed-form length estimate of the segment from ``a`` to ``b``.

    Averages the control polygon length with the chord, which is enough to rank
    segments against each other.
    """
    chord = distance(a, b)
    handle_chord = distance(a.handle_out_tip, b.handle_in_tip)
    return (chord + handle_chord + a.handle_out.length + b.handle_in.length) / 2.0


def split_at(t: float, a: Point, b: Point) -> tuple[Point, Point, Point]:
    """Split the segment ``a -> b`` at parameter ``t``.

    Returns the shortened copy of ``a``, the new on-curve point and the
    shortened copy of ``b``.
    """
    t = require_open_unit_interval(t, "split parameter")

    c = a.with_handles(handle_out=a.handle_out.scaled(t))
    e = b.with_handles(handle_in=b.handle_in.scaled(1.0 - t))

    f = lerp(t, a.handle_out_tip, b.handle_in_tip)
    g = lerp(t, c.handle_out_tip, f)
    h = lerp(1.0 - t, e.handle_in_tip, f)
    d_xy = lerp(t, g, h)

    d = Point(
        x=float(d_xy[0]),
        y=float(d_xy[1]),
        handle_in=to_polar(d_xy, g),
        handle_out=to_polar(d_xy, h),
    )
    return c, d, e


def split_into(count: int, a: Point, b: Point) -> list[Point]:
    """Split the segment ``a -> b`` into ``count`` sub-segments of equal parametric share.

    Returns ``count + 1`` points, starting with (a copy of) ``a`` and ending with
    (a copy of) ``b``. Each step splits the remaining tail at ``1/remaining``.
    """
    if int(count) != count or count < 1:
        raise InvalidParameterError(f"count must be a positive integer, got {count}.")
    count = int(count)
    if count == 1:
        return [a, b]

    result: list[Point] = []
    head, tail = a, b
    remaining = count
    while remaining >= 2:
        first, middle, tail = split_at(1.0 / remaining, head, tail)
        result.append(first)
        head = middle
        remaining -= 1
    result.extend([head, tail])
    return result


__all__ = ["estimate_length", "split_at", "split_into"]
