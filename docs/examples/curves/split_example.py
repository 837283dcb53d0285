"""Split one curved segment into two to ten equal parametric pieces."""

from __future__ import annotations

from bezmorph.modeling import Shape, make_point, split_into

SIZE = 1000.0


def build():
    shapes = []
    for i, count in enumerate(range(2, 11)):
        start = make_point(0.15, 0.2 + i * 0.06, 30, 0.1, -30, 0.1, scale=SIZE)
        end = make_point(0.45, 0.2 + i * 0.06, 135, 0.1, 225, 0.1, scale=SIZE)
        shapes.append(Shape(tuple(split_into(count, start, end))))
    return shapes
