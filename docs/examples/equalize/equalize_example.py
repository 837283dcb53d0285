"""Equalize example: a three point blob subdivided to more and more points."""

from __future__ import annotations

from bezmorph.modeling import Shape, equalize, make_point

SIZE = 1000.0


def build():
    shapes = []
    for i in range(10):
        blob = Shape(
            (
                make_point(0.6, 0.2 + i * 0.05, -10, 0.1, -45, 0.03, scale=SIZE),
                make_point(0.7, 0.2 + i * 0.05 - 0.03, 180, 0.03, 0, 0.03, scale=SIZE),
                make_point(0.8, 0.2 + i * 0.05, -135, 0.03, 170, 0.1, scale=SIZE),
            )
        )
        shapes.append(equalize(i + 3, blob))
    return shapes
