"""Example bezmorph scene: a square halfway to a circle."""

from __future__ import annotations

from bezmorph.modeling import align, equalize, interpolate_between, make_circle, make_rect


def build():
    """Equalize, align and blend the two outlines step by step."""

    square = make_rect(size=(500.0, 500.0), center=(500.0, 500.0))
    circle = make_circle(radius=250.0, center=(500.0, 500.0), points=8)
    square = equalize(len(circle), square)
    circle = align(square, circle)
    return [square, interpolate_between(0.5, square, circle), circle]
