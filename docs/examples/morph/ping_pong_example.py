"""Rounded square bouncing into a diamond and back."""

from __future__ import annotations

from bezmorph.modeling import Shape, interpolate_between, make_point, ping_pong

SIZE = 1000.0


def build(progress: float = 0.3):
    rounded = Shape(
        (
            make_point(0.65, 0.72, 135, 0.05, -45, 0.05, scale=SIZE),
            make_point(0.75, 0.72, -135, 0.05, 45, 0.05, scale=SIZE),
            make_point(0.75, 0.82, -45, 0.05, 135, 0.05, scale=SIZE),
            make_point(0.65, 0.82, 45, 0.05, 225, 0.05, scale=SIZE),
        )
    )
    diamond = Shape(
        (
            make_point(0.7, 0.72, 180, 0, 0, 0, scale=SIZE),
            make_point(0.75, 0.77, -90, 0, 90, 0, scale=SIZE),
            make_point(0.7, 0.82, 360 * 10, 0, 180, 0, scale=SIZE),
            make_point(0.65, 0.77, 90, 0, -90, 0, scale=SIZE),
        )
    )
    return interpolate_between(ping_pong(progress), rounded, diamond)
