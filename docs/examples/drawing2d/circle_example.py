"""Bezier circle built from four smooth segments."""

from __future__ import annotations

from bezmorph.modeling import make_circle


def build():
    return make_circle(radius=250.0, center=(500.0, 500.0), points=4)
