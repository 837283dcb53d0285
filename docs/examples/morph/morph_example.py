"""Shape morph example."""

from __future__ import annotations

from bezmorph.modeling import make_circle, make_ngon, morph_shapes


def build():
    start = make_circle(radius=250.0, center=(500.0, 500.0))
    end = make_ngon(sides=6, radius=300.0, center=(500.0, 500.0))
    return morph_shapes(0.5, start, end)
