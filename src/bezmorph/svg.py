"""SVG output for shapes: path data and standalone documents."""

from __future__ import annotations

from typing import Iterable

import numpy as np

from bezmorph._config import DisplaySettings
from bezmorph.modeling.drawing2d import Shape
from bezmorph.validation import require_closed_shape


def _fmt(value: float, precision: int) -> str:
    text = f"{float(value):.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def _pair(xy: np.ndarray, precision: int) -> str:
    return f"{_fmt(xy[0], precision)} {_fmt(xy[1], precision)}"


def shape_to_path(shape: Shape, precision: int = 3) -> str:
    """Return SVG path data tracing the closed shape with one cubic per segment."""
    require_closed_shape(shape)
    curves = shape.to_beziers()
    parts = [f"M {_pair(curves[0].p0, precision)}"]
    for curve in curves:
        parts.append(
            f"C {_pair(curve.p1, precision)}, {_pair(curve.p2, precision)}, {_pair(curve.p3, precision)}"
        )
    parts.append("Z")
    return " ".join(parts)


def _handle_overlay(shape: Shape, settings: DisplaySettings, precision: int) -> list[str]:
    elements = []
    for point in shape:
        origin = point.xy
        for tip, color in (
            (point.handle_in_tip, settings.handle_in_color),
            (point.handle_out_tip, settings.handle_out_color),
        ):
            elements.append(
                f'<line x1="{_fmt(origin[0], precision)}" y1="{_fmt(origin[1], precision)}" '
                f'x2="{_fmt(tip[0], precision)}" y2="{_fmt(tip[1], precision)}" stroke="{color}" />'
            )
        elements.append(
            f'<circle cx="{_fmt(origin[0], precision)}" cy="{_fmt(origin[1], precision)}" '
            f'r="{_fmt(settings.point_size, precision)}" fill="{settings.stroke_color}" />'
        )
    return elements


def render_svg(
    shapes: Iterable[Shape],
    settings: DisplaySettings | None = None,
    show_handles: bool = False,
    precision: int = 3,
) -> str:
    """Return an SVG document drawing every shape on a square canvas."""
    settings = settings or DisplaySettings()
    size = _fmt(settings.canvas_size, precision)
    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}" viewBox="0 0 {size} {size}">',
    ]
    for shape in shapes:
        lines.append(
            f'  <path d="{shape_to_path(shape, precision)}" fill="none" stroke="{settings.stroke_color}" />'
        )
        if show_handles:
            lines.extend(f"  {element}" for element in _handle_overlay(shape, settings, precision))
    lines.append("</svg>")
    return "\n".join(lines) + "\n"


__all__ = ["render_svg", "shape_to_path"]
