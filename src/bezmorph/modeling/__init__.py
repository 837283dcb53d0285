"""Shape model, curve subdivision, equalization, correspondence and interpolation."""

from __future__ import annotations

from .geometry import Handle, distance, lerp, lerp_angle, to_cartesian, to_polar
from .drawing2d import Bezier2D, Point, Shape, make_circle, make_ngon, make_point, make_rect
from .curves import estimate_length, split_at, split_into
from .equalize import distribute_points, equalize
from .correspondence import align, find_best_offset, rotate_points
from .keyframe import Keyframe
from .morph import interpolate_between, morph_frames, morph_shapes, ping_pong

__all__ = [
    "Handle",
    "Point",
    "Shape",
    "Bezier2D",
    "Keyframe",
    "distance",
    "lerp",
    "lerp_angle",
    "to_cartesian",
    "to_polar",
    "make_point",
    "make_rect",
    "make_ngon",
    "make_circle",
    "estimate_length",
    "split_at",
    "split_into",
    "distribute_points",
    "equalize",
    "align",
    "find_best_offset",
    "rotate_points",
    "interpolate_between",
    "morph_shapes",
    "morph_frames",
    "ping_pong",
]
