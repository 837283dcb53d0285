from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator, Sequence, overload

import numpy as np

from bezmorph.validation import InvalidParameterError

from .geometry import Handle, angle_between, to_cartesian


def _to_vec2(value: Sequence[float]) -> np.ndarray:
    arr = np.asarray(value, dtype=float).reshape(2)
    return arr


def _require_vec2(value: Sequence[float], label: str) -> np.ndarray:
    try:
        arr = np.asarray(value, dtype=float).reshape(2)
    except Exception as exc:
        raise InvalidParameterError(f"{label} must be a 2D coordinate.") from exc
    if not np.all(np.isfinite(arr)):
        raise InvalidParameterError(f"{label} must be finite.")
    return arr


@dataclass(frozen=True)
class Point:
    """On-curve point with the incoming and outgoing handles of its two segments."""

    x: float
    y: float
    handle_in: Handle = field(default_factory=Handle)
    handle_out: Handle = field(default_factory=Handle)

    def __post_init__(self) -> None:
        x, y = _require_vec2((self.x, self.y), "point")
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))

    @property
    def xy(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    @property
    def handle_in_tip(self) -> np.ndarray:
        return to_cartesian(self, self.handle_in)

    @property
    def handle_out_tip(self) -> np.ndarray:
        return to_cartesian(self, self.handle_out)

    def with_handles(self, handle_in: Handle | None = None, handle_out: Handle | None = None) -> "Point":
        return replace(
            self,
            handle_in=self.handle_in if handle_in is None else handle_in,
            handle_out=self.handle_out if handle_out is None else handle_out,
        )


@dataclass(frozen=True)
class Bezier2D:
    p0: np.ndarray
    p1: np.ndarray
    p2: np.ndarray
    p3: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "p0", _require_vec2(self.p0, "p0"))
        object.__setattr__(self, "p1", _require_vec2(self.p1, "p1"))
        object.__setattr__(self, "p2", _require_vec2(self.p2, "p2"))
        object.__setattr__(self, "p3", _require_vec2(self.p3, "p3"))

    def point_at(self, t: float) -> np.ndarray:
        return self.sample_at(np.array([float(t)]))[0]

    def sample_at(self, t: np.ndarray) -> np.ndarray:
        t = np.asarray(t, dtype=float).reshape(-1, 1)
        a = (1 - t) ** 3
        b = 3 * (1 - t) ** 2 * t
        c = 3 * (1 - t) * t**2
        d = t**3
        return a * self.p0 + b * self.p1 + c * self.p2 + d * self.p3

    def sample(self, samples: int) -> np.ndarray:
        samples = max(int(samples), 2)
        return self.sample_at(np.linspace(0.0, 1.0, samples, endpoint=True))


@dataclass(frozen=True)
class Shape:
    """Closed outline made of cubic Bezier segments between consecutive points.

    Segment ``i`` runs from ``points[i]`` (using its outgoing handle) to
    ``points[(i + 1) % n]`` (using its incoming handle), so the last point
    connects back to the first.
    """

    points: tuple[Point, ...] = ()

    def __post_init__(self) -> None:
        pts = tuple(self.points)
        for idx, pt in enumerate(pts):
            if not isinstance(pt, Point):
                raise InvalidParameterError(f"Shape entry {idx} is not a Point.")
        object.__setattr__(self, "points", pts)

    @classmethod
    def from_coords(cls, coords: Iterable[Sequence[float]]) -> "Shape":
        """Build a shape of straight segments (all handles zero length)."""
        pts = [_require_vec2(c, "point") for c in coords]
        return cls(tuple(Point(float(p[0]), float(p[1])) for p in pts))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    @overload
    def __getitem__(self, index: int) -> Point: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Point, ...]: ...

    def __getitem__(self, index):
        return self.points[index]

    def coords(self) -> np.ndarray:
        if not self.points:
            return np.zeros((0, 2), dtype=float)
        return np.array([[p.x, p.y] for p in self.points], dtype=float)

    def segments(self) -> list[tuple[Point, Point]]:
        n = len(self.points)
        return [(self.points[i], self.points[(i + 1) % n]) for i in range(n)]

    def rotated(self, offset: int) -> "Shape":
        """Return the same outline starting at ``points[offset]``."""
        n = len(self.points)
        if n == 0:
            return self
        k = int(offset) % n
        return Shape(self.points[k:] + self.points[:k])

    def to_beziers(self) -> list[Bezier2D]:
        return [
            Bezier2D(p0=a.xy, p1=a.handle_out_tip, p2=b.handle_in_tip, p3=b.xy)
            for a, b in self.segments()
        ]

    def sample(self, bezier_samples: int = 32) -> np.ndarray:
        """Flatten the outline into a closed polyline (first point repeated last)."""
        if not self.points:
            return np.zeros((0, 2), dtype=float)
        points = []
        for idx, curve in enumerate(self.to_beziers()):
            seg_points = curve.sample(bezier_samples)
            if idx > 0:
                seg_points = seg_points[1:]
            points.append(seg_points)
        return np.vstack(points)

    def isclose(self, other: "Shape", atol: float = 1e-9) -> bool:
        """Compare positions and handles, treating handle angles modulo 2π."""
        if len(self) != len(other):
            return False
        for a, b in zip(self.points, other.points):
            if not np.allclose(a.xy, b.xy, atol=atol, rtol=0.0):
                return False
            for ha, hb in ((a.handle_in, b.handle_in), (a.handle_out, b.handle_out)):
                if abs(ha.length - hb.length) > atol:
                    return False
                # A zero-length handle has no meaningful direction.
                if max(ha.length, hb.length) > atol and angle_between(ha.angle, hb.angle) > atol:
                    return False
        return True


def make_point(
    x: float,
    y: float,
    in_angle_deg: float = 0.0,
    in_length: float = 0.0,
    out_angle_deg: float = 0.0,
    out_length: float = 0.0,
    scale: float = 1.0,
) -> Point:
    """Author a point in unit coordinates with handle angles in degrees."""
    scale = float(scale)
    return Point(
        x=float(x) * scale,
        y=float(y) * scale,
        handle_in=Handle(angle=math.radians(in_angle_deg), length=float(in_length) * scale),
        handle_out=Handle(angle=math.radians(out_angle_deg), length=float(out_length) * scale),
    )


def make_rect(
    size: Sequence[float] = (1.0, 1.0),
    center: Sequence[float] = (0.0, 0.0),
) -> Shape:
    sx, sy = float(size[0]), float(size[1])
    if sx <= 0 or sy <= 0:
        raise InvalidParameterError("size must be positive.")
    cx, cy = _to_vec2(center)
    hx, hy = sx / 2.0, sy / 2.0
    points = [
        (cx - hx, cy - hy),
        (cx + hx, cy - hy),
        (cx + hx, cy + hy),
        (cx - hx, cy + hy),
    ]
    return Shape.from_coords(points)


def make_ngon(
    sides: int = 6,
    radius: float = 0.5,
    center: Sequence[float] = (0.0, 0.0),
    *,
    start_angle_deg: float = 0.0,
) -> Shape:
    sides = int(sides)
    if sides < 3:
        raise InvalidParameterError("sides must be >= 3.")
    radius = float(radius)
    if radius <= 0:
        raise InvalidParameterError("radius must be positive.")
    center_vec = _to_vec2(center)
    angles = np.linspace(0.0, 2 * np.pi, sides, endpoint=False) + np.deg2rad(start_angle_deg)
    points = np.column_stack([np.cos(angles), np.sin(angles)]) * radius
    return Shape.from_coords(points + center_vec)


def make_circle(
    radius: float = 0.5,
    center: Sequence[float] = (0.0, 0.0),
    points: int = 4,
) -> Shape:
    """Approximate a circle with ``points`` smooth cubic segments."""
    if radius <= 0:
        raise InvalidParameterError("radius must be positive.")
    points = int(points)
    if points < 3:
        raise InvalidParameterError("points must be >= 3.")
    radius = float(radius)
    cx, cy = _to_vec2(center)
    handle_length = 4.0 / 3.0 * math.tan(math.pi / (2 * points)) * radius
    result = []
    for k in range(points):
        theta = 2 * math.pi * k / points
        result.append(
            Point(
                x=cx + radius * math.cos(theta),
                y=cy + radius * math.sin(theta),
                handle_in=Handle(angle=theta - math.pi / 2, length=handle_length),
                handle_out=Handle(angle=theta + math.pi / 2, length=handle_length),
            )
        )
    return Shape(tuple(result))


__all__ = [
    "Bezier2D",
    "Handle",
    "Point",
    "Shape",
    "make_circle",
    "make_ngon",
    "make_point",
    "make_rect",
]
