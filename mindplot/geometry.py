"""Planar geometry primitives for edge clipping and layout."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


@dataclass(frozen=True)
class Vector:
    """A point or direction in the plane."""

    x: float
    y: float

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def normalise(self) -> Vector:
        mag = self.magnitude
        if mag == 0.0:
            return Vector(0.0, 0.0)
        return Vector(self.x / mag, self.y / mag)

    def rotate(self, angle: float) -> Vector:
        """Rotate around the origin by `angle` radians."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vector(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a,
        )

    def perpendicular(self) -> Vector:
        """Quarter turn clockwise on screen (y axis pointing down)."""
        return Vector(-self.y, self.x)

    def as_tuple(self) -> tuple[float, float]:
        return self.x, self.y


ORIGIN = Vector(0.0, 0.0)


@dataclass(frozen=True)
class Segment:
    """A straight segment from `a` to `b`."""

    a: Vector
    b: Vector

    @property
    def length(self) -> float:
        return (self.b - self.a).magnitude


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding box."""

    min: Vector
    max: Vector

    @classmethod
    def from_points(cls, points: Iterable[Vector]) -> Bounds:
        pts = list(points)
        if not pts:
            raise ValueError("Cannot compute bounds of an empty point set")
        return cls(
            Vector(min(p.x for p in pts), min(p.y for p in pts)),
            Vector(max(p.x for p in pts), max(p.y for p in pts)),
        )

    @classmethod
    def union(cls, boxes: Iterable[Bounds]) -> Bounds:
        corners: list[Vector] = []
        for box in boxes:
            corners.extend((box.min, box.max))
        return cls.from_points(corners)

    @property
    def center(self) -> Vector:
        return Vector(
            self.max.x / 2 + self.min.x / 2,
            self.max.y / 2 + self.min.y / 2,
        )

    @property
    def size(self) -> Vector:
        return self.max - self.min

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y

    def translate(self, offset: Vector) -> Bounds:
        return Bounds(self.min + offset, self.max + offset)


def rectangle(center: Vector, width: float, height: float) -> list[Vector]:
    """Corner points of an axis-aligned rectangle, clockwise from top-left."""
    hw = width / 2
    hh = height / 2
    return [
        Vector(center.x - hw, center.y - hh),
        Vector(center.x + hw, center.y - hh),
        Vector(center.x + hw, center.y + hh),
        Vector(center.x - hw, center.y + hh),
    ]


def same_sign(a: float, b: float) -> bool:
    """True when both values are non-zero and share a sign.

    Zero never has the same sign as anything, zero included.
    """
    if a == 0 or b == 0:
        return False
    return a / abs(a) == b / abs(b)


def intersect(a: Segment, b: Segment) -> Vector | None:
    """Crossing point of two segments, or None.

    Each segment is tested against the infinite line through the other using
    signed areas. When both endpoints lie strictly on one side the segments
    cannot cross. Parallel and co-linear segments give a zero determinant and
    also resolve to None. An endpoint lying exactly on the other line passes
    the side test, so touching segments count as intersecting.
    """
    x1, y1 = a.a.x, a.a.y
    x2, y2 = a.b.x, a.b.y
    x3, y3 = b.a.x, b.a.y
    x4, y4 = b.b.x, b.b.y

    # Line through a: a1 * x + b1 * y + c1 = 0
    a1 = y2 - y1
    b1 = x1 - x2
    c1 = x2 * y1 - x1 * y2

    r3 = a1 * x3 + b1 * y3 + c1
    r4 = a1 * x4 + b1 * y4 + c1
    if r3 != 0 and r4 != 0 and same_sign(r3, r4):
        return None

    # Line through b: a2 * x + b2 * y + c2 = 0
    a2 = y4 - y3
    b2 = x3 - x4
    c2 = x4 * y3 - x3 * y4

    r1 = a2 * x1 + b2 * y1 + c2
    r2 = a2 * x2 + b2 * y2 + c2
    if r1 != 0 and r2 != 0 and same_sign(r1, r2):
        return None

    denom = a1 * b2 - a2 * b1
    if denom == 0:
        return None

    x = (b1 * c2 - b2 * c1) / denom
    y = (a2 * c1 - a1 * c2) / denom
    return Vector(x, y)


def polygon_to_segments(points: Sequence[Vector]) -> list[Segment]:
    """Closed ring of segments: each point joined to its successor, last to first."""
    n = len(points)
    return [Segment(points[i], points[(i + 1) % n]) for i in range(n)]


def point_on_polygon_boundary_towards(
    interior: Vector,
    polygon: Sequence[Vector],
    external: Vector,
) -> Vector:
    """Where the ray from `interior` towards `external` leaves `polygon`.

    Boundary segments are tried in polygon order and the first hit wins, which
    is not necessarily the nearest one for non-convex outlines. When no
    segment is hit (e.g. `external` is inside the polygon) `interior` is
    returned unchanged.
    """
    ray = Segment(interior, external)
    for side in polygon_to_segments(polygon):
        hit = intersect(ray, side)
        if hit is not None:
            return hit
    return interior


def quadratic_point(p0: Vector, control: Vector, p1: Vector, t: float) -> Vector:
    """Point at parameter `t` on a quadratic Bezier curve."""
    mt = 1 - t
    return p0 * (mt * mt) + control * (2 * mt * t) + p1 * (t * t)
