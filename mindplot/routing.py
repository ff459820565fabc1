"""Edge routing: boundary clipping, multi-edge fan-out and arrowheads."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .geometry import (
    Segment,
    Vector,
    point_on_polygon_boundary_towards,
    quadratic_point,
)

if TYPE_CHECKING:
    from .models import Edge, GraphModel, Vertex


# Equilateral triangle, apex at the origin, pointing up (negative y)
ARROW_SHAPE = (
    Vector(0.0, 0.0),
    Vector(-0.5, math.sqrt(3) / 2),
    Vector(0.5, math.sqrt(3) / 2),
)


@dataclass
class RouterConfig:
    """Configuration for edge routing."""

    arrow_size: float = 8
    # Sideways offset of the outermost fanned edge, as a fraction of the
    # distance between the two vertex centres
    fan_curvature: float = 0.25


@dataclass(frozen=True)
class EdgeRoute:
    """Drawable geometry of one edge."""

    start: Vector
    end: Vector
    control: Vector | None = None
    curvature: float = 0.0
    arrow: tuple[Vector, ...] = field(default=())

    @property
    def curved(self) -> bool:
        return self.control is not None

    @property
    def midpoint(self) -> Vector:
        if self.control is None:
            return (self.start + self.end) * 0.5
        return quadratic_point(self.start, self.control, self.end, 0.5)


def arrowhead(tip: Vector, direction: Vector, size: float) -> tuple[Vector, ...]:
    """Arrow triangle with its apex on `tip`, pointing along `direction`."""
    angle = math.atan2(direction.y, direction.x) + math.pi / 2
    return tuple(tip + point.rotate(angle) * size for point in ARROW_SHAPE)


def boundary_towards(vertex: Vertex, external: Vector) -> Vector:
    """Point where the ray from `vertex`'s centre to `external` leaves its outline."""
    return point_on_polygon_boundary_towards(vertex.position, vertex.outline, external)


class EdgeRouter:
    """Computes where edges start and end and how they bend.

    Edges that share an ordered vertex pair are fanned out on clockwise
    curves so they stay distinguishable; an edge whose pair also carries
    edges in the opposite direction curves too, which separates the two
    directions because clockwise flips with the direction of travel.
    """

    def __init__(self, graph: GraphModel, config: RouterConfig | None = None):
        self.graph = graph
        self.config = config or RouterConfig()

    def clipped_segment(self, edge: Edge) -> Segment:
        """Straight segment between the two vertex outlines."""
        source, target = edge.source, edge.target
        return Segment(
            boundary_towards(source, target.position),
            boundary_towards(target, source.position),
        )

    def fan_position(self, edge: Edge) -> tuple[int, int]:
        """(index, count) of `edge` among edges with the same ordered pair."""
        siblings = self.graph.parallel_edges(edge.source, edge.target)
        for index, sibling in enumerate(siblings):
            if sibling is edge:
                return index, len(siblings)
        return 0, 1

    def needs_curve(self, edge: Edge) -> bool:
        _, count = self.fan_position(edge)
        return self._curves(edge, count)

    def _curves(self, edge: Edge, count: int) -> bool:
        return count > 1 or self.graph.has_reverse(edge)

    def curvature(self, edge: Edge) -> float:
        """Clockwise bend of `edge`; zero for edges drawn straight."""
        index, count = self.fan_position(edge)
        if not self._curves(edge, count):
            return 0.0
        return self.config.fan_curvature * (index + 1) / count

    def route(self, edge: Edge) -> EdgeRoute:
        source_center = edge.source.position
        target_center = edge.target.position
        bend = self.curvature(edge)

        if bend == 0.0:
            segment = self.clipped_segment(edge)
            return EdgeRoute(
                start=segment.a,
                end=segment.b,
                arrow=arrowhead(segment.b, segment.b - segment.a, self.config.arrow_size),
            )

        chord = target_center - source_center
        control = (source_center + target_center) * 0.5 + chord.perpendicular() * bend
        start = boundary_towards(edge.source, control)
        end = boundary_towards(edge.target, control)
        return EdgeRoute(
            start=start,
            end=end,
            control=control,
            curvature=bend,
            arrow=arrowhead(end, end - control, self.config.arrow_size),
        )

    def routes(self) -> list[tuple[Edge, EdgeRoute]]:
        """Routes for every edge, grouped by source vertex in insertion order."""
        return [
            (edge, self.route(edge))
            for vertex in self.graph
            for edge in vertex.edges
        ]
