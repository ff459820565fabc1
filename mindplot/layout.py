"""Layout forces for mind map graphs."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .geometry import Bounds, Vector

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from .engine import Body
    from .models import Vertex

logger = logging.getLogger(__name__)


@dataclass
class LayoutConfig:
    """Configuration for layout calculations."""

    # Vertex bodies
    node_width: float = 100
    node_height: float = 20
    jitter: float = 1.0  # Max random offset of new vertices from the viewport centre

    # Edge springs
    edge_length: float = 100
    edge_stiffness: float = 0.0002

    # Repulsion ("explosion")
    repulsion_distance: float = 300  # No repulsion at or beyond this distance
    repulsion_scale: float = 0.0000001

    # Recentring
    recenter_damping: float = 1 / 1000


def repulsion_force(delta: Vector, config: LayoutConfig) -> Vector:
    """Force pushing a vertex away from a neighbour at offset `delta`.

    Magnitude falls off linearly, reaching zero at ``repulsion_distance``.
    """
    falloff = max(0.0, config.repulsion_distance - delta.magnitude)
    return delta.normalise() * (config.repulsion_scale * falloff)


def explode(vertices: Sequence[Vertex], config: LayoutConfig) -> None:
    """Apply pairwise repulsion to every vertex.

    Every ordered pair is visited, so each unordered pair contributes twice:
    once to each of its members.
    """
    for vertex in vertices:
        for other in vertices:
            if vertex is other:
                continue
            delta = vertex.position - other.position
            vertex.body.apply_force(repulsion_force(delta, config))


def restore_shapes(bodies: Iterable[Body]) -> None:
    """Rebuild each body's world outline from its pinned local shape."""
    for body in bodies:
        if body.shape is None:
            continue
        body.vertices = [v + body.position for v in body.shape]


def outer_bounds(bodies: Iterable[Body]) -> Bounds:
    """Union of the world-space bounds of `bodies`."""
    return Bounds.union(body.bounds for body in bodies)


def center_of_mass_offset(
    bounds: Bounds,
    reference: Bounds,
    damping: float,
) -> Vector:
    return (bounds.center - reference.center) * damping


def recenter(
    bodies: Sequence[Body],
    reference: Bounds,
    config: LayoutConfig,
) -> Vector:
    """Shift all bodies a damped step towards `reference`'s centre.

    Returns the offset that was subtracted.
    """
    if not bodies:
        return Vector(0.0, 0.0)
    offset = center_of_mass_offset(
        outer_bounds(bodies), reference, config.recenter_damping
    )
    for body in bodies:
        body.translate(-offset)
    return offset
