"""Data models for mind map graphs."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import networkx as nx

from .geometry import Vector
from .layout import LayoutConfig

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterator, Mapping

    from .engine import Body, Constraint, Engine

logger = logging.getLogger(__name__)

ID = "id"
LABEL = "label"


class GraphError(ValueError):
    """Invalid graph construction request."""


class MissingIdentity(GraphError):
    """Vertex properties carry no ``id`` key."""


class DuplicateIdentity(GraphError):
    """A vertex with the same ``id`` already exists."""


@dataclass(eq=False)
class Vertex:
    """A labeled entity rendered as a physical body."""

    id: Hashable
    body: Body
    shape: tuple[Vector, ...]
    label: str | None = None
    properties: dict[str, Any] = field(default_factory=dict)
    edges: list[Edge] = field(default_factory=list)
    _model: GraphModel | None = field(default=None, repr=False)

    @property
    def position(self) -> Vector:
        return self.body.position

    @position.setter
    def position(self, value: Vector) -> None:
        self.body.translate(value - self.body.position)

    @property
    def outline(self) -> list[Vector]:
        """World-space outline."""
        return self.body.vertices

    @property
    def name(self) -> str:
        """Display text."""
        return str(self.properties.get("name") or "Unknown")

    @property
    def visible(self) -> bool:
        return self.body.visible

    def add_edge(
        self,
        verb: str,
        target: Vertex,
        properties: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> Edge:
        """Create an edge from this vertex to `target`."""
        if self._model is None:
            raise GraphError(f"Vertex {self.id!r} is not attached to a graph")
        return self._model.add_edge(self, verb, target, properties, **kwargs)


@dataclass(eq=False)
class Edge:
    """A directed, labeled relationship between two vertices."""

    verb: str
    source: Vertex
    target: Vertex
    constraint: Constraint
    id: Hashable | None = None
    properties: dict[str, Any] = field(default_factory=dict)

    @property
    def rest_length(self) -> float:
        return self.constraint.length

    @property
    def stiffness(self) -> float:
        return self.constraint.stiffness


class GraphModel:
    """Vertices and edges of a mind map, attached to an engine's world.

    Vertices are kept in insertion order. Topology is mirrored in a
    ``networkx.MultiDiGraph`` whose nodes are the vertices themselves, so a
    target from another model never merges with a local vertex sharing its id.
    The graph answers the parallel and reverse edge questions of the router.
    """

    def __init__(
        self,
        engine: Engine,
        config: LayoutConfig | None = None,
        rng: random.Random | None = None,
    ):
        self.engine = engine
        self.config = config or LayoutConfig()
        self.rng = rng or random.Random(engine.config.seed)
        self._vertices: dict[Hashable, Vertex] = {}
        self._edges: list[Edge] = []
        self.graph = nx.MultiDiGraph()

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices.values())

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._vertices

    @property
    def vertices(self) -> list[Vertex]:
        return list(self._vertices.values())

    @property
    def edges(self) -> list[Edge]:
        return list(self._edges)

    def get(self, vertex_id: Hashable) -> Vertex | None:
        return self._vertices.get(vertex_id)

    def add_vertex(self, properties: Mapping[str, Any]) -> Vertex:
        """Create a vertex from a property mapping.

        ``id`` is required and must be unique; ``label`` is optional. The
        remaining keys are kept as the vertex's properties.

        Raises:
            MissingIdentity: if ``properties`` has no ``id`` key.
            DuplicateIdentity: if the id is already registered.
        """
        if ID not in properties:
            raise MissingIdentity("Vertex properties require an 'id' key")
        vertex_id = properties[ID]
        if vertex_id in self._vertices:
            raise DuplicateIdentity(f"Vertex id {vertex_id!r} is not unique")

        center = self.engine.viewport.center
        jitter = self.config.jitter
        position = Vector(
            center.x + self.rng.random() * jitter,
            center.y + self.rng.random() * jitter,
        )
        body = self.engine.create_body(
            self.config.node_width, self.config.node_height, position
        )
        body.shape = tuple(v - body.position for v in body.vertices)

        vertex = Vertex(
            id=vertex_id,
            body=body,
            shape=body.shape,
            label=properties.get(LABEL),
            properties={k: v for k, v in properties.items() if k not in (ID, LABEL)},
            _model=self,
        )
        self._vertices[vertex_id] = vertex
        self.graph.add_node(vertex)
        logger.debug("Added vertex %r (%s)", vertex_id, vertex.label)
        return vertex

    def add_edge(
        self,
        source: Vertex,
        verb: str,
        target: Vertex,
        properties: Mapping[str, Any] | None = None,
        *,
        rest_length: float | None = None,
        stiffness: float | None = None,
    ) -> Edge:
        """Connect `source` to `target` with a spring.

        Edge ids are not checked for uniqueness and `target` is not required
        to belong to this model.
        """
        props = dict(properties or {})
        constraint = self.engine.create_constraint(
            source.body,
            target.body,
            self.config.edge_length if rest_length is None else rest_length,
            self.config.edge_stiffness if stiffness is None else stiffness,
            label=verb,
        )
        edge = Edge(
            verb=verb,
            source=source,
            target=target,
            constraint=constraint,
            id=props.pop(ID, None),
            properties=props,
        )
        source.edges.append(edge)
        self._edges.append(edge)
        self.graph.add_edge(source, target, edge=edge)
        logger.debug("Added edge %r: %r -%s-> %r", edge.id, source.id, verb, target.id)
        return edge

    def parallel_edges(self, source: Vertex, target: Vertex) -> list[Edge]:
        """Edges from `source` to `target`, in creation order."""
        data = self.graph.get_edge_data(source, target)
        if not data:
            return []
        return [attrs["edge"] for attrs in data.values()]

    def has_reverse(self, edge: Edge) -> bool:
        """True when at least one edge runs from `edge.target` to `edge.source`."""
        return self.graph.has_edge(edge.target, edge.source)
