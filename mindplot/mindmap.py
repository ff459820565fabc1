"""Frame-driven mind map: graph, engine, layout forces and rendering together."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from .engine import Engine, EngineConfig, Observer, TickContext
from .layout import LayoutConfig, explode, recenter, restore_shapes
from .models import GraphModel
from .renderer import MindMapRenderer, RenderConfig, SvgCanvas, Theme
from .routing import EdgeRouter, RouterConfig

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .models import Edge, Vertex

logger = logging.getLogger(__name__)


@dataclass
class MindMapConfig:
    """All configuration for a mind map."""

    engine: EngineConfig = field(default_factory=EngineConfig)
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    router: RouterConfig = field(default_factory=RouterConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    theme: Theme = field(default_factory=Theme)


class MindMap:
    """A mind map laid out by a physics sandbox.

    Usage:
        mind_map = MindMap()
        marko = mind_map.add_vertex({"id": 1, "label": "person", "name": "marko"})
        lop = mind_map.add_vertex({"id": 3, "label": "software", "name": "lop"})
        mind_map.add_edge(marko, "created", lop, {"id": 9, "weight": 0.4})
        mind_map.run()
        mind_map.step(300)
        mind_map.save_svg("output/frame")

    Each tick the engine fires ``before_step`` (shape restoration and
    recentring), integrates and draws bodies, then fires ``after_step``
    (labels, edges and the repulsion forces used by the next tick).
    """

    def __init__(
        self,
        config: MindMapConfig | None = None,
        observer: Observer | None = None,
    ):
        self.config = config or MindMapConfig()
        self.renderer = MindMapRenderer(self.config.theme, self.config.render)
        self.engine = Engine(
            replace(self.config.engine, body_stroke=self.config.theme.node_stroke),
            canvas_factory=self._create_canvas,
            observer=observer,
        )
        self.graph = GraphModel(self.engine, self.config.layout)
        self.router = EdgeRouter(self.graph, self.config.router)
        self.original_bounds = self.engine.viewport

        self.engine.on("before_step", self._before_step)
        self.engine.on("after_step", self._after_step)

    def _create_canvas(self) -> SvgCanvas:
        return self.renderer.create_canvas(
            self.original_bounds.width, self.original_bounds.height
        )

    def _before_step(self, context: TickContext) -> None:
        bodies = self.engine.world.bodies
        restore_shapes(bodies)
        recenter(bodies, self.original_bounds, self.config.layout)

    def _after_step(self, context: TickContext) -> None:
        restore_shapes(self.engine.world.bodies)
        if context.canvas is not None:
            self.renderer.draw_labels(context.canvas, self.graph)
            self.renderer.draw_edges(context.canvas, self.router)
        explode(self.graph.vertices, self.config.layout)

    def add_vertex(self, properties: Mapping[str, Any]) -> Vertex:
        return self.graph.add_vertex(properties)

    def add_edge(
        self,
        source: Vertex,
        verb: str,
        target: Vertex,
        properties: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> Edge:
        return self.graph.add_edge(source, verb, target, properties, **kwargs)

    def run(self) -> None:
        self.engine.run()

    def stop(self) -> None:
        self.engine.stop()

    @property
    def running(self) -> bool:
        return self.engine.enabled

    def step(self, n: int = 1) -> TickContext | None:
        """Advance the simulation by `n` ticks (no-op while stopped)."""
        return self.engine.step(n)

    @property
    def last_frame(self) -> SvgCanvas | None:
        """Canvas painted by the most recent tick."""
        context = self.engine.last_context
        return context.canvas if context is not None else None

    def render(self) -> SvgCanvas:
        """Paint the current state on a fresh canvas without stepping."""
        canvas = self._create_canvas()
        restore_shapes(self.engine.world.bodies)
        self.engine.draw_world(canvas)
        self.renderer.draw_labels(canvas, self.graph)
        self.renderer.draw_edges(canvas, self.router)
        return canvas

    def save_svg(self, filename: str) -> None:
        """Save the current state to ``<filename>.svg``."""
        self.render().save_svg(f"{filename}.svg")


def modern_graph(mind_map: MindMap) -> dict[str, Vertex]:
    """Populate `mind_map` with the six-vertex "modern" demo graph.

    Returns the vertices keyed by name.
    """
    people = [
        {"label": "person", "id": 1, "name": "marko", "age": 29},
        {"label": "person", "id": 2, "name": "vadas", "age": 27},
        {"label": "software", "id": 3, "name": "lop", "lang": "java"},
        {"label": "person", "id": 4, "name": "josh", "age": 32},
        {"label": "software", "id": 5, "name": "ripple", "lang": "java"},
        {"label": "person", "id": 6, "name": "peter", "age": 35},
    ]
    v = {props["name"]: mind_map.add_vertex(props) for props in people}

    v["marko"].add_edge("knows", v["vadas"], {"id": 7, "weight": 0.5})
    v["marko"].add_edge("knows", v["josh"], {"id": 8, "weight": 1.0})
    v["marko"].add_edge("created", v["lop"], {"id": 9, "weight": 0.4})
    v["josh"].add_edge("created", v["ripple"], {"id": 10, "weight": 1.0})
    v["josh"].add_edge("created", v["lop"], {"id": 11, "weight": 0.4})
    v["peter"].add_edge("created", v["lop"], {"id": 12, "weight": 0.2})

    logger.info(
        "Built modern graph: %d vertices, %d edges",
        len(mind_map.graph), len(mind_map.graph.edges),
    )
    return v
