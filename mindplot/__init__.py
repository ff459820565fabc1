"""mindplot - Force-settled mind map diagrams.

Example usage:
    from mindplot import MindMap

    mind_map = MindMap()
    marko = mind_map.add_vertex({"id": 1, "label": "person", "name": "marko"})
    lop = mind_map.add_vertex({"id": 3, "label": "software", "name": "lop"})
    marko.add_edge("created", lop, {"id": 9, "weight": 0.4})

    mind_map.run()
    mind_map.step(300)
    mind_map.save_svg("mind_map")
"""

from .engine import (
    Body,
    Constraint,
    Engine,
    EngineConfig,
    TickContext,
    World,
)
from .geometry import (
    Bounds,
    Segment,
    Vector,
    intersect,
    point_on_polygon_boundary_towards,
    polygon_to_segments,
)
from .layout import (
    LayoutConfig,
    explode,
    recenter,
    repulsion_force,
    restore_shapes,
)
from .logging_config import setup_logging
from .mindmap import (
    MindMap,
    MindMapConfig,
    modern_graph,
)
from .models import (
    DuplicateIdentity,
    Edge,
    GraphError,
    GraphModel,
    MissingIdentity,
    Vertex,
)
from .renderer import (
    DEFAULT_THEME,
    MindMapRenderer,
    RenderConfig,
    SvgCanvas,
    Theme,
    render_to_svg,
)
from .routing import (
    EdgeRoute,
    EdgeRouter,
    RouterConfig,
    arrowhead,
)
from .text import (
    TextFit,
    fit_text,
)

__version__ = "0.1.0"

__all__ = [
    # Application
    "MindMap",
    "MindMapConfig",
    "modern_graph",
    # Models
    "GraphModel",
    "Vertex",
    "Edge",
    "GraphError",
    "MissingIdentity",
    "DuplicateIdentity",
    # Geometry
    "Vector",
    "Segment",
    "Bounds",
    "intersect",
    "polygon_to_segments",
    "point_on_polygon_boundary_towards",
    # Routing
    "EdgeRouter",
    "EdgeRoute",
    "RouterConfig",
    "arrowhead",
    # Layout
    "LayoutConfig",
    "repulsion_force",
    "explode",
    "restore_shapes",
    "recenter",
    # Text
    "fit_text",
    "TextFit",
    # Engine
    "Engine",
    "EngineConfig",
    "World",
    "Body",
    "Constraint",
    "TickContext",
    # Rendering
    "render_to_svg",
    "MindMapRenderer",
    "RenderConfig",
    "SvgCanvas",
    "Theme",
    "DEFAULT_THEME",
    # Logging
    "setup_logging",
    # Version
    "__version__",
]
