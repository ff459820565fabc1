"""SVG renderer using drawsvg."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import drawsvg as draw

from .text import estimate_text_width, fit_text

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .mindmap import MindMap
    from .models import Vertex
    from .routing import EdgeRoute, EdgeRouter

logger = logging.getLogger(__name__)


class Theme:
    """Color theme for mind maps."""

    def __init__(
        self,
        background: str = "#14151f",
        node_stroke: str = "#bbbbbb",
        text_color: str = "rgba(255,255,255,0.5)",
        edge_color: str = "#bbbbbb",
        arrow_fill: str = "#bbbbbb",
        verb_color: str = "#8a8f98",
    ):
        self.background = background
        self.node_stroke = node_stroke
        self.text_color = text_color
        self.edge_color = edge_color
        self.arrow_fill = arrow_fill
        self.verb_color = verb_color


DEFAULT_THEME = Theme()


@dataclass
class RenderConfig:
    """Configuration for frame rendering."""

    font_family: str = "Arial"
    char_width: float = 0.55  # Average glyph width relative to font size
    min_font_size: float = 4
    max_font_size: float = 500
    fit_iterations: int = 10
    edge_width: float = 1.0
    show_verbs: bool = False
    verb_font_size: float = 10


class SvgCanvas:
    """Canvas-style drawing surface that records into a drawsvg Drawing.

    Paths are built with ``begin_path``/``move_to``/``line_to``/... and
    emitted by ``fill`` or ``stroke``. Text width is estimated from the
    character count since SVG output has no font metrics.
    """

    def __init__(
        self,
        width: float,
        height: float,
        background: str | None = None,
        font_family: str = "Arial",
        char_width: float = 0.55,
    ):
        self.width = width
        self.height = height
        self.drawing = draw.Drawing(width, height)
        self.font_family = font_family
        self.font_size: float = 10
        self.char_width = char_width
        self._commands: list[tuple[str, tuple[float, ...]]] = []

        if background:
            self.drawing.append(draw.Rectangle(0, 0, width, height, fill=background))

    def begin_path(self) -> None:
        self._commands = []

    def move_to(self, x: float, y: float) -> None:
        self._commands.append(("M", (x, y)))

    def line_to(self, x: float, y: float) -> None:
        self._commands.append(("L", (x, y)))

    def quadratic_curve_to(self, cx: float, cy: float, x: float, y: float) -> None:
        self._commands.append(("Q", (cx, cy, x, y)))

    def close_path(self) -> None:
        self._commands.append(("Z", ()))

    def _path(self, **kwargs: object) -> draw.Path:
        path = draw.Path(**kwargs)
        for op, args in self._commands:
            getattr(path, op)(*args)
        return path

    def fill(self, color: str) -> None:
        self.drawing.append(self._path(fill=color, stroke="none"))

    def stroke(self, color: str, width: float = 1.0) -> None:
        self.drawing.append(self._path(fill="none", stroke=color, stroke_width=width))

    def set_font(self, size: float, family: str | None = None) -> None:
        self.font_size = size
        if family:
            self.font_family = family

    def measure_text(self, text: str) -> float:
        return estimate_text_width(text, self.font_size, self.char_width)

    def fill_text(self, text: str, x: float, y: float, color: str) -> None:
        self.drawing.append(
            draw.Text(
                text,
                self.font_size,
                x, y,
                fill=color,
                font_family=self.font_family,
            )
        )

    def save_svg(self, filename: str) -> None:
        self.drawing.save_svg(filename)
        logger.info("Saved frame to %s", filename)

    def as_svg(self) -> str:
        return self.drawing.as_svg()


class MindMapRenderer:
    """Paints vertex labels and edges on a canvas."""

    def __init__(
        self,
        theme: Theme | None = None,
        config: RenderConfig | None = None,
    ):
        self.theme = theme or DEFAULT_THEME
        self.config = config or RenderConfig()

    def create_canvas(self, width: float, height: float) -> SvgCanvas:
        return SvgCanvas(
            width,
            height,
            background=self.theme.background,
            font_family=self.config.font_family,
            char_width=self.config.char_width,
        )

    def draw_labels(self, canvas: SvgCanvas, vertices: Iterable[Vertex]) -> None:
        """Draw each visible vertex's name, sized to fill its outline's bounds."""
        def measure(size: float, text: str) -> float:
            canvas.set_font(size)
            return canvas.measure_text(text)

        for vertex in vertices:
            if not vertex.visible:
                continue
            bounds = vertex.body.bounds
            size = bounds.size
            text = vertex.name
            fitted = fit_text(
                measure,
                size.x,
                size.y,
                text,
                min_size=self.config.min_font_size,
                max_size=self.config.max_font_size,
                iterations=self.config.fit_iterations,
            )
            canvas.set_font(fitted.height)
            canvas.fill_text(
                text,
                bounds.min.x + size.x / 2 - fitted.width / 2,
                bounds.min.y + fitted.height / 2 + size.y / 2,
                self.theme.text_color,
            )

    def draw_edges(self, canvas: SvgCanvas, router: EdgeRouter) -> None:
        for edge, route in router.routes():
            self.draw_route(canvas, route, edge.verb if self.config.show_verbs else None)

    def draw_route(
        self,
        canvas: SvgCanvas,
        route: EdgeRoute,
        verb: str | None = None,
    ) -> None:
        """Stroke an edge line or curve and fill its arrowhead."""
        canvas.begin_path()
        canvas.move_to(route.start.x, route.start.y)
        if route.control is not None:
            canvas.quadratic_curve_to(
                route.control.x, route.control.y, route.end.x, route.end.y
            )
        else:
            canvas.line_to(route.end.x, route.end.y)
        canvas.stroke(self.theme.edge_color, self.config.edge_width)

        if route.arrow:
            apex, *rest = route.arrow
            canvas.begin_path()
            canvas.move_to(apex.x, apex.y)
            for point in rest:
                canvas.line_to(point.x, point.y)
            canvas.close_path()
            canvas.fill(self.theme.arrow_fill)
            canvas.stroke(self.theme.edge_color, self.config.edge_width)

        if verb:
            mid = route.midpoint
            canvas.set_font(self.config.verb_font_size)
            width = canvas.measure_text(verb)
            canvas.fill_text(verb, mid.x - width / 2, mid.y, self.theme.verb_color)


def render_to_svg(mind_map: MindMap, filename: str | None = None) -> str:
    """Render the mind map's current frame to SVG.

    Args:
        mind_map: The mind map to render
        filename: Optional filename to save to (without extension)

    Returns:
        SVG content as string
    """
    canvas = mind_map.render()

    if filename:
        canvas.save_svg(f"{filename}.svg")

    return canvas.as_svg()
