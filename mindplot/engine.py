"""Minimal rigid-body sandbox driving the mind map.

Bodies are non-rotating polygons integrated with position Verlet, linked by
spring constraints that are relaxed positionally. There is no collision
detection between bodies. Each tick fires ``before_step`` hooks, integrates,
draws the bodies on the tick's canvas and then fires ``after_step`` hooks.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Protocol

from .geometry import Bounds, Vector, rectangle

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

EVENTS = ("before_step", "after_step")

Observer = Callable[[str, Any], None]


class Canvas(Protocol):
    """Path operations the engine needs to draw bodies."""

    def begin_path(self) -> None: ...
    def move_to(self, x: float, y: float) -> None: ...
    def line_to(self, x: float, y: float) -> None: ...
    def close_path(self) -> None: ...
    def fill(self, color: str) -> None: ...
    def stroke(self, color: str, width: float = 1.0) -> None: ...


@dataclass
class EngineConfig:
    """Configuration for the simulation loop."""

    viewport_width: float = 800
    viewport_height: float = 600
    delta: float = 1000 / 60  # ms per tick
    friction_air: float = 0.01
    density: float = 0.001
    constraint_iterations: int = 2
    seed: int | None = 0
    body_fill: str | None = None
    body_stroke: str = "#bbbbbb"
    body_stroke_width: float = 1.0


_body_ids = itertools.count(1)


@dataclass(eq=False)
class Body:
    """A translating polygon body.

    ``vertices`` is the world-space outline. ``shape`` holds the outline in
    the body's local frame once a caller pins it; the engine itself never
    reads it.
    """

    position: Vector
    vertices: list[Vector]
    mass: float = 1.0
    friction_air: float = 0.01
    visible: bool = True
    shape: tuple[Vector, ...] | None = None
    id: int = field(default_factory=lambda: next(_body_ids))
    position_prev: Vector = field(init=False)
    force: Vector = field(init=False, default=Vector(0.0, 0.0))

    def __post_init__(self) -> None:
        self.position_prev = self.position

    @property
    def bounds(self) -> Bounds:
        return Bounds.from_points(self.vertices)

    @property
    def velocity(self) -> Vector:
        return self.position - self.position_prev

    def apply_force(self, force: Vector) -> None:
        """Accumulate a force for the next integration step."""
        self.force = self.force + force

    def translate(self, offset: Vector) -> None:
        """Move the body, its outline and its previous position together.

        Velocity is preserved.
        """
        self.position = self.position + offset
        self.position_prev = self.position_prev + offset
        self.vertices = [v + offset for v in self.vertices]

    def update(self, delta: float) -> None:
        """Position Verlet step with air friction."""
        friction = 1 - self.friction_air
        acceleration = self.force * (1 / self.mass)
        velocity = self.velocity * friction + acceleration * (delta * delta)
        self.position_prev = self.position
        self.position = self.position + velocity
        self.vertices = [v + velocity for v in self.vertices]


@dataclass(eq=False)
class Constraint:
    """Spring between two bodies' centres."""

    body_a: Body
    body_b: Body
    length: float
    stiffness: float
    label: str | None = None

    def solve(self) -> None:
        delta = self.body_b.position - self.body_a.position
        current = delta.magnitude
        if current == 0:
            return
        difference = (current - self.length) / current * self.stiffness
        total_mass = self.body_a.mass + self.body_b.mass
        share_a = self.body_b.mass / total_mass
        share_b = self.body_a.mass / total_mass
        correction = delta * difference
        self.body_a.translate(correction * share_a)
        self.body_b.translate(-correction * share_b)


@dataclass
class World:
    """Owns all bodies and constraints."""

    bodies: list[Body] = field(default_factory=list)
    constraints: list[Constraint] = field(default_factory=list)

    def add(self, item: Body | Constraint) -> None:
        if isinstance(item, Body):
            self.bodies.append(item)
        elif isinstance(item, Constraint):
            self.constraints.append(item)
        else:
            raise TypeError(f"Cannot add {type(item).__name__} to a world")


@dataclass
class TickContext:
    """Per-tick state handed to hooks."""

    tick: int
    canvas: Any = None


class Engine:
    """Fixed-step simulation loop with before/after hooks."""

    def __init__(
        self,
        config: EngineConfig | None = None,
        canvas_factory: Callable[[], Any] | None = None,
        observer: Observer | None = None,
    ):
        self.config = config or EngineConfig()
        self.world = World()
        self.viewport = Bounds(
            Vector(0.0, 0.0),
            Vector(self.config.viewport_width, self.config.viewport_height),
        )
        self.canvas_factory = canvas_factory
        self.observer = observer
        self.enabled = False
        self.tick_count = 0
        self.last_context: TickContext | None = None
        self._hooks: dict[str, list[Callable[[TickContext], None]]] = {
            name: [] for name in EVENTS
        }

    def _notify(self, event: str, payload: Any) -> None:
        if self.observer is not None:
            self.observer(event, payload)

    def on(self, event: str, callback: Callable[[TickContext], None]) -> None:
        """Register a hook for ``before_step`` or ``after_step``."""
        if event not in self._hooks:
            raise ValueError(
                f"Unknown engine event '{event}', must be one of {', '.join(EVENTS)}"
            )
        self._hooks[event].append(callback)

    def create_body(self, width: float, height: float, position: Vector) -> Body:
        """Create a rectangle body and add it to the world."""
        area = width * height
        body = Body(
            position=position,
            vertices=rectangle(position, width, height),
            mass=area * self.config.density,
            friction_air=self.config.friction_air,
        )
        self.world.add(body)
        self._notify("add_body", body)
        return body

    def create_constraint(
        self,
        body_a: Body,
        body_b: Body,
        length: float,
        stiffness: float,
        label: str | None = None,
    ) -> Constraint:
        """Create a spring constraint and add it to the world."""
        constraint = Constraint(body_a, body_b, length, stiffness, label)
        self.world.add(constraint)
        self._notify("add_constraint", constraint)
        return constraint

    def run(self) -> None:
        self.enabled = True
        logger.info("Simulation started")

    def stop(self) -> None:
        self.enabled = False
        logger.info("Simulation stopped after %d ticks", self.tick_count)

    def update(self) -> None:
        """Integrate one step: bodies, then constraints, then clear forces."""
        for body in self.world.bodies:
            body.update(self.config.delta)
        for _ in range(self.config.constraint_iterations):
            for constraint in self.world.constraints:
                constraint.solve()
        for body in self.world.bodies:
            body.force = Vector(0.0, 0.0)

    def draw_world(self, canvas: Canvas) -> None:
        """Stroke every visible body's outline."""
        for body in self.world.bodies:
            if not body.visible:
                continue
            draw_polygon(
                canvas,
                body.vertices,
                fill=self.config.body_fill,
                stroke=self.config.body_stroke,
                stroke_width=self.config.body_stroke_width,
            )

    def tick(self) -> TickContext | None:
        """Run one frame. Returns None when the engine is disabled."""
        if not self.enabled:
            return None

        canvas = self.canvas_factory() if self.canvas_factory else None
        context = TickContext(tick=self.tick_count, canvas=canvas)

        for hook in self._hooks["before_step"]:
            hook(context)

        self.update()
        if canvas is not None:
            self.draw_world(canvas)

        for hook in self._hooks["after_step"]:
            hook(context)

        self.tick_count += 1
        self.last_context = context
        self._notify("tick", context)
        return context

    def step(self, n: int = 1) -> TickContext | None:
        """Run ``n`` ticks and return the last context."""
        context = None
        for _ in range(n):
            context = self.tick()
        return context


def draw_polygon(
    canvas: Canvas,
    points: Sequence[Vector],
    fill: str | None = None,
    stroke: str | None = None,
    stroke_width: float = 1.0,
) -> None:
    """Trace a closed polygon and fill and/or stroke it."""
    if not points:
        return
    canvas.begin_path()
    canvas.move_to(points[0].x, points[0].y)
    for point in points[1:]:
        canvas.line_to(point.x, point.y)
    canvas.close_path()
    if fill is not None:
        canvas.fill(fill)
    if stroke is not None:
        canvas.stroke(stroke, stroke_width)
