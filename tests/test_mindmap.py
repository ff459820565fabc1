"""Tests for the frame-driven mind map."""

import itertools
import logging

import pytest

from mindplot.engine import EngineConfig
from mindplot.geometry import Vector
from mindplot.logging_config import setup_logging
from mindplot.mindmap import MindMap, MindMapConfig, modern_graph
from mindplot.renderer import SvgCanvas


def spread(vertices):
    return max(
        (a.position - b.position).magnitude
        for a, b in itertools.combinations(vertices, 2)
    )


def test_modern_graph(mind_map):
    v = modern_graph(mind_map)

    assert [vertex.name for vertex in mind_map.graph] == [
        "marko", "vadas", "lop", "josh", "ripple", "peter",
    ]
    assert len(mind_map.graph.edges) == 6
    assert [edge.id for edge in v["marko"].edges] == [7, 8, 9]
    assert v["lop"].label == "software"
    assert v["josh"].properties == {"name": "josh", "age": 32}


def test_vertices_spread_apart(mind_map):
    vertices = list(modern_graph(mind_map).values())
    initial = spread(vertices)

    mind_map.run()
    mind_map.step(120)

    assert spread(vertices) > initial + 10


def test_stopped_mind_map_does_not_move(mind_map):
    vertices = list(modern_graph(mind_map).values())
    positions = [vertex.position for vertex in vertices]

    assert mind_map.step(50) is None
    assert [vertex.position for vertex in vertices] == positions
    assert mind_map.last_frame is None


def test_recentring_nudges_lone_vertex(mind_map):
    vertex = mind_map.add_vertex({"id": 1})
    vertex.position = Vector(600, 300)
    start = vertex.position

    mind_map.run()
    mind_map.step(1)

    offset = (start - mind_map.original_bounds.center) * (1 / 1000)
    assert vertex.position.x == pytest.approx(start.x - offset.x)
    assert vertex.position.y == pytest.approx(start.y - offset.y)


def test_outline_follows_position_after_tick(mind_map):
    vertices = list(modern_graph(mind_map).values())
    mind_map.run()
    mind_map.step(10)

    for vertex in vertices:
        expected = [p + vertex.position for p in vertex.shape]
        for got, want in zip(vertex.outline, expected):
            assert got.x == pytest.approx(want.x)
            assert got.y == pytest.approx(want.y)


def test_last_frame_is_painted(mind_map):
    modern_graph(mind_map)
    mind_map.run()
    mind_map.step(3)

    frame = mind_map.last_frame
    assert isinstance(frame, SvgCanvas)
    svg = frame.as_svg()
    for name in ("marko", "vadas", "lop", "josh", "ripple", "peter"):
        assert name in svg


def test_render_without_stepping(mind_map):
    mind_map.add_vertex({"id": 1, "name": "solo"})
    canvas = mind_map.render()
    assert "solo" in canvas.as_svg()
    assert mind_map.engine.tick_count == 0


def test_save_svg(mind_map, tmp_path):
    modern_graph(mind_map)
    mind_map.save_svg(str(tmp_path / "modern"))
    assert (tmp_path / "modern.svg").read_text().count("<text") == 6


def test_run_and_stop(mind_map):
    assert not mind_map.running
    mind_map.run()
    assert mind_map.running
    mind_map.stop()
    assert not mind_map.running


def test_observer_counts_ticks():
    ticks = []
    mind_map = MindMap(observer=lambda event, payload: event == "tick" and ticks.append(payload.tick))
    mind_map.add_vertex({"id": 1})
    mind_map.run()
    mind_map.step(3)
    assert ticks == [0, 1, 2]


def test_same_seed_same_layout():
    def settle():
        mind_map = MindMap(MindMapConfig(engine=EngineConfig(seed=42)))
        vertices = modern_graph(mind_map)
        mind_map.run()
        mind_map.step(30)
        return [vertex.position for vertex in vertices.values()]

    assert settle() == settle()


def test_setup_logging_does_not_stack_handlers():
    setup_logging(logging.DEBUG)
    setup_logging(logging.INFO)
    logger = logging.getLogger("mindplot")
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO


def test_setup_logging_writes_to_file(tmp_path):
    log_file = tmp_path / "mindplot.log"
    logger = setup_logging(logging.DEBUG, str(log_file))
    try:
        assert len(logger.handlers) == 2
        logging.getLogger("mindplot.models").debug("vertex added")
        for handler in logger.handlers:
            handler.flush()
        assert "mindplot.models - DEBUG - vertex added" in log_file.read_text()
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
