"""Example usage of mindplot."""

import logging
import os

from mindplot import MindMap, modern_graph, setup_logging


def modern_example(ticks: int = 600, snapshot_every: int = 150):
    """Settle the "modern" graph and save a frame every few hundred ticks."""
    mind_map = MindMap()
    modern_graph(mind_map)

    mind_map.run()
    for tick in range(0, ticks, snapshot_every):
        mind_map.step(snapshot_every)
        mind_map.save_svg(f"output/modern_{tick + snapshot_every:04d}")
    mind_map.stop()

    print("Modern graph frames saved to output/")


def main():
    """Lay out a small mind map with parallel and reverse edges."""
    mind_map = MindMap()

    idea = mind_map.add_vertex({"id": "idea", "label": "topic", "name": "Mind map"})
    physics = mind_map.add_vertex({"id": "physics", "label": "topic", "name": "Physics"})
    geometry = mind_map.add_vertex({"id": "geometry", "label": "topic", "name": "Geometry"})
    text = mind_map.add_vertex({"id": "text", "label": "topic", "name": "Text fitting"})

    idea.add_edge("uses", physics)
    idea.add_edge("uses", geometry)
    idea.add_edge("uses", text)

    # Three parallel edges fan out instead of overlapping
    geometry.add_edge("clips", physics)
    geometry.add_edge("curves", physics)
    geometry.add_edge("points", physics)

    # A reverse edge curves away from its partner
    physics.add_edge("moves", geometry)

    mind_map.run()
    mind_map.step(400)
    mind_map.stop()
    mind_map.save_svg("output/example")

    print("Mind map saved to output/example.svg")


if __name__ == "__main__":
    setup_logging(logging.INFO)
    os.makedirs("output", exist_ok=True)

    main()
    modern_example()
