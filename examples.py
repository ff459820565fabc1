"""Examples for mindplot documentation."""

from mindplot import MindMap, MindMapConfig, RenderConfig, Theme
from mindplot.layout import LayoutConfig


LIGHT_THEME = Theme(
    background="#ffffff",
    node_stroke="#94a3b8",
    text_color="#1e293b",
    edge_color="#64748b",
    arrow_fill="#64748b",
    verb_color="#64748b",
)


def hero_example():
    """Project planning map with verb labels on a light background."""
    config = MindMapConfig(
        theme=LIGHT_THEME,
        render=RenderConfig(show_verbs=True),
    )
    mind_map = MindMap(config)

    project = mind_map.add_vertex({"id": 1, "label": "goal", "name": "Launch"})
    design = mind_map.add_vertex({"id": 2, "label": "task", "name": "Design"})
    build = mind_map.add_vertex({"id": 3, "label": "task", "name": "Build"})
    test = mind_map.add_vertex({"id": 4, "label": "task", "name": "Test"})
    docs = mind_map.add_vertex({"id": 5, "label": "task", "name": "Docs"})

    project.add_edge("needs", design)
    project.add_edge("needs", build)
    project.add_edge("needs", docs)
    design.add_edge("feeds", build)
    build.add_edge("feeds", test)
    test.add_edge("blocks", build)
    test.add_edge("reports", project)

    mind_map.run()
    mind_map.step(500)
    mind_map.save_svg("docs/hero")


def example_hub():
    """A hub with many spokes, using a wider repulsion radius."""
    config = MindMapConfig(
        layout=LayoutConfig(repulsion_distance=400, edge_length=140),
    )
    mind_map = MindMap(config)

    hub = mind_map.add_vertex({"id": "hub", "name": "Hub"})
    for i in range(10):
        spoke = mind_map.add_vertex({"id": f"spoke-{i}", "name": f"Spoke {i}"})
        hub.add_edge("links", spoke)

    mind_map.run()
    mind_map.step(800)
    mind_map.save_svg("docs/hub")


if __name__ == "__main__":
    import os

    os.makedirs("docs", exist_ok=True)

    print("Generating hero example...")
    hero_example()

    print("Generating hub example...")
    example_hub()

    print("\nAll examples generated in docs/")
