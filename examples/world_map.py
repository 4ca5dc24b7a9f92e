"""Example pipeline: lay out a handful of places from their relative distances."""

from relmap import Canvas, InMemoryRecordSource, LayoutOptions, layout_map

RECORDS = {
    "world/Aldmere.md": {
        "type": "region",
        "name": "Aldmere",
        "distances": ["Brackwater @ 0.3", "[[Coldspire#55]]"],
    },
    "world/Brackwater.md": {
        "color": "#3366cc",
        "pathways": [{"target": "Coldspire", "distance": 0.4}],
    },
    "world/Coldspire.md": {
        "size": 14,
        "distances": ["Dunmoor : 25", "The Far Reach"],
    },
    "world/Dunmoor.md": {"type": "territory"},
}


def main() -> None:
    source = InMemoryRecordSource.from_mappings(RECORDS)
    layout = layout_map(source, LayoutOptions(iterations=400), Canvas(800, 600, 24))

    print("Max length error:", layout.report.max_error)
    print("Dangling edges:", layout.report.skipped_edges)
    for node in layout.graph.nodes:
        print(f"{node.name}: ({node.x:.1f}, {node.y:.1f})")
    print()
    print(layout.to_svg())


if __name__ == "__main__":
    main()
