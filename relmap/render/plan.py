"""Resolution of a projected graph into drawable glyphs."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..config import LayoutOptions
from ..model import DEFAULT_CATEGORY, Graph, NodeCategory

logger = logging.getLogger(__name__)

DEFAULT_FILL = "var(--interactive-accent, #7f6df2)"
EDGE_STROKE = "var(--text-muted, #999999)"
LABEL_FILL = "var(--text-normal, #222222)"
EDGE_WIDTH = 1.5
LABEL_FONT_SIZE = 12
LABEL_GAP = 2.0
SECONDARY_OPACITY = 0.5


@dataclass
class NodeGlyph:
    id: str
    category: NodeCategory
    x: float
    y: float
    radius: float
    fill: Optional[str]
    opacity: float
    label: Optional[str] = None

    @property
    def label_anchor(self) -> Tuple[float, float]:
        return (self.x + self.radius + LABEL_GAP, self.y - self.radius - LABEL_GAP)


@dataclass
class SegmentGlyph:
    from_id: str
    to_id: str
    start: Tuple[float, float]
    end: Tuple[float, float]


@dataclass
class RenderPlan:
    """Everything a renderer draws; edges first, then nodes on top."""

    segments: List[SegmentGlyph] = field(default_factory=list)
    nodes: List[NodeGlyph] = field(default_factory=list)
    skipped_edges: int = 0


def build_render_plan(graph: Graph, options: LayoutOptions = LayoutOptions()) -> RenderPlan:
    """Resolve edges to pixel endpoints and nodes to circles with labels.

    Expects node coordinates to already be in pixel space. Edges whose
    endpoints are missing are counted and left out.
    """

    index = graph.index()
    plan = RenderPlan()
    for edge in graph.edges:
        a = index.get(edge.from_id)
        b = index.get(edge.to_id)
        if a is None or b is None:
            plan.skipped_edges += 1
            continue
        plan.segments.append(SegmentGlyph(edge.from_id, edge.to_id, (a.x, a.y), (b.x, b.y)))

    for node in graph.nodes:
        radius = node.size if node.size is not None and node.size > 0 else options.default_node_size
        plan.nodes.append(
            NodeGlyph(
                id=node.id,
                category=node.category,
                x=node.x,
                y=node.y,
                radius=float(radius),
                fill=node.color,
                opacity=1.0 if node.category == DEFAULT_CATEGORY else SECONDARY_OPACITY,
                label=node.name or None,
            )
        )

    if plan.skipped_edges:
        logger.info("Skipped %d dangling edges while drawing", plan.skipped_edges)
    return plan
