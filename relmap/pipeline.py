"""Refresh pipeline: build, solve, project and draw in one pass."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List

from .builder import build_graph
from .config import Canvas, LayoutOptions
from .model import Graph
from .projections import project_to_canvas
from .records import RecordSource
from .render import RenderPlan, build_render_plan, render_svg, render_tikz, render_tikz_document
from .solver import LayoutReport, layout_residuals, solve
from .validate import validate_options

logger = logging.getLogger(__name__)


@dataclass
class MapLayout:
    """Result of one refresh; ``graph`` holds pixel coordinates."""

    graph: Graph
    report: LayoutReport
    canvas: Canvas
    options: LayoutOptions

    def render_plan(self) -> RenderPlan:
        return build_render_plan(self.graph, self.options)

    def to_svg(self) -> str:
        return render_svg(self.render_plan(), self.canvas)

    def to_tikz(self, *, standalone: bool = False) -> str:
        if standalone:
            return render_tikz_document(self.render_plan(), self.canvas)
        return render_tikz(self.render_plan(), self.canvas)

    def to_dict(self) -> Dict[str, List[Dict[str, object]]]:
        index = self.graph.index()
        return {
            "nodes": [
                {
                    "id": node.id,
                    "category": node.category,
                    "name": node.name,
                    "x": node.x,
                    "y": node.y,
                    "color": node.color,
                    "size": node.size,
                }
                for node in self.graph.nodes
            ],
            "edges": [
                {
                    "from": edge.from_id,
                    "to": edge.to_id,
                    "length": edge.length,
                    "resolved": edge.from_id in index and edge.to_id in index,
                }
                for edge in self.graph.edges
            ],
        }


def layout_graph(graph: Graph, options: LayoutOptions = LayoutOptions(), canvas: Canvas = Canvas()) -> MapLayout:
    """Solve and project an already built graph."""

    solve(graph.nodes, graph.edges, options)
    report = layout_residuals(graph.nodes, graph.edges, options)
    logger.info(
        "Layout finished: max length error=%.6g over %d edges (%d dangling)",
        report.max_error,
        len(report.residuals),
        report.skipped_edges,
    )
    project_to_canvas(graph.nodes, canvas)
    return MapLayout(graph=graph, report=report, canvas=canvas, options=options)


def layout_map(
    source: RecordSource, options: LayoutOptions = LayoutOptions(), canvas: Canvas = Canvas()
) -> MapLayout:
    """Rebuild the map for ``source`` from scratch.

    Raises ``ValidationError`` for out-of-range options. Malformed record
    data and degenerate canvases never raise; projection floors the usable
    extent at one pixel.
    """

    validate_options(options)
    graph = build_graph(source, options)
    return layout_graph(graph, options, canvas)


def render_map_svg(
    source: RecordSource, options: LayoutOptions = LayoutOptions(), canvas: Canvas = Canvas()
) -> str:
    return layout_map(source, options, canvas).to_svg()
