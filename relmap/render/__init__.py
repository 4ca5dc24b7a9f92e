"""Drawing of solved maps as SVG or TikZ."""

from .plan import NodeGlyph, RenderPlan, SegmentGlyph, build_render_plan
from .svg import render_svg
from .tikz import render_tikz, render_tikz_document

__all__ = [
    "NodeGlyph",
    "RenderPlan",
    "SegmentGlyph",
    "build_render_plan",
    "render_svg",
    "render_tikz",
    "render_tikz_document",
]
