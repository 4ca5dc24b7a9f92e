"""SVG renderer for render plans."""

from __future__ import annotations

from typing import List

from ..config import Canvas
from .plan import DEFAULT_FILL, EDGE_STROKE, EDGE_WIDTH, LABEL_FILL, LABEL_FONT_SIZE, RenderPlan
from .utils import format_float, xml_attr, xml_text

SVG_NS = "http://www.w3.org/2000/svg"


def render_svg(plan: RenderPlan, canvas: Canvas = Canvas()) -> str:
    """Render ``plan`` as a standalone SVG document."""

    width = format_float(canvas.width)
    height = format_float(canvas.height)
    lines: List[str] = [
        f'<svg xmlns="{SVG_NS}" width="{width}" height="{height}" viewBox="0 0 {width} {height}">',
        '  <g class="map-content">',
    ]

    for seg in plan.segments:
        lines.append(
            "    <line x1=\"{x1}\" y1=\"{y1}\" x2=\"{x2}\" y2=\"{y2}\" stroke={stroke} stroke-width=\"{w}\"/>".format(
                x1=format_float(seg.start[0]),
                y1=format_float(seg.start[1]),
                x2=format_float(seg.end[0]),
                y2=format_float(seg.end[1]),
                stroke=xml_attr(EDGE_STROKE),
                w=format_float(EDGE_WIDTH),
            )
        )

    for glyph in plan.nodes:
        lines.append(
            "    <circle cx=\"{cx}\" cy=\"{cy}\" r=\"{r}\" fill={fill} opacity=\"{op}\"/>".format(
                cx=format_float(glyph.x),
                cy=format_float(glyph.y),
                r=format_float(glyph.radius),
                fill=xml_attr(glyph.fill or DEFAULT_FILL),
                op=format_float(glyph.opacity),
            )
        )
        if glyph.label:
            lx, ly = glyph.label_anchor
            lines.append(
                "    <text x=\"{x}\" y=\"{y}\" fill={fill} font-size=\"{size}\">{text}</text>".format(
                    x=format_float(lx),
                    y=format_float(ly),
                    fill=xml_attr(LABEL_FILL),
                    size=LABEL_FONT_SIZE,
                    text=xml_text(glyph.label),
                )
            )

    lines.append("  </g>")
    lines.append("</svg>")
    return "\n".join(lines) + "\n"
