"""TikZ renderer for render plans."""

from __future__ import annotations

from typing import Dict, List, Optional

from ..config import Canvas
from .plan import EDGE_WIDTH, RenderPlan
from .utils import format_float, hex_color, is_tikz_color_name, latex_escape

PT_PER_PX = 0.75
DEFAULT_COLOR = "mapaccent"

standalone_tpl = r"""\documentclass[border=2pt]{standalone}
\usepackage[utf8]{inputenc}
\usepackage{tikz}
\definecolor{mapaccent}{HTML}{7F6DF2}
\definecolor{mapmuted}{HTML}{999999}
\tikzset{
  pathway/.style={draw=mapmuted, line width=%spt},
  maplabel/.style={font=\footnotesize, inner sep=0pt, anchor=base west},
}
\begin{document}
%s
\end{document}
"""


def _color_definitions(plan: RenderPlan) -> Dict[str, str]:
    """Map every hex node color to a generated TikZ color name."""

    names: Dict[str, str] = {}
    for glyph in plan.nodes:
        if not glyph.fill:
            continue
        digits = hex_color(glyph.fill)
        if digits and digits not in names:
            names[digits] = f"mapcolor{len(names)}"
    return names


def _tikz_color(fill: Optional[str], defined: Dict[str, str]) -> str:
    if not fill:
        return DEFAULT_COLOR
    digits = hex_color(fill)
    if digits:
        return defined[digits]
    if is_tikz_color_name(fill):
        return fill.strip()
    return DEFAULT_COLOR


def render_tikz(plan: RenderPlan, canvas: Canvas = Canvas()) -> str:
    """Render ``plan`` as a ``tikzpicture`` in pixel units with y pointing down."""

    defined = _color_definitions(plan)
    lines: List[str] = []
    for digits, name in defined.items():
        lines.append(f"\\definecolor{{{name}}}{{HTML}}{{{digits}}}")
    scale = format_float(PT_PER_PX)
    lines.append(f"\\begin{{tikzpicture}}[x={scale}pt, y=-{scale}pt]")
    lines.append(
        f"  \\useasboundingbox (0, 0) rectangle ({format_float(canvas.width)}, {format_float(canvas.height)});"
    )

    for seg in plan.segments:
        lines.append(
            "  \\draw[pathway] ({x1}, {y1}) -- ({x2}, {y2});".format(
                x1=format_float(seg.start[0]),
                y1=format_float(seg.start[1]),
                x2=format_float(seg.end[0]),
                y2=format_float(seg.end[1]),
            )
        )

    for glyph in plan.nodes:
        lines.append(
            "  \\fill[{color}, opacity={op}] ({x}, {y}) circle[radius={r}];".format(
                color=_tikz_color(glyph.fill, defined),
                op=format_float(glyph.opacity),
                x=format_float(glyph.x),
                y=format_float(glyph.y),
                r=format_float(glyph.radius),
            )
        )
        if glyph.label:
            lx, ly = glyph.label_anchor
            lines.append(
                "  \\node[maplabel] at ({x}, {y}) {{{text}}};".format(
                    x=format_float(lx), y=format_float(ly), text=latex_escape(glyph.label)
                )
            )

    lines.append("\\end{tikzpicture}")
    return "\n".join(lines)


def render_tikz_document(plan: RenderPlan, canvas: Canvas = Canvas()) -> str:
    """Render a standalone LaTeX document containing the map picture."""

    return standalone_tpl % (format_float(EDGE_WIDTH * PT_PER_PX), render_tikz(plan, canvas))
