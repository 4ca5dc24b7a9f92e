"""Projection of solved unit-square coordinates onto a pixel canvas."""

from __future__ import annotations

import logging
import math
from typing import Sequence, Tuple

from .config import Canvas
from .model import Node

logger = logging.getLogger(__name__)


def clamp01(value: float) -> float:
    if not math.isfinite(value):
        return 0.5
    return min(1.0, max(0.0, value))


def project_point(rel_x: float, rel_y: float, canvas: Canvas) -> Tuple[float, float]:
    return (
        canvas.padding + clamp01(rel_x) * canvas.inner_width,
        canvas.padding + clamp01(rel_y) * canvas.inner_height,
    )


def project(
    nodes: Sequence[Node],
    width: float = 800.0,
    height: float = 600.0,
    padding: float = 24.0,
) -> None:
    """Replace relative coordinates of ``nodes`` with pixel coordinates in place.

    ``pixel = padding + clamp01(relative) * max(1, dimension - 2 * padding)``
    """

    canvas = Canvas(width=width, height=height, padding=padding)
    for node in nodes:
        node.x, node.y = project_point(node.x, node.y, canvas)
    logger.info(
        "Projected %d nodes onto %sx%s canvas with padding %s", len(nodes), width, height, padding
    )


def project_to_canvas(nodes: Sequence[Node], canvas: Canvas) -> None:
    project(nodes, canvas.width, canvas.height, canvas.padding)
