"""Iterative relaxation of node positions toward desired edge lengths."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .config import LayoutOptions
from .lengths import rescale_lengths
from .logging_utils import apply_debug_logging
from .model import Edge, Node, NodeId

logger = logging.getLogger(__name__)

CIRCLE_CENTER = (0.5, 0.5)
CIRCLE_RADIUS = 0.4
MIN_DISTANCE = 1e-6


@dataclass
class EdgeResidual:
    from_id: NodeId
    to_id: NodeId
    target: float
    actual: float

    @property
    def error(self) -> float:
        return self.actual - self.target


@dataclass
class LayoutReport:
    residuals: List[EdgeResidual] = field(default_factory=list)
    skipped_edges: int = 0

    @property
    def max_error(self) -> float:
        if not self.residuals:
            return 0.0
        return max(abs(item.error) for item in self.residuals)


def _coords_array(nodes: Sequence[Node]) -> np.ndarray:
    return np.array([(node.x, node.y) for node in nodes], dtype=float).reshape(len(nodes), 2)


def _store_coords(nodes: Sequence[Node], coords: np.ndarray) -> None:
    for node, (x, y) in zip(nodes, coords.tolist()):
        node.x = x
        node.y = y


def _target_length(edge: Edge, options: LayoutOptions) -> float:
    if edge.length is not None and math.isfinite(edge.length):
        return float(edge.length)
    return float(options.default_edge_length_rel)


def _edge_pairs(
    nodes: Sequence[Node], edges: Sequence[Edge], options: LayoutOptions
) -> Tuple[List[Tuple[int, int, float]], int]:
    index: Dict[NodeId, int] = {node.id: idx for idx, node in enumerate(nodes)}
    pairs: List[Tuple[int, int, float]] = []
    skipped = 0
    for edge in edges:
        a = index.get(edge.from_id)
        b = index.get(edge.to_id)
        if a is None or b is None:
            skipped += 1
            continue
        pairs.append((a, b, _target_length(edge, options)))
    return pairs, skipped


def circle_positions(count: int) -> np.ndarray:
    """Return ``count`` evenly spaced positions on the initialization circle."""

    step = 2.0 * math.pi / max(1, count)
    angles = np.arange(count, dtype=float) * step
    coords = np.empty((count, 2), dtype=float)
    coords[:, 0] = CIRCLE_CENTER[0] + CIRCLE_RADIUS * np.cos(angles)
    coords[:, 1] = CIRCLE_CENTER[1] + CIRCLE_RADIUS * np.sin(angles)
    return coords


def initialize_positions(nodes: Sequence[Node]) -> int:
    """Place every node with non-finite coordinates on the circle; return how many moved."""

    if not nodes:
        return 0
    coords = _coords_array(nodes)
    unplaced = ~np.isfinite(coords).all(axis=1)
    count = int(unplaced.sum())
    if count:
        coords[unplaced] = circle_positions(len(nodes))[unplaced]
        _store_coords(nodes, coords)
    logger.info("Initialized %d of %d node positions on the unit circle", count, len(nodes))
    return count


def relax(coords: np.ndarray, pairs: Sequence[Tuple[int, int, float]], options: LayoutOptions) -> None:
    """Run the fixed number of relaxation rounds over ``pairs`` in place.

    Each edge moves both endpoints half the damped corrective force along
    their connecting line, toward each other when the edge is too long and
    apart when it is too short, then clamps them back into the unit square
    before the next edge is processed.
    """

    stiffness = float(options.stiffness)
    damping = float(options.damping)
    for _ in range(int(options.iterations)):
        for a, b, target in pairs:
            delta = coords[b] - coords[a]
            d = max(math.hypot(delta[0], delta[1]), MIN_DISTANCE)
            force = stiffness * (d - target)
            shift = force * (delta / d) * damping * 0.5
            coords[a] += shift
            coords[b] -= shift
            np.clip(coords[a], 0.0, 1.0, out=coords[a])
            np.clip(coords[b], 0.0, 1.0, out=coords[b])


def solve(nodes: Sequence[Node], edges: Sequence[Edge], options: LayoutOptions = LayoutOptions()) -> None:
    """Solve node positions in the unit square for the given edge lengths."""

    if not nodes:
        logger.info("Nothing to solve: graph has no nodes")
        return

    if options.normalize_absolute_lengths:
        rescale_lengths(edges)

    initialize_positions(nodes)
    pairs, skipped = _edge_pairs(nodes, edges, options)
    logger.info(
        "Relaxing %d nodes over %d edges for %d iterations (%d dangling edges skipped)",
        len(nodes),
        len(pairs),
        options.iterations,
        skipped,
    )
    coords = _coords_array(nodes)
    # externally supplied coordinates must start inside the unit square too
    np.clip(coords, 0.0, 1.0, out=coords)
    relax(coords, pairs, options)
    _store_coords(nodes, coords)


def layout_residuals(
    nodes: Sequence[Node], edges: Sequence[Edge], options: LayoutOptions = LayoutOptions()
) -> LayoutReport:
    """Report how far every resolvable edge is from its desired length."""

    index: Dict[NodeId, Node] = {node.id: node for node in nodes}
    report = LayoutReport()
    for edge in edges:
        a: Optional[Node] = index.get(edge.from_id)
        b: Optional[Node] = index.get(edge.to_id)
        if a is None or b is None:
            report.skipped_edges += 1
            continue
        actual = math.hypot(b.x - a.x, b.y - a.y)
        report.residuals.append(EdgeResidual(edge.from_id, edge.to_id, _target_length(edge, options), actual))
    return report


apply_debug_logging(globals(), logger=logger, skip={"_target_length"})


__all__ = [
    "EdgeResidual",
    "LayoutReport",
    "circle_positions",
    "initialize_positions",
    "layout_residuals",
    "relax",
    "solve",
]
