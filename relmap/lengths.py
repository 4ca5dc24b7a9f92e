"""Normalization of raw distance values to the relative [0, 1] scale."""

from __future__ import annotations

import logging
import math
import numbers
from typing import Iterable, Optional

from .model import Edge

logger = logging.getLogger(__name__)

PERCENT_SCALE = 100.0


def coerce_float(value: object) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, numbers.Real):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return float(text)
        except ValueError:
            return None
    return None


def normalize_length(raw: object) -> Optional[float]:
    """Return ``raw`` as a relative length, or ``None`` when it is out of range.

    Values in ``[0, 1]`` are already relative and pass through. Values in
    ``(1, 100]`` are read as percentages. Everything else is rejected.
    """

    value = coerce_float(raw)
    if value is None or not math.isfinite(value):
        return None
    if 0.0 <= value <= 1.0:
        return value
    if 0.0 <= value <= PERCENT_SCALE:
        return value / PERCENT_SCALE
    return None


def rescale_lengths(edges: Iterable[Edge]) -> Optional[float]:
    """Divide every edge length by the maximum when that maximum exceeds 1.

    Returns the divisor, or ``None`` when the lengths were left untouched.
    """

    edges = list(edges)
    finite = [edge.length for edge in edges if edge.length is not None and math.isfinite(edge.length)]
    if not finite:
        return None
    max_length = max(finite)
    if max_length <= 1.0:
        return None
    for edge in edges:
        if edge.length is not None and math.isfinite(edge.length):
            edge.length = edge.length / max_length
    logger.info("Rescaled %d edge lengths by max length %.6g", len(finite), max_length)
    return max_length
