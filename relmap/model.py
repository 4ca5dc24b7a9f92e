"""Core data structures shared by the builder, solver and renderer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Literal, Optional, Tuple

NodeId = str

NodeCategory = Literal[
    "world",
    "continent",
    "region",
    "territory",
    "location",
    "pathway",
]

NODE_CATEGORIES: Tuple[str, ...] = (
    "world",
    "continent",
    "region",
    "territory",
    "location",
    "pathway",
)

DEFAULT_CATEGORY: NodeCategory = "location"


@dataclass
class Node:
    """One visual entity.

    ``x``/``y`` hold unit-square coordinates while solving and pixel
    coordinates after projection. ``NaN`` marks an unplaced node.
    """

    id: NodeId
    category: NodeCategory = DEFAULT_CATEGORY
    name: Optional[str] = None
    x: float = math.nan
    y: float = math.nan
    color: Optional[str] = None
    size: Optional[float] = None


@dataclass
class Edge:
    """Desired-distance constraint between two nodes (symmetric)."""

    from_id: NodeId
    to_id: NodeId
    length: Optional[float] = None
    label: Optional[str] = None


@dataclass(frozen=True)
class ParsedDistance:
    target: Optional[str]
    length: Optional[float] = None


@dataclass
class Graph:
    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)

    def index(self) -> Dict[NodeId, Node]:
        return {node.id: node for node in self.nodes}


def coerce_category(value: Optional[str]) -> NodeCategory:
    """Map a raw category string onto the fixed enumeration."""

    if value is None:
        return DEFAULT_CATEGORY
    text = value.strip().lower()
    if text in NODE_CATEGORIES:
        return text  # type: ignore[return-value]
    return DEFAULT_CATEGORY
