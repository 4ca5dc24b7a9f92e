"""Graph construction from record sources."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from .config import LayoutOptions
from .logging_utils import apply_debug_logging
from .model import Edge, Graph, Node, NodeId, coerce_category
from .parser import parse_distance
from .records import Record, RecordSource

logger = logging.getLogger(__name__)


def _resolve_target(source: RecordSource, target: str, from_id: NodeId) -> NodeId:
    resolver = getattr(source, "resolve", None)
    if not callable(resolver):
        return target
    try:
        resolved = resolver(target, from_id)
    except Exception:
        logger.exception("Record source failed to resolve %r from %r", target, from_id)
        return target
    if isinstance(resolved, str) and resolved:
        return resolved
    logger.debug("Unresolved target %r from %r kept as literal", target, from_id)
    return target


def _require_id(record: Record) -> None:
    if not record.id:
        raise ValueError(f"record has no id: {record!r}")


def node_from_record(record: Record, options: LayoutOptions) -> Node:
    """Create the node for ``record``; the record must have an id."""

    _require_id(record)
    category = coerce_category(record.get(options.type_key).as_text())
    name = record.get(options.name_key).as_text() or record.basename
    color = record.get(options.color_key)
    return Node(
        id=record.id,
        category=category,
        name=name,
        color=color.value if color.kind == "string" and color.value.strip() else None,
        size=record.get(options.size_key).as_number(),
    )


def distance_items(record: Record, options: LayoutOptions) -> List[object]:
    """Concatenate the distance lists stored under every configured key."""

    items: List[object] = []
    for key in options.distances_keys:
        value = record.get(key)
        if value.kind == "list":
            items.extend(value.items())
        elif not value.is_none:
            logger.debug("Ignoring non-list %s value on %s", key, record.id)
    return items


def edges_from_record(
    record: Record, options: LayoutOptions, source: Optional[RecordSource] = None
) -> List[Edge]:
    _require_id(record)
    edges: List[Edge] = []
    for item in distance_items(record, options):
        parsed = parse_distance(item)
        if parsed.target is None:
            continue
        to_id = parsed.target
        if options.resolve_links and source is not None:
            to_id = _resolve_target(source, to_id, record.id)
        edges.append(Edge(from_id=record.id, to_id=to_id, length=parsed.length))
    return edges


def build_graph_from_records(
    records: Iterable[Record],
    options: LayoutOptions = LayoutOptions(),
    *,
    source: Optional[RecordSource] = None,
) -> Graph:
    nodes: Dict[NodeId, Node] = {}
    edges: List[Edge] = []
    skipped = 0
    for record in records:
        if not record.id:
            skipped += 1
            continue
        if record.id in nodes:
            logger.debug("Duplicate record id %r replaces the earlier node", record.id)
        nodes[record.id] = node_from_record(record, options)
        edges.extend(edges_from_record(record, options, source))

    if skipped:
        logger.debug("Skipped %d records without an identity", skipped)
    graph = Graph(nodes=list(nodes.values()), edges=edges)
    logger.info("Built graph with %d nodes and %d edges", len(graph.nodes), len(graph.edges))
    return graph


def build_graph(source: RecordSource, options: LayoutOptions = LayoutOptions()) -> Graph:
    """Build the node and edge sets for every record yielded by ``source``."""

    return build_graph_from_records(source.records(), options, source=source)


apply_debug_logging(globals(), logger=logger)


__all__ = [
    "build_graph",
    "build_graph_from_records",
    "distance_items",
    "edges_from_record",
    "node_from_record",
]
