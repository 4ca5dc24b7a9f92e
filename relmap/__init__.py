from .attributes import AttributeValue
from .builder import build_graph, build_graph_from_records
from .config import Canvas, LayoutOptions
from .lengths import normalize_length, rescale_lengths
from .model import NODE_CATEGORIES, Edge, Graph, Node, ParsedDistance
from .parser import parse_distance
from .pipeline import MapLayout, layout_graph, layout_map, render_map_svg
from .projections import project
from .records import InMemoryRecordSource, Record, RecordLoadError, RecordSource, load_records
from .render import build_render_plan, render_svg, render_tikz, render_tikz_document
from .solver import LayoutReport, initialize_positions, layout_residuals, solve
from .validate import ValidationError, validate_canvas, validate_options

__all__ = [
    'AttributeValue',
    'build_graph',
    'build_graph_from_records',
    'Canvas',
    'LayoutOptions',
    'normalize_length',
    'rescale_lengths',
    'NODE_CATEGORIES',
    'Edge',
    'Graph',
    'Node',
    'ParsedDistance',
    'parse_distance',
    'MapLayout',
    'layout_graph',
    'layout_map',
    'render_map_svg',
    'project',
    'InMemoryRecordSource',
    'Record',
    'RecordLoadError',
    'RecordSource',
    'load_records',
    'build_render_plan',
    'render_svg',
    'render_tikz',
    'render_tikz_document',
    'LayoutReport',
    'initialize_positions',
    'layout_residuals',
    'solve',
    'ValidationError',
    'validate_canvas',
    'validate_options',
]
