import math
import numbers

from .config import Canvas, LayoutOptions


class ValidationError(Exception):
    pass


def _is_number(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool) and math.isfinite(value)


def _ensure_unit_fraction(name: str, value: object):
    if not _is_number(value) or not 0.0 < value <= 1.0:
        raise ValidationError(f'{name} must be a number in (0, 1], got {value!r}')


def _ensure_key(name: str, value: object):
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f'{name} must be a non-empty string, got {value!r}')


def validate_options(options: LayoutOptions) -> None:
    if not options.distances_keys:
        raise ValidationError('distances_keys must name at least one attribute')
    for key in options.distances_keys:
        _ensure_key('distances_keys entry', key)
    for name in ('size_key', 'color_key', 'type_key', 'name_key'):
        _ensure_key(name, getattr(options, name))
    for name in ('resolve_links', 'normalize_absolute_lengths'):
        if not isinstance(getattr(options, name), bool):
            raise ValidationError(f'{name} must be true|false')
    if isinstance(options.iterations, bool) or not isinstance(options.iterations, int) or options.iterations <= 0:
        raise ValidationError(f'iterations must be a positive integer, got {options.iterations!r}')
    _ensure_unit_fraction('default_edge_length_rel', options.default_edge_length_rel)
    _ensure_unit_fraction('stiffness', options.stiffness)
    _ensure_unit_fraction('damping', options.damping)
    if not _is_number(options.default_node_size) or options.default_node_size <= 0:
        raise ValidationError(f'default_node_size must be positive, got {options.default_node_size!r}')


def validate_canvas(canvas: Canvas) -> None:
    for name in ('width', 'height'):
        value = getattr(canvas, name)
        if not _is_number(value) or value <= 0:
            raise ValidationError(f'canvas {name} must be positive, got {value!r}')
    if not _is_number(canvas.padding) or canvas.padding < 0:
        raise ValidationError(f'canvas padding must be non-negative, got {canvas.padding!r}')
