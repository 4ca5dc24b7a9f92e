"""Layout configuration passed explicitly through the pipeline."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutOptions:
    """Options shared by the graph builder, solver and renderer."""

    distances_keys: Tuple[str, ...] = ("distances", "pathways")
    size_key: str = "size"
    color_key: str = "color"
    type_key: str = "type"
    name_key: str = "name"
    resolve_links: bool = True
    normalize_absolute_lengths: bool = True
    default_edge_length_rel: float = 0.5
    iterations: int = 400
    stiffness: float = 0.08
    damping: float = 0.85
    default_node_size: float = 10.0

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "LayoutOptions":
        """Build options from a settings mapping using camelCase or snake_case keys."""

        known = {f.name for f in dataclasses.fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in data.items():
            name = _SETTINGS_ALIASES.get(key, key)
            if name not in known:
                logger.warning("Ignoring unknown layout setting %r", key)
                continue
            values[name] = value

        keys = values.get("distances_keys")
        if keys is not None:
            if isinstance(keys, str):
                keys = [part.strip() for part in keys.split(",")]
            keys = tuple(str(k).strip() for k in keys if str(k).strip())
            values["distances_keys"] = keys or ("distances",)
        return cls(**values)

    def replace(self, **changes: Any) -> "LayoutOptions":
        return dataclasses.replace(self, **changes)


@dataclass(frozen=True)
class Canvas:
    """Pixel drawing surface."""

    width: float = 800.0
    height: float = 600.0
    padding: float = 24.0

    @property
    def inner_width(self) -> float:
        return max(1.0, self.width - 2.0 * self.padding)

    @property
    def inner_height(self) -> float:
        return max(1.0, self.height - 2.0 * self.padding)


_SETTINGS_ALIASES = {
    "distancesKeys": "distances_keys",
    "sizeKey": "size_key",
    "colorKey": "color_key",
    "typeKey": "type_key",
    "nameKey": "name_key",
    "resolveLinks": "resolve_links",
    "normalizeAbsoluteLengths": "normalize_absolute_lengths",
    "defaultEdgeLengthRel": "default_edge_length_rel",
    "defaultSize": "default_node_size",
}
