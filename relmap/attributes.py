"""Tagged attribute values read from record attribute bags."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any, Dict, Literal, Mapping, Optional, Tuple

AttrKind = Literal["none", "boolean", "number", "string", "list", "mapping"]


@dataclass(frozen=True)
class AttributeValue:
    """One attribute value, classified once when the record is ingested."""

    kind: AttrKind
    value: Any = None

    @classmethod
    def from_raw(cls, raw: object) -> "AttributeValue":
        if raw is None:
            return NONE
        # bool is a subclass of int, so it must be checked first
        if isinstance(raw, bool):
            return cls("boolean", raw)
        if isinstance(raw, numbers.Real):
            value = float(raw)
            if not math.isfinite(value):
                return NONE
            return cls("number", value)
        if isinstance(raw, str):
            return cls("string", raw)
        if isinstance(raw, Mapping):
            return cls("mapping", dict(raw))
        if isinstance(raw, (list, tuple)):
            return cls("list", tuple(raw))
        return cls("string", str(raw))

    @property
    def is_none(self) -> bool:
        return self.kind == "none"

    def as_number(self) -> Optional[float]:
        return self.value if self.kind == "number" else None

    def as_text(self) -> Optional[str]:
        if self.kind == "string":
            return self.value
        if self.kind == "number":
            return f"{self.value:g}"
        return None

    def items(self) -> Tuple[Any, ...]:
        """Return list items, or an empty tuple for any other kind."""

        return self.value if self.kind == "list" else ()


NONE = AttributeValue("none")


def classify_attributes(raw: Mapping[str, object]) -> Dict[str, AttributeValue]:
    """Convert a raw attribute mapping into tagged values."""

    return {str(key): AttributeValue.from_raw(value) for key, value in raw.items()}
