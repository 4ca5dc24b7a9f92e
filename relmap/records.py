"""Record source interface and the in-memory/JSON implementation."""

from __future__ import annotations

import json
import logging
import posixpath
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Protocol, Sequence, Union

from .attributes import NONE, AttributeValue, classify_attributes

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".md"

_ID_FIELDS = ("id", "path")
_ATTRIBUTE_FIELDS = ("attributes", "frontmatter")


class RecordLoadError(ValueError):
    """Raised when a records file does not have one of the accepted shapes."""


@dataclass
class Record:
    """One source entity: an identity plus its attribute bag."""

    id: Optional[str]
    attributes: Dict[str, AttributeValue] = field(default_factory=dict)

    @classmethod
    def from_raw(cls, record_id: Optional[str], raw: Optional[Mapping[str, object]] = None) -> "Record":
        return cls(record_id, classify_attributes(raw or {}))

    def get(self, key: str) -> AttributeValue:
        return self.attributes.get(key, NONE)

    @property
    def basename(self) -> Optional[str]:
        """Last path component of the id without its extension."""

        if not self.id:
            return None
        tail = posixpath.basename(self.id.replace("\\", "/"))
        stem, _ = posixpath.splitext(tail)
        return stem or tail or None


class RecordSource(Protocol):
    def records(self) -> Iterable[Record]:
        ...

    def resolve(self, raw_target: str, from_id: str) -> Optional[str]:
        ...


def _basename_key(identifier: str, extension: str) -> str:
    tail = posixpath.basename(identifier.replace("\\", "/")) or identifier
    if extension and len(tail) > len(extension) and tail.lower().endswith(extension.lower()):
        tail = tail[: -len(extension)]
    return tail.lower()


class InMemoryRecordSource:
    """Record source backed by a list, resolving targets like a vault link resolver.

    A target resolves to an id that equals it, to an id equal to the target
    plus the default extension, and finally to the first record whose
    basename matches case-insensitively.
    """

    def __init__(self, records: Sequence[Record], *, extension: str = DEFAULT_EXTENSION):
        self._records: List[Record] = list(records)
        self._extension = extension
        self._ids = {record.id for record in self._records if record.id}
        self._by_basename: Dict[str, str] = {}
        for record in self._records:
            if record.id:
                self._by_basename.setdefault(_basename_key(record.id, extension), record.id)

    def __len__(self) -> int:
        return len(self._records)

    def records(self) -> Iterator[Record]:
        return iter(self._records)

    def resolve(self, raw_target: str, from_id: str) -> Optional[str]:
        target = raw_target.strip()
        if not target:
            return None
        if target in self._ids:
            return target
        with_ext = target + self._extension
        if with_ext in self._ids:
            return with_ext
        return self._by_basename.get(_basename_key(target, self._extension))

    @classmethod
    def from_mappings(cls, data: Mapping[str, Mapping[str, object]]) -> "InMemoryRecordSource":
        return cls([Record.from_raw(record_id, attrs) for record_id, attrs in data.items()])


def _record_from_entry(entry: object, position: int) -> Record:
    if not isinstance(entry, Mapping):
        raise RecordLoadError(f"record #{position} must be an object, got {type(entry).__name__}")
    record_id = next((entry[key] for key in _ID_FIELDS if entry.get(key)), None)
    if record_id is not None and not isinstance(record_id, str):
        record_id = str(record_id)
    attrs: object = next((entry[key] for key in _ATTRIBUTE_FIELDS if key in entry), {})
    if attrs is None:
        attrs = {}
    if not isinstance(attrs, Mapping):
        raise RecordLoadError(f"record #{position} attributes must be an object")
    return Record.from_raw(record_id, attrs)


def records_from_json(data: object) -> List[Record]:
    """Build records from decoded JSON (a list of entries or an ``{id: attrs}`` object)."""

    if isinstance(data, list):
        return [_record_from_entry(entry, idx) for idx, entry in enumerate(data)]
    if isinstance(data, Mapping):
        records = []
        for record_id, attrs in data.items():
            if attrs is not None and not isinstance(attrs, Mapping):
                raise RecordLoadError(f"attributes of {record_id!r} must be an object")
            records.append(Record.from_raw(record_id, attrs))
        return records
    raise RecordLoadError(f"records must be a list or an object, got {type(data).__name__}")


def load_records(path: Union[str, Path]) -> InMemoryRecordSource:
    path = Path(path)
    with path.open(encoding="utf-8") as fin:
        try:
            data = json.load(fin)
        except json.JSONDecodeError as exc:
            raise RecordLoadError(f"{path}: invalid JSON ({exc})") from exc
    records = records_from_json(data)
    logger.info("Loaded %d records from %s", len(records), path)
    return InMemoryRecordSource(records)
