"""Parsing of single distance references into a target and a relative length."""

from __future__ import annotations

import logging
import re
from typing import Mapping, Optional

from .lengths import normalize_length
from .model import ParsedDistance

logger = logging.getLogger(__name__)

_LINK_RE = re.compile(r"^\s*\[\[(.+?)\]\]\s*$")
_TRAILING_NUMBER_RE = re.compile(r"^(.*?)\s*(?:@|\(|:|\|)\s*(\d+(?:\.\d+)?)\)?\s*$")

TARGET_FIELDS = ("target", "path", "id")
LENGTH_FIELDS = ("distance", "length")

_UNPARSED = ParsedDistance(None, None)


def _clean_target(text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    text = text.strip()
    return text or None


def _parse_link(inside: str) -> ParsedDistance:
    parts = inside.split("#")
    target = _clean_target(parts[0])
    fragment = parts[1].strip() if len(parts) > 1 else ""
    length = normalize_length(fragment) if fragment else None
    return ParsedDistance(target, length)


def parse_distance_string(text: str) -> ParsedDistance:
    match = _LINK_RE.match(text)
    if match:
        return _parse_link(match.group(1))

    match = _TRAILING_NUMBER_RE.match(text)
    if match:
        return ParsedDistance(_clean_target(match.group(1)), normalize_length(match.group(2)))

    return ParsedDistance(_clean_target(text), None)


def parse_distance_mapping(data: Mapping[str, object]) -> ParsedDistance:
    target: Optional[str] = None
    for key in TARGET_FIELDS:
        candidate = data.get(key)
        if candidate:
            if isinstance(candidate, str):
                target = _clean_target(candidate)
            break

    raw_length: object = None
    for key in LENGTH_FIELDS:
        if data.get(key) is not None:
            raw_length = data[key]
            break

    return ParsedDistance(target, normalize_length(raw_length))


def parse_distance(raw: object) -> ParsedDistance:
    """Parse one distance reference.

    Accepted forms, tried in order for strings::

        [[Target#50]]     bracketed link, fragment is the length
        Target @ 0.4      also ``:``, ``|`` and ``Target (0.4)``
        Target            bare target, no length

    Mappings are read through ``target``/``path``/``id`` and
    ``distance``/``length``. Anything unusable gives ``target=None``.
    """

    if isinstance(raw, str):
        parsed = parse_distance_string(raw)
    elif isinstance(raw, Mapping):
        parsed = parse_distance_mapping(raw)
    else:
        parsed = _UNPARSED

    if parsed.target is None:
        logger.debug("Dropping unparseable distance reference %r", raw)
    return parsed
