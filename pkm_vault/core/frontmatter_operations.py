"""YAML frontmatter parsing and serialization."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

import yaml
from frontmatter.default_handlers import YAMLHandler

from pkm_vault.constants import FRONTMATTER_DELIMITER
from pkm_vault.data_models import Metadata, MetadataValue
from pkm_vault.errors import InvalidFrontmatter, MalformedMetadata

_YAML_HANDLER = YAMLHandler()


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


def _is_delimiter(line: str) -> bool:
    """Return True when ``line`` is a bare ``---`` delimiter (``\\r`` tolerated)."""
    return line.rstrip("\r") == FRONTMATTER_DELIMITER


def _normalize_value(value: Any, path: str) -> MetadataValue:
    """Coerce a decoded YAML value into the supported metadata shapes.

    Dates become ISO strings, tuples become lists, and nested mappings are
    checked for string keys.

    Raises:
        MalformedMetadata: If the value (or a nested value) has no supported shape.
    """
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [_normalize_value(item, f"{path}[{index}]") for index, item in enumerate(value)]
    if isinstance(value, Mapping):
        nested: dict[str, MetadataValue] = {}
        for sub_key, sub_value in value.items():
            if not isinstance(sub_key, str):
                raise MalformedMetadata(f"key '{path}.{sub_key}' must be a string")
            nested[sub_key] = _normalize_value(sub_value, f"{path}.{sub_key}")
        return nested
    raise MalformedMetadata(f"field '{path}' uses unsupported type '{type(value).__name__}'")


def _normalize_metadata(metadata: Mapping[Any, Any]) -> Metadata:
    normalized: Metadata = {}
    for key, value in metadata.items():
        if not isinstance(key, str):
            raise MalformedMetadata(f"key '{key}' must be a string")
        normalized[key] = _normalize_value(value, key)
    return normalized


# ==============================================================================
# CODEC
# ==============================================================================


def parse_frontmatter(content: str) -> tuple[Metadata, str]:
    """Split raw note text into its metadata mapping and body.

    Args:
        content: Full note text as read from disk.

    Returns:
        A tuple ``(metadata, body)``. When the first line is not a ``---``
        delimiter there is no metadata block, ``metadata`` is empty and ``body``
        is ``content`` unchanged. Otherwise ``body`` is everything after the
        first closing delimiter line, byte for byte, so later ``---`` dividers
        stay in the body.

    Raises:
        InvalidFrontmatter: If the block is opened but never closed.
        MalformedMetadata: If the block is not valid YAML, does not decode to a
            mapping, or holds values outside the supported shapes.
    """
    lines = content.split("\n")
    if not _is_delimiter(lines[0]):
        return {}, content

    for closing_index in range(1, len(lines)):
        if _is_delimiter(lines[closing_index]):
            break
    else:
        raise InvalidFrontmatter(f"Missing closing '{FRONTMATTER_DELIMITER}' delimiter")

    block = "\n".join(lines[1:closing_index])
    body = "\n".join(lines[closing_index + 1 :])

    if not block.strip():
        return {}, body

    try:
        loaded = _YAML_HANDLER.load(block)
    except yaml.YAMLError as exc:
        raise MalformedMetadata(str(exc)) from exc

    if not isinstance(loaded, Mapping):
        raise MalformedMetadata("YAML did not parse to a dictionary")

    return _normalize_metadata(loaded), body


def serialize_frontmatter(metadata: Mapping[str, Any], body: str) -> str:
    """Join metadata and body back into note text.

    Empty metadata produces ``body`` alone; no empty block is emitted.

    Raises:
        MalformedMetadata: If the metadata holds unsupported values or cannot be
            dumped as YAML.
    """
    if not metadata:
        return body

    normalized = _normalize_metadata(metadata)
    try:
        dumped = _YAML_HANDLER.export(normalized, sort_keys=False)
    except yaml.YAMLError as exc:
        raise MalformedMetadata(f"Failed to serialize frontmatter: {exc}") from exc

    return f"{FRONTMATTER_DELIMITER}\n{dumped}\n{FRONTMATTER_DELIMITER}\n{body}"


def merge_metadata(metadata: Mapping[str, Any], updates: Mapping[str, Any]) -> Metadata:
    """Return ``metadata`` with each key in ``updates`` set, keeping all others."""
    merged: Metadata = dict(metadata)
    merged.update(_normalize_metadata(updates))
    return merged


def update_frontmatter(content: str, updates: Mapping[str, Any]) -> str:
    """Merge ``updates`` into the note's metadata and re-serialize it.

    Keys in ``updates`` overwrite or add entries; every other existing key is
    kept. The body is carried through untouched.

    Raises:
        InvalidFrontmatter: See :func:`parse_frontmatter`.
        MalformedMetadata: See :func:`parse_frontmatter`.
    """
    metadata, body = parse_frontmatter(content)
    return serialize_frontmatter(merge_metadata(metadata, updates), body)
