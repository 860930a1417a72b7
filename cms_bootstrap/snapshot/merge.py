"""Deep merge used to apply caller overrides to an assembled snapshot."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any


def as_mapping(value: Any) -> dict[str, Any]:
    """
    Coerce an override of any shape into a mapping.

    Lists and tuples become ``{"0": ..., "1": ...}``; any other non-mapping
    value becomes ``{"0": value}``. Keys are strings so the published and
    persisted snapshots stay identical.
    """
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, (list, tuple)):
        return {str(index): item for index, item in enumerate(value)}
    return {"0": value}


def deep_merge(base: Mapping[str, Any], override: Any) -> dict[str, Any]:
    """
    Return a new mapping with ``override`` merged into ``base``.

    Mappings merge key by key, recursively. Any other value in ``override``
    (scalars, ``None`` and lists included) replaces the value in ``base``;
    lists are never concatenated. A top-level ``override`` that is not a
    mapping is coerced with ``as_mapping`` first. Neither argument is
    modified.
    """
    merged = copy.deepcopy(dict(base))
    if override is None:
        return merged

    for key, value in as_mapping(override).items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged
