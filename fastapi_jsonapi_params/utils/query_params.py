"""Helpers for JSON:API query parameter parsing."""

from __future__ import annotations

import re
from typing import Any, Iterable, Mapping

_BRACKET_KEY = re.compile(r"^([^\[\]]+)((?:\[[^\[\]]*\])+)$")
_BRACKET_PART = re.compile(r"\[([^\[\]]*)\]")


def split_csv(value: str) -> list[str]:
    """Split a comma separated value, dropping blank items."""
    return [item for item in (part.strip() for part in value.split(",")) if item]


def _bracket_path(key: str) -> list[str]:
    match = _BRACKET_KEY.match(key)
    if not match:
        return [key]
    return [match.group(1), *_BRACKET_PART.findall(match.group(2))]


def nest_query_params(items: Iterable[tuple[str, Any]]) -> dict[str, Any]:
    """Fold flat ``family[key][op]=value`` pairs into nested mappings.

    ``fields[articles]=title`` becomes ``{"fields": {"articles": "title"}}``
    and ``filter[age][gt]=3`` becomes ``{"filter": {"age": {"gt": "3"}}}``.
    Keys without brackets are kept as they are; a later value for the same
    path replaces an earlier one.
    """
    nested: dict[str, Any] = {}
    for key, value in items:
        path = _bracket_path(key)
        target = nested
        for step in path[:-1]:
            child = target.get(step)
            if not isinstance(child, dict):
                child = {}
                target[step] = child
            target = child
        target[path[-1]] = value
    return nested


def copy_mapping(value: Any) -> dict[str, Any] | None:
    """Return a shallow copy of a mapping value, or None for anything else."""
    if isinstance(value, Mapping):
        return dict(value)
    return None
