"""Helpers for splitting media type header values."""

from __future__ import annotations


def _split_parameters(value: str) -> list[str]:
    return [part.strip() for part in value.split(";") if part.strip()]


def unquote_param_value(value: str) -> str:
    """Strip one pair of surrounding double quotes, keeping the inner text."""
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value


def split_media_type(header: str | None) -> tuple[str, str, list[tuple[str, str]]]:
    """Split a header into lowercase type, subtype and raw parameter pairs.

    Segments without ``=`` or with an empty name are skipped. Parameter
    names are lower-cased, values are unquoted but otherwise untouched.
    """
    parts = _split_parameters(header or "")
    base = parts[0].lower() if parts else ""
    if "/" in base:
        type_, sub_type = (item.strip() for item in base.split("/", 1))
    else:
        type_, sub_type = base, ""

    params: list[tuple[str, str]] = []
    for param in parts[1:]:
        if "=" not in param:
            continue
        name, raw_value = param.split("=", 1)
        name = name.strip().lower()
        if not name:
            continue
        params.append((name, unquote_param_value(raw_value.strip())))
    return type_, sub_type, params


def quote_param_value(value: str) -> str:
    """Quote a parameter value when it would not survive re-parsing bare."""
    if value == "" or any(char in value for char in ',; "'):
        return f'"{value}"'
    return value
