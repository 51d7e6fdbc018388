"""Core JSON:API exceptions and error helpers."""

from .errors import (
    BadRequest,
    JSONAPIErrorBuilder,
    JSONAPIException,
    NotAcceptable,
    UnsupportedMediaType,
)

__all__ = [
    "BadRequest",
    "JSONAPIErrorBuilder",
    "JSONAPIException",
    "NotAcceptable",
    "UnsupportedMediaType",
]
