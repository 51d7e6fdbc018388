"""Utility helpers for JSON:API header and query parsing."""

from .content_negotiation import quote_param_value, split_media_type, unquote_param_value
from .query_params import copy_mapping, nest_query_params, split_csv

__all__ = [
    "copy_mapping",
    "nest_query_params",
    "quote_param_value",
    "split_csv",
    "split_media_type",
    "unquote_param_value",
]
