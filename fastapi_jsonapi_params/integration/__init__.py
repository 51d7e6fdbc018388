"""Adapters between web frameworks and the parameters parser."""

from .request import CurrentRequest, StarletteRequestAdapter

__all__ = ["CurrentRequest", "StarletteRequestAdapter"]
