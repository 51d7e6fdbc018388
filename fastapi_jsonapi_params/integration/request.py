"""Read-only view of the current HTTP request used by the parameters parser."""

from __future__ import annotations

from typing import Any, Mapping, Protocol

from starlette.requests import Request

from fastapi_jsonapi_params.utils.query_params import nest_query_params


class CurrentRequest(Protocol):
    """What the parser needs from a request: headers and the input map."""

    def get_header(self, name: str) -> str | None:
        """Return a header value by case-insensitive name, or None."""
        ...

    def get_input(self) -> Mapping[str, Any]:
        """Return the parsed input parameters."""
        ...


class StarletteRequestAdapter:
    """Expose a Starlette request through the CurrentRequest interface."""

    def __init__(self, request: Request) -> None:
        """Wrap the request; nothing is read until asked for."""
        self.request = request

    def get_header(self, name: str) -> str | None:
        """Return a header value; Starlette headers are case-insensitive."""
        return self.request.headers.get(name)

    def get_input(self) -> dict[str, Any]:
        """Return query parameters with ``family[key]`` names folded into mappings."""
        return nest_query_params(self.request.query_params.multi_items())
