"""JSON:API exceptions and error object builders."""

from typing import Any


class JSONAPIException(Exception):
    """Base class for errors that map onto a JSON:API error response."""

    status: int = 500
    title: str = "Internal Server Error"

    def __init__(self, detail: str | None = None, *, source: dict[str, Any] | None = None) -> None:
        """Store optional detail and source pointer for the error object."""
        super().__init__(detail or self.title)
        self.detail = detail
        self.source = source


class UnsupportedMediaType(JSONAPIException):
    """Request media type uses an extension the server does not accept."""

    status = 415
    title = "Unsupported Media Type"


class NotAcceptable(JSONAPIException):
    """Requested response media type uses an extension the server cannot produce."""

    status = 406
    title = "Not Acceptable"


class BadRequest(JSONAPIException):
    """Query parameters violate the server's parameter policy."""

    status = 400
    title = "Bad Request"


class JSONAPIErrorBuilder:
    """Build JSON:API error objects and error documents."""

    def error_object(
        self,
        *,
        status: str | None = None,
        code: str | None = None,
        title: str | None = None,
        detail: str | None = None,
        source: dict[str, Any] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API error object."""
        error: dict[str, Any] = {}
        if status is not None:
            error["status"] = status
        if code is not None:
            error["code"] = code
        if title is not None:
            error["title"] = title
        if detail is not None:
            error["detail"] = detail
        if source is not None:
            error["source"] = source
        if meta is not None:
            error["meta"] = meta
        if not error:
            raise ValueError("Error object must include at least one field.")
        return error

    def error_document(self, errors: list[dict[str, Any]]) -> dict[str, Any]:
        """Return a JSON:API document with an errors array."""
        return {"errors": errors}

    def from_exception(self, exc: JSONAPIException) -> dict[str, Any]:
        """Return an error document describing a raised JSON:API exception."""
        error = self.error_object(
            status=str(exc.status),
            code=type(exc).__name__,
            title=exc.title,
            detail=exc.detail,
            source=exc.source,
        )
        return self.error_document([error])
