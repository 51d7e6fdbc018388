"""JSON:API error handling middleware."""

import logging
from typing import Any

from starlette.responses import JSONResponse

from fastapi_jsonapi_params.config.settings import JSONAPI_MEDIA_TYPE
from fastapi_jsonapi_params.core.errors import JSONAPIErrorBuilder, JSONAPIException

logger = logging.getLogger(__name__)


def error_response(exc: JSONAPIException) -> JSONResponse:
    """Render a JSON:API exception as an error document response."""
    return JSONResponse(
        JSONAPIErrorBuilder().from_exception(exc),
        status_code=exc.status,
        media_type=JSONAPI_MEDIA_TYPE,
    )


class ErrorHandlerMiddleware:
    """Convert exceptions into JSON:API error documents."""

    def __init__(self, app: Any) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Handle exceptions and serialize JSON:API error documents."""
        try:
            await self.app(scope, receive, send)
        except JSONAPIException as exc:
            await error_response(exc)(scope, receive, send)
        except Exception:
            logger.exception("Unhandled error while processing %s", scope.get("path", ""))
            await error_response(JSONAPIException())(scope, receive, send)
