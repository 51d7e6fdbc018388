"""JSON:API content negotiation middleware."""

from typing import Any

from starlette.requests import Request

from fastapi_jsonapi_params.core.errors import JSONAPIException
from fastapi_jsonapi_params.integration.request import StarletteRequestAdapter
from fastapi_jsonapi_params.parameters.checker import RestrictiveParameterChecker
from fastapi_jsonapi_params.parameters.parser import ParametersParser

from .error_handler import error_response

STATE_KEY = "jsonapi_parameters"


class ContentNegotiationMiddleware:
    """Parse and check JSON:API headers and query parameters for each request.

    On success the parsed Parameters are stored on ``request.state`` under
    ``jsonapi_parameters``; on a policy violation the matching error
    document is sent and the app is not called.
    """

    def __init__(
        self,
        app: Any,
        checker: RestrictiveParameterChecker | None = None,
        parser: ParametersParser | None = None,
    ) -> None:
        """Store the ASGI app plus the shared checker and parser."""
        self.app = app
        self.checker = checker or RestrictiveParameterChecker()
        self.parser = parser or ParametersParser()

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Validate JSON:API headers before passing to downstream app."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        parameters = self.parser.parse(StarletteRequestAdapter(Request(scope)))
        try:
            self.checker.check(parameters)
        except JSONAPIException as exc:
            await error_response(exc)(scope, receive, send)
            return

        scope.setdefault("state", {})[STATE_KEY] = parameters
        await self.app(scope, receive, send)
