"""FastAPI dependencies for JSON:API parameters."""

from fastapi import Request

from fastapi_jsonapi_params.integration.request import StarletteRequestAdapter
from fastapi_jsonapi_params.middleware.content_negotiation import STATE_KEY
from fastapi_jsonapi_params.parameters.parser import ParametersParser
from fastapi_jsonapi_params.parameters.values import Parameters


def get_jsonapi_parameters(request: Request) -> Parameters:
    """Return the Parameters checked by the middleware.

    Without ContentNegotiationMiddleware the request is parsed here, unchecked.
    """
    parameters = getattr(request.state, STATE_KEY, None)
    if parameters is None:
        parameters = ParametersParser().parse(StarletteRequestAdapter(request))
    return parameters
