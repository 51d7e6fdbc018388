"""JSON:API content negotiation and query parameter checks for FastAPI."""

from .config import NegotiationSettings
from .core.errors import BadRequest, JSONAPIException, NotAcceptable, UnsupportedMediaType
from .dependencies import get_jsonapi_parameters
from .middleware import ContentNegotiationMiddleware, ErrorHandlerMiddleware
from .parameters import (
    EncodingParameters,
    MediaType,
    Parameters,
    ParametersFactory,
    ParametersParser,
    RestrictiveParameterChecker,
    SortParameter,
)

__all__ = [
    "BadRequest",
    "ContentNegotiationMiddleware",
    "EncodingParameters",
    "ErrorHandlerMiddleware",
    "JSONAPIException",
    "MediaType",
    "NegotiationSettings",
    "NotAcceptable",
    "Parameters",
    "ParametersFactory",
    "ParametersParser",
    "RestrictiveParameterChecker",
    "SortParameter",
    "UnsupportedMediaType",
    "get_jsonapi_parameters",
]
