"""JSON:API media types, query parameters and the restrictive checker."""

from .checker import RestrictiveParameterChecker
from .factory import ParametersFactory
from .media_type import MediaType
from .parser import RESERVED_PARAMETERS, ParametersParser
from .values import EncodingParameters, Parameters, SortParameter

__all__ = [
    "EncodingParameters",
    "MediaType",
    "Parameters",
    "ParametersFactory",
    "ParametersParser",
    "RESERVED_PARAMETERS",
    "RestrictiveParameterChecker",
    "SortParameter",
]
