"""Allow-list policy checks over parsed JSON:API parameters."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from fastapi_jsonapi_params.core.errors import BadRequest, NotAcceptable, UnsupportedMediaType
from fastapi_jsonapi_params.utils.query_params import split_csv

from .media_type import MediaType
from .parser import PARAM_FIELDS, PARAM_INCLUDE, PARAM_SORT
from .values import Parameters

logger = logging.getLogger(__name__)


def _normalize_extensions(
    allowed: Mapping[str, Iterable[str]] | None,
) -> dict[str, frozenset[str]]:
    # Entries may be comma joined ("ext1,ext3"), matching the ext parameter format.
    normalized: dict[str, frozenset[str]] = {}
    for media_range, extensions in (allowed or {}).items():
        names = {name for entry in extensions for name in split_csv(entry)}
        normalized[media_range.strip().lower()] = frozenset(names)
    return normalized


def _optional_set(values: Iterable[str] | None) -> frozenset[str] | None:
    return None if values is None else frozenset(values)


class RestrictiveParameterChecker:
    """Validate Parameters against what the server allows.

    Checks run in a fixed order and the first violation is raised:

    1. input media type extensions (``UnsupportedMediaType``)
    2. output media type extensions (``NotAcceptable``)
    3. include paths, exact match (``BadRequest``)
    4. field set resource types (``BadRequest``)
    5. sort fields (``BadRequest``)
    6. unrecognized parameters (``BadRequest``)

    For the optional allow-lists ``None`` means "not restricted", while an
    empty collection allows nothing. The checker holds no per-request
    state and can be shared between concurrent requests.
    """

    def __init__(
        self,
        allowed_input_extensions: Mapping[str, Iterable[str]] | None = None,
        allowed_output_extensions: Mapping[str, Iterable[str]] | None = None,
        allow_unrecognized: bool = True,
        allowed_include_paths: Iterable[str] | None = None,
        allowed_field_set_types: Iterable[str] | None = None,
        allowed_sort_fields: Iterable[str] | None = None,
    ) -> None:
        """Freeze the allow-lists; media ranges are matched case-insensitively."""
        self.allowed_input_extensions = _normalize_extensions(allowed_input_extensions)
        self.allowed_output_extensions = _normalize_extensions(allowed_output_extensions)
        self.allow_unrecognized = allow_unrecognized
        self.allowed_include_paths = _optional_set(allowed_include_paths)
        self.allowed_field_set_types = _optional_set(allowed_field_set_types)
        self.allowed_sort_fields = _optional_set(allowed_sort_fields)

    def check(self, parameters: Parameters) -> None:
        """Raise the first policy violation found, or return None."""
        self.check_input_media_type(parameters.input_media_type)
        self.check_output_media_type(parameters.output_media_type)
        self.check_include_paths(parameters)
        self.check_field_sets(parameters)
        self.check_sort_parameters(parameters)
        self.check_unrecognized_parameters(parameters)

    def check_input_media_type(self, media_type: MediaType) -> None:
        """Input extensions must be a subset of those allowed for the media range."""
        unsupported = self._unsupported_extensions(media_type, self.allowed_input_extensions)
        if unsupported:
            detail = self._violation(
                "Extensions %s are not supported for request media type '%s'.",
                unsupported,
                media_type.media_range,
            )
            raise UnsupportedMediaType(detail)

    def check_output_media_type(self, media_type: MediaType) -> None:
        """Output extensions must be a subset of those allowed for the media range."""
        unsupported = self._unsupported_extensions(media_type, self.allowed_output_extensions)
        if unsupported:
            detail = self._violation(
                "Extensions %s cannot be produced for response media type '%s'.",
                unsupported,
                media_type.media_range,
            )
            raise NotAcceptable(detail)

    def check_include_paths(self, parameters: Parameters) -> None:
        """Every include path must be in the allow-list verbatim."""
        if self.allowed_include_paths is None or parameters.include_paths is None:
            return
        rejected = [
            path for path in parameters.include_paths if path not in self.allowed_include_paths
        ]
        if rejected:
            detail = self._violation("Include paths %s are not allowed.", rejected)
            raise BadRequest(detail, source={"parameter": PARAM_INCLUDE})

    def check_field_sets(self, parameters: Parameters) -> None:
        """Field sets may only be requested for allowed resource types."""
        if self.allowed_field_set_types is None or parameters.field_sets is None:
            return
        rejected = sorted(set(parameters.field_sets) - self.allowed_field_set_types)
        if rejected:
            detail = self._violation("Field sets for types %s are not allowed.", rejected)
            raise BadRequest(detail, source={"parameter": PARAM_FIELDS})

    def check_sort_parameters(self, parameters: Parameters) -> None:
        """Every sort field must be in the allow-list."""
        if self.allowed_sort_fields is None or parameters.sort_parameters is None:
            return
        rejected = [
            sort.field
            for sort in parameters.sort_parameters
            if sort.field not in self.allowed_sort_fields
        ]
        if rejected:
            detail = self._violation("Sorting by %s is not allowed.", rejected)
            raise BadRequest(detail, source={"parameter": PARAM_SORT})

    def check_unrecognized_parameters(self, parameters: Parameters) -> None:
        """Reject unrecognized parameters unless they are allowed."""
        if self.allow_unrecognized or not parameters.unrecognized_parameters:
            return
        names = sorted(str(name) for name in parameters.unrecognized_parameters)
        detail = self._violation("Parameters %s are not recognized.", names)
        raise BadRequest(detail, source={"parameter": names[0]})

    @staticmethod
    def _unsupported_extensions(
        media_type: MediaType, allowed: Mapping[str, frozenset[str]]
    ) -> list[str]:
        permitted = allowed.get(media_type.media_range, frozenset())
        return sorted(media_type.extensions - permitted)

    @staticmethod
    def _violation(message: str, *args: object) -> str:
        detail = message % args
        logger.info("JSON:API parameter check failed: %s", detail)
        return detail
