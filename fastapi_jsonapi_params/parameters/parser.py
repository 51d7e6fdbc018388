"""Parse request headers and query parameters into a Parameters value."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping

from fastapi_jsonapi_params.utils.query_params import copy_mapping, split_csv

from .values import Parameters, SortParameter

if TYPE_CHECKING:
    from fastapi_jsonapi_params.integration.request import CurrentRequest

    from .factory import ParametersFactory

logger = logging.getLogger(__name__)

HEADER_CONTENT_TYPE = "Content-Type"
HEADER_ACCEPT = "Accept"

PARAM_FIELDS = "fields"
PARAM_INCLUDE = "include"
PARAM_SORT = "sort"
PARAM_FILTER = "filter"
PARAM_PAGE = "page"

RESERVED_PARAMETERS = frozenset(
    {PARAM_FIELDS, PARAM_INCLUDE, PARAM_SORT, PARAM_FILTER, PARAM_PAGE}
)


class ParametersParser:
    """Turn headers and the raw input map into Parameters.

    Parsing is permissive: values of the wrong shape come back as None and
    nothing is raised here. Policy is enforced afterwards by the checker.
    """

    def __init__(self, factory: ParametersFactory | None = None) -> None:
        """Bind the parser to the factory used for every created value."""
        if factory is None:
            from .factory import ParametersFactory

            factory = ParametersFactory()
        self.factory = factory

    def parse(self, request: CurrentRequest) -> Parameters:
        """Read Content-Type, Accept and the input map from the request and parse them."""
        return self.parse_values(
            request.get_header(HEADER_CONTENT_TYPE),
            request.get_header(HEADER_ACCEPT),
            request.get_input(),
        )

    def parse_values(
        self,
        content_type: str | None,
        accept: str | None,
        raw_input: Mapping[Any, Any] | None,
    ) -> Parameters:
        """Parse header strings and an already nested input map."""
        raw_input = raw_input or {}
        parameters = self.factory.create_parameters(
            self.factory.create_media_type(content_type),
            self.factory.create_media_type(accept),
            include_paths=self._parse_include(raw_input.get(PARAM_INCLUDE)),
            field_sets=self._parse_fields(raw_input.get(PARAM_FIELDS)),
            sort_parameters=self._parse_sort(raw_input.get(PARAM_SORT)),
            paging_parameters=copy_mapping(raw_input.get(PARAM_PAGE)),
            filtering_parameters=copy_mapping(raw_input.get(PARAM_FILTER)),
            unrecognized_parameters=self._collect_unrecognized(raw_input),
        )
        logger.debug(
            "Parsed JSON:API parameters: input=%s output=%s include=%s sort=%s",
            parameters.input_media_type,
            parameters.output_media_type,
            parameters.include_paths,
            parameters.sort_parameters,
        )
        return parameters

    def _parse_include(self, value: Any) -> list[str] | None:
        if not isinstance(value, str):
            return None
        return split_csv(value)

    def _parse_fields(self, value: Any) -> dict[str, set[str]] | None:
        if not isinstance(value, Mapping):
            return None
        return {
            str(resource_type): set(split_csv(names))
            for resource_type, names in value.items()
            if isinstance(names, str)
        }

    def _parse_sort(self, value: Any) -> list[SortParameter] | None:
        if not isinstance(value, str):
            return None
        sort_parameters = []
        for token in split_csv(value):
            is_ascending = not token.startswith("-")
            if token[0] in "+-":
                token = token[1:]
            if not token:
                continue
            sort_parameters.append(self.factory.create_sort_parameter(token, is_ascending))
        return sort_parameters

    def _collect_unrecognized(self, raw_input: Mapping[Any, Any]) -> dict[Any, Any] | None:
        unrecognized = {
            key: value for key, value in raw_input.items() if key not in RESERVED_PARAMETERS
        }
        return unrecognized or None
