"""Factory for JSON:API parameter values and the parser."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Mapping, Sequence

from .media_type import MediaType
from .values import EncodingParameters, Parameters, SortParameter

if TYPE_CHECKING:
    from .parser import ParametersParser


class ParametersFactory:
    """Create parameter values; the parser builds everything through one of these."""

    def create_media_type(self, header: str | None) -> MediaType:
        """Parse a header into a media type."""
        return MediaType.parse(header)

    def create_sort_parameter(self, field: str, is_ascending: bool) -> SortParameter:
        """Return a sort parameter for an already unsigned field."""
        return SortParameter(field=field, is_ascending=is_ascending)

    def create_encoding_parameters(
        self,
        include_paths: Sequence[str] | None = None,
        field_sets: Mapping[str, Iterable[str]] | None = None,
    ) -> EncodingParameters:
        """Return encoding parameters; None keeps the "not specified" meaning."""
        return EncodingParameters(
            include_paths=include_paths,
            field_sets=_freeze_field_sets(field_sets),
        )

    def create_parameters(
        self,
        input_media_type: MediaType,
        output_media_type: MediaType,
        *,
        include_paths: Sequence[str] | None = None,
        field_sets: Mapping[str, Iterable[str]] | None = None,
        sort_parameters: Sequence[SortParameter] | None = None,
        paging_parameters: Mapping[Any, Any] | None = None,
        filtering_parameters: Mapping[Any, Any] | None = None,
        unrecognized_parameters: Mapping[Any, Any] | None = None,
    ) -> Parameters:
        """Return the aggregate parameters value for one request."""
        return Parameters(
            input_media_type=input_media_type,
            output_media_type=output_media_type,
            include_paths=include_paths,
            field_sets=_freeze_field_sets(field_sets),
            sort_parameters=sort_parameters,
            paging_parameters=paging_parameters,
            filtering_parameters=filtering_parameters,
            unrecognized_parameters=unrecognized_parameters,
        )

    def create_parameters_parser(self) -> ParametersParser:
        """Return a parser bound to this factory."""
        from .parser import ParametersParser

        return ParametersParser(self)


def _freeze_field_sets(
    field_sets: Mapping[str, Iterable[str]] | None,
) -> dict[str, frozenset[str]] | None:
    if field_sets is None:
        return None
    return {type_: frozenset(names) for type_, names in field_sets.items()}
