"""Immutable values produced by the JSON:API parameters parser."""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .media_type import MediaType
from .readonly import ReadOnlyFieldSets, ReadOnlyMapping


class SortParameter(BaseModel):
    """One ``sort`` entry: field name without its sign plus direction."""

    model_config = ConfigDict(frozen=True)

    field: str
    is_ascending: bool = True

    def __str__(self) -> str:
        return self.field if self.is_ascending else f"-{self.field}"


class EncodingParameters(BaseModel):
    """Include paths and sparse field sets used when encoding a response.

    ``None`` means the client did not send the parameter at all, which is
    different from sending it with an empty value.
    """

    model_config = ConfigDict(frozen=True)

    include_paths: Optional[Tuple[str, ...]] = None
    field_sets: Optional[ReadOnlyFieldSets] = None


class Parameters(BaseModel):
    """Everything parsed from a request's headers and query parameters.

    Sequences are tuples and mappings are read-only proxies; ``page`` and
    ``filter`` are copied one level deep.
    """

    model_config = ConfigDict(frozen=True)

    input_media_type: MediaType
    output_media_type: MediaType
    include_paths: Optional[Tuple[str, ...]] = None
    field_sets: Optional[ReadOnlyFieldSets] = None
    sort_parameters: Optional[Tuple[SortParameter, ...]] = None
    paging_parameters: Optional[ReadOnlyMapping] = None
    filtering_parameters: Optional[ReadOnlyMapping] = None
    unrecognized_parameters: Optional[ReadOnlyMapping] = None

    @property
    def encoding_parameters(self) -> EncodingParameters:
        """Return the include paths and field sets as encoding parameters."""
        return EncodingParameters(include_paths=self.include_paths, field_sets=self.field_sets)
