"""Media type values parsed from Content-Type and Accept headers."""

from __future__ import annotations

from typing import FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field

from fastapi_jsonapi_params.utils.content_negotiation import quote_param_value, split_media_type
from fastapi_jsonapi_params.utils.query_params import split_csv

from .readonly import ReadOnlyStrMapping, empty_mapping

EXTENSIONS_PARAM = "ext"


class MediaType(BaseModel):
    """Media type: lowercase type/subtype plus ordered parameters.

    Parameter names are stored lower-cased so lookups are case-insensitive;
    values are kept exactly as they were sent (minus surrounding quotes).
    """

    model_config = ConfigDict(frozen=True)

    type: str = ""
    sub_type: str = ""
    parameters: ReadOnlyStrMapping = Field(default_factory=empty_mapping)

    @classmethod
    def parse(cls, header: Optional[str]) -> "MediaType":
        """Parse a single header value. Malformed parts are ignored, never raised."""
        type_, sub_type, params = split_media_type(header)
        return cls(type=type_, sub_type=sub_type, parameters=dict(params))

    @property
    def media_range(self) -> str:
        """Return ``type/subtype`` (empty for an absent header)."""
        if not self.type and not self.sub_type:
            return ""
        return f"{self.type}/{self.sub_type}"

    @property
    def extensions(self) -> FrozenSet[str]:
        """Return the extensions listed in the ``ext`` parameter."""
        value = self.get_parameter(EXTENSIONS_PARAM)
        if value is None:
            return frozenset()
        return frozenset(split_csv(value))

    def get_parameter(self, name: str) -> Optional[str]:
        """Return a parameter value by case-insensitive name."""
        return self.parameters.get(name.lower())

    def __str__(self) -> str:
        rendered = self.media_range
        for name, value in self.parameters.items():
            rendered += f";{name}={quote_param_value(value)}"
        return rendered
