"""Configuration for JSON:API parameter negotiation.

Settings are loaded from ``JSONAPI_*`` environment variables and ``.env``
files. Mapping and list values are given as JSON, for example::

    JSONAPI_ALLOWED_OUTPUT_EXTENSIONS='{"application/vnd.api+json": ["ext1", "ext3"]}'
    JSONAPI_ALLOWED_SORT_FIELDS='["created", "name"]'
"""

from typing import Dict, List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..parameters.checker import RestrictiveParameterChecker

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"


class NegotiationSettings(BaseSettings):
    """Allow-list policy applied to every request.

    :param allowed_input_extensions: Extensions accepted per request media type
    :param allowed_output_extensions: Extensions producible per response media type
    :param allow_unrecognized_parameters: Accept query parameters outside the reserved set
    :param allowed_include_paths: Include paths allowed verbatim, None for any
    :param allowed_field_set_types: Resource types that may carry a field set, None for any
    :param allowed_sort_fields: Sortable fields, None for any
    """

    model_config = SettingsConfigDict(
        env_prefix="JSONAPI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    allowed_input_extensions: Dict[str, List[str]] = Field(
        default_factory=lambda: {JSONAPI_MEDIA_TYPE: []},
        description="Extensions accepted in Content-Type, keyed by media range",
    )
    allowed_output_extensions: Dict[str, List[str]] = Field(
        default_factory=lambda: {JSONAPI_MEDIA_TYPE: []},
        description="Extensions accepted in Accept, keyed by media range",
    )
    allow_unrecognized_parameters: bool = Field(
        True, description="Allow query parameters other than fields/include/sort/filter/page"
    )
    allowed_include_paths: Optional[List[str]] = Field(
        None, description="Allowed include paths (exact match)"
    )
    allowed_field_set_types: Optional[List[str]] = Field(
        None, description="Resource types allowed in fields[...]"
    )
    allowed_sort_fields: Optional[List[str]] = Field(
        None, description="Fields allowed in sort"
    )

    def build_checker(self) -> RestrictiveParameterChecker:
        """Return a checker enforcing these settings."""
        return RestrictiveParameterChecker(
            allowed_input_extensions=self.allowed_input_extensions,
            allowed_output_extensions=self.allowed_output_extensions,
            allow_unrecognized=self.allow_unrecognized_parameters,
            allowed_include_paths=self.allowed_include_paths,
            allowed_field_set_types=self.allowed_field_set_types,
            allowed_sort_fields=self.allowed_sort_fields,
        )
