"""Read-only field types shared by the parameter value models."""

from types import MappingProxyType
from typing import Annotated, Any, Dict, FrozenSet, Mapping

from pydantic import AfterValidator

# Mappings are stored behind a proxy so checked values cannot change in place.
ReadOnlyMapping = Annotated[Dict[Any, Any], AfterValidator(MappingProxyType)]
ReadOnlyStrMapping = Annotated[Dict[str, str], AfterValidator(MappingProxyType)]
ReadOnlyFieldSets = Annotated[Dict[str, FrozenSet[str]], AfterValidator(MappingProxyType)]


def empty_mapping() -> Mapping[Any, Any]:
    """Return an empty read-only mapping for field defaults."""
    return MappingProxyType({})
