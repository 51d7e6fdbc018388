"""Settings for JSON:API parameter negotiation."""

from .settings import JSONAPI_MEDIA_TYPE, NegotiationSettings

__all__ = ["JSONAPI_MEDIA_TYPE", "NegotiationSettings"]
