"""Middleware for JSON:API negotiation and errors."""

from .content_negotiation import ContentNegotiationMiddleware
from .error_handler import ErrorHandlerMiddleware, error_response

__all__ = ["ContentNegotiationMiddleware", "ErrorHandlerMiddleware", "error_response"]
