"""ASGI middleware for quality-value parsing."""

from .error_handler import ParseErrorMiddleware

__all__ = ["ParseErrorMiddleware"]
