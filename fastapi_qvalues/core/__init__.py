"""Core error types for quality-value parsing."""

from .errors import EmptyValueError, InvalidQualityError, ParseError

__all__ = ["EmptyValueError", "InvalidQualityError", "ParseError"]
