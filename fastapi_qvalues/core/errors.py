"""Errors raised while parsing quality-value lists."""

from typing import Any


class ParseError(ValueError):
    """A segment of a quality-value list could not be parsed."""

    code = "parse_error"
    title = "Malformed Quality Value List"

    def __init__(self, message: str, *, segment: str) -> None:
        super().__init__(message)
        self.segment = segment

    def error_object(self) -> dict[str, Any]:
        """Return a JSON:API style error object describing the failure."""
        return {
            "status": "400",
            "code": self.code,
            "title": self.title,
            "detail": str(self),
            "meta": {"segment": self.segment},
        }


class EmptyValueError(ParseError):
    """The value part of a segment is empty after trimming."""

    code = "empty_value"
    title = "Empty Value"


class InvalidQualityError(ParseError):
    """The ``;q=`` clause of a segment is malformed or out of range."""

    code = "invalid_quality"
    title = "Invalid Quality Value"
