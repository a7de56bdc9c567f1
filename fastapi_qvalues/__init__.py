"""Parse and rank HTTP quality-value lists (``Accept`` and friends)."""

from .core.errors import EmptyValueError, InvalidQualityError, ParseError
from .middleware.error_handler import ParseErrorMiddleware
from .schemas.weighted_value import WeightedValue
from .utils.quality_values import (
    DEFAULT_PRIORITY,
    MAX_PRIORITY,
    MIN_PRIORITY,
    parse_quality_values,
    ranked_quality_values,
)
from .utils.ranking import sort_by_priority

__all__ = [
    "DEFAULT_PRIORITY",
    "MAX_PRIORITY",
    "MIN_PRIORITY",
    "EmptyValueError",
    "InvalidQualityError",
    "ParseError",
    "ParseErrorMiddleware",
    "WeightedValue",
    "parse_quality_values",
    "ranked_quality_values",
    "sort_by_priority",
]
