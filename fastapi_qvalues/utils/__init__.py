"""Parsing and ranking helpers for quality-value lists."""

from .quality_values import (
    DEFAULT_PRIORITY,
    MAX_PRIORITY,
    MIN_PRIORITY,
    parse_quality_values,
    ranked_quality_values,
)
from .ranking import sort_by_priority

__all__ = [
    "DEFAULT_PRIORITY",
    "MAX_PRIORITY",
    "MIN_PRIORITY",
    "parse_quality_values",
    "ranked_quality_values",
    "sort_by_priority",
]
