"""Helpers for parsing weighted preference lists such as ``Accept`` values."""

from __future__ import annotations

import logging
import re

from fastapi_qvalues.core.errors import EmptyValueError, InvalidQualityError, ParseError
from fastapi_qvalues.schemas.weighted_value import WeightedValue

from .ranking import sort_by_priority

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 1.0
MIN_PRIORITY = 0.0
MAX_PRIORITY = 1.0

SEGMENT_SEPARATOR = ","
PARAMETER_SEPARATOR = ";"
QUALITY_KEY = "q"

# Unicode White_Space; str.strip() would also drop the \x1c-\x1f separators
WHITESPACE = " \t\n\v\f\r\x85\xa0" + "".join(
    map(chr, [0x1680, *range(0x2000, 0x200B), 0x2028, 0x2029, 0x202F, 0x205F, 0x3000])
)

# ASCII decimal literal: no digit separators, no inf/nan, no hex
DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def _parse_priority(clause: str, segment: str) -> float:
    key, found, raw_value = clause.partition("=")
    if not found or key.strip(WHITESPACE) != QUALITY_KEY:
        raise InvalidQualityError(
            f"expected a 'q=' clause, got {clause!r}", segment=segment
        )

    number = raw_value.strip(WHITESPACE)
    if not DECIMAL_RE.fullmatch(number):
        raise InvalidQualityError(
            f"quality value {number!r} is not a decimal number", segment=segment
        )

    priority = float(number)
    if not MIN_PRIORITY <= priority <= MAX_PRIORITY:
        raise InvalidQualityError(
            f"quality value {priority!r} is outside [{MIN_PRIORITY}, {MAX_PRIORITY}]",
            segment=segment,
        )
    return priority


def _parse_segment(segment: str) -> WeightedValue:
    raw_token, found, clause = segment.partition(PARAMETER_SEPARATOR)

    token = raw_token.strip(WHITESPACE)
    if not token:
        raise EmptyValueError("empty value found", segment=segment)

    priority = _parse_priority(clause, segment) if found else DEFAULT_PRIORITY
    return WeightedValue(token=token, priority=priority)


def parse_quality_values(text: str) -> list[WeightedValue]:
    """Parse a comma-separated list of ``token[;q=number]`` entries.

    Entries are returned in input order. An empty string yields an empty
    list; any malformed entry aborts the whole parse with a ``ParseError``.
    """
    if not text:
        return []

    values: list[WeightedValue] = []
    for segment in text.split(SEGMENT_SEPARATOR):
        try:
            values.append(_parse_segment(segment))
        except ParseError as exc:
            logger.debug("Rejected quality value segment %r: %s", segment, exc)
            raise
    return values


def ranked_quality_values(text: str) -> list[WeightedValue]:
    """Parse ``text`` and return its entries ordered by descending priority."""
    values = parse_quality_values(text)
    sort_by_priority(values)
    return values
