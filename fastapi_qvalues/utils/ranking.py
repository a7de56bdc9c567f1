"""Priority ordering for parsed quality values."""

from __future__ import annotations

from fastapi_qvalues.schemas.weighted_value import WeightedValue


def sort_by_priority(values: list[WeightedValue]) -> None:
    """Sort ``values`` in place, highest priority first.

    The sort is stable, so entries sharing a priority keep the order in
    which they were listed.
    """
    values.sort(key=lambda value: value.priority, reverse=True)
