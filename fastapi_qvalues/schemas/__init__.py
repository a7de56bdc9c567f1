"""Pydantic schemas for weighted preference lists."""

from .weighted_value import WeightedValue

__all__ = ["WeightedValue"]
