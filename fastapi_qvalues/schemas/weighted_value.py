"""Pydantic schema for a single weighted preference entry."""

from pydantic import BaseModel, ConfigDict, Field


class WeightedValue(BaseModel):
    """A token paired with its quality value (``q``)."""

    model_config = ConfigDict(frozen=True)

    token: str = Field(min_length=1)
    priority: float = Field(default=1.0, ge=0.0, le=1.0)

    def __str__(self) -> str:
        """Render the entry back into header form."""
        if self.priority == 1.0:
            return self.token
        return f"{self.token};q={self.priority!r}"
