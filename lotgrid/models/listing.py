"""Listing record model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from ..summary.amounts import coerce_amount

# Fields a cell edit may write; id is assigned by the store and never edited.
EDITABLE_FIELDS = ("make", "model", "price")


class Listing(BaseModel):
    """One editable row of the listing table."""

    id: int = Field(..., description="Unique listing ID")
    make: str = Field(default="", description="Vehicle make")
    model: str = Field(default="", description="Vehicle model (valid for make)")
    price: float = Field(default=0, description="Asking price")

    class Config:
        frozen = True

    @field_validator("price", mode="before")
    @classmethod
    def coerce_price(cls, value: Any) -> float:
        return coerce_amount(value)

    def to_record(self) -> dict[str, Any]:
        """Return the row as a plain dict, the shape the edit surface emits."""
        return self.model_dump()
