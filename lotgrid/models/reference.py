"""Reference data for valid makes and their models."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class ReferenceData(BaseModel):
    """Immutable lookup of valid makes and, per make, valid models."""

    make_options: tuple[str, ...] = Field(..., description="Valid makes, in display order")
    models_by_make: dict[str, tuple[str, ...]] = Field(
        default_factory=dict, description="Valid models for each make"
    )

    class Config:
        frozen = True

    @field_validator("make_options")
    @classmethod
    def require_makes(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("at least one make is required")
        return value

    def makes(self) -> tuple[str, ...]:
        return self.make_options

    def models_for(self, make: str) -> tuple[str, ...]:
        """Return the models for a make, or an empty tuple if it is unknown."""
        return self.models_by_make.get(make, ())

    def default_model(self, make: str) -> str:
        models = self.models_for(make)
        return models[0] if models else ""

    def is_valid_model(self, make: str, model: str) -> bool:
        """Check the make/model pairing.

        An unknown make (no models) only pairs with the empty model.
        """
        models = self.models_for(make)
        if not models:
            return model == ""
        return model in models
