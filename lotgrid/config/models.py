"""Configuration models for lotgrid."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from ..summary import DEFAULT_HIGHLIGHT_THRESHOLD

DEFAULT_MAKES = ["Toyota", "Ford", "Porsche", "현대", "기아", "오즈코딩"]

DEFAULT_MODELS_BY_MAKE = {
    "Toyota": ["Corolla", "Prius", "Supra"],
    "Ford": ["Fiesta", "Mondeo", "Focus"],
    "Porsche": ["911", "Boxster", "Cayman"],
    "현대": ["아반떼", "소나타", "그랜저"],
    "기아": ["레이", "K5", "EV6"],
    "오즈코딩": ["AI", "UI", "FRONTEND", "BACKEND", "FULLSTACK"],
}


class ReferenceSettings(BaseModel):
    """Valid makes and models offered by the editors."""

    makes: list[str] = Field(default_factory=lambda: list(DEFAULT_MAKES))
    models_by_make: dict[str, list[str]] = Field(
        default_factory=lambda: {k: list(v) for k, v in DEFAULT_MODELS_BY_MAKE.items()}
    )


class SeedListing(BaseModel):
    """Listing loaded into the table at startup."""

    id: int
    make: str
    model: str = ""
    price: float = 0


def _default_seed() -> list[SeedListing]:
    return [
        SeedListing(id=1, make="Toyota", model="Corolla", price=35_000),
        SeedListing(id=2, make="Ford", model="Mondeo", price=32_000),
        SeedListing(id=3, make="Porsche", model="Boxster", price=72_000),
        SeedListing(id=4, make="오즈코딩", model="AI", price=172_000_000),
    ]


class LotgridSettings(BaseModel):
    """Global settings."""

    highlight_threshold: float = Field(
        default=DEFAULT_HIGHLIGHT_THRESHOLD,
        description="Prices at or above this value are highlighted",
    )
    locale: str = Field(default="auto", description="UI language (auto, en, ko)")
    log_level: str = Field(default="INFO", description="Root logging level")


class LotgridConfig(BaseModel):
    """Root configuration model."""

    version: int = Field(default=1)
    reference: ReferenceSettings = Field(default_factory=ReferenceSettings)
    seed_listings: list[SeedListing] = Field(default_factory=_default_seed)
    settings: LotgridSettings = Field(default_factory=LotgridSettings)

    @model_validator(mode="after")
    def unique_seed_ids(self) -> LotgridConfig:
        seen: set[int] = set()
        for seed in self.seed_listings:
            if seed.id in seen:
                raise ValueError(f"Duplicate seed listing id: {seed.id}")
            seen.add(seed.id)
        return self
