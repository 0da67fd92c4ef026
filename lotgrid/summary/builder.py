"""Derived values computed from the listing snapshot.

Nothing here is stored: the total, the highlight classification and the
formatted price cells are recomputed from the current listings after every
store mutation and only affect how rows are displayed.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from .amounts import format_amount

if TYPE_CHECKING:
    from ..models.listing import Listing

# Default price from which a listing is highlighted (100 million).
DEFAULT_HIGHLIGHT_THRESHOLD = 100_000_000

# Presentation of highlighted listings: price label prefix, row class, colors
HIGHLIGHT_PREFIX = "\U0001f4b8"
HIGHLIGHT_ROW_CLASS = "highlighted"
HIGHLIGHT_TEXT_COLOR = "#dc2626"
HIGHLIGHT_BG_COLOR = "#2a1215"


def total(listings: Iterable[Listing]) -> float:
    """Sum the price column; 0 for no listings."""
    return sum((listing.price for listing in listings), 0)


def is_highlighted(amount: float, threshold: float) -> bool:
    return amount >= threshold


class PriceCell(BaseModel):
    """Display form of a price cell."""

    text: str = Field(..., description="Grouped amount")
    label: str = Field(..., description="Text shown in the cell, decorated when highlighted")
    highlighted: bool = Field(default=False)

    class Config:
        frozen = True


class GridSummary(BaseModel):
    """Aggregate shown in the pinned trailing row."""

    total: float = Field(default=0, description="Sum of all prices")
    total_text: str = Field(default="0", description="Formatted total")
    row_count: int = Field(default=0)
    highlighted_ids: frozenset[int] = Field(default_factory=frozenset)

    class Config:
        frozen = True


class SummaryBuilder:
    """Build display classifications and the summary row for a snapshot."""

    def __init__(self, threshold: float = DEFAULT_HIGHLIGHT_THRESHOLD):
        self._threshold = threshold

    @property
    def threshold(self) -> float:
        return self._threshold

    def is_highlighted(self, listing: Listing) -> bool:
        return is_highlighted(listing.price, self._threshold)

    def price_cell(self, listing: Listing) -> PriceCell:
        text = format_amount(listing.price)
        highlighted = self.is_highlighted(listing)
        label = f"{HIGHLIGHT_PREFIX} {text}" if highlighted else text
        return PriceCell(text=text, label=label, highlighted=highlighted)

    def row_class(self, listing: Listing) -> str | None:
        """Row-level classification, or None for a plain row."""
        return HIGHLIGHT_ROW_CLASS if self.is_highlighted(listing) else None

    def highlighted_rows(self, listings: Iterable[Listing]) -> list[Listing]:
        """Listings whose row is classified as highlighted, in order."""
        return [listing for listing in listings if self.row_class(listing) == HIGHLIGHT_ROW_CLASS]

    def build(self, listings: Sequence[Listing]) -> GridSummary:
        """Recompute the summary from scratch for the given snapshot."""
        amount = total(listings)
        return GridSummary(
            total=amount,
            total_text=format_amount(amount),
            row_count=len(listings),
            highlighted_ids=frozenset(listing.id for listing in self.highlighted_rows(listings)),
        )
