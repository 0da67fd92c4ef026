"""Shared fixtures: small reference data, a seeded store and a recording surface.

The store and session take their reference data as a constructor argument,
so every test builds them from the compact ``A``/``B``/``C`` lookup below
instead of the default vehicle makes.
"""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from lotgrid.models import Listing, ReferenceData
from lotgrid.state import GridSession, ListingStore
from lotgrid.summary import GridSummary, SummaryBuilder


class RecordingSurface:
    """In-memory edit surface that records what the session pushes."""

    def __init__(self, selected: set[int] | None = None):
        self.rows: list[Listing] = []
        self.selected: set[int] = set(selected or ())
        self.summaries: list[GridSummary] = []
        self.applied: list[Listing] = []

    def render(self, listings: Sequence[Listing]) -> None:
        self.rows = list(listings)

    def insert_rows(self, listings: Sequence[Listing], index: int) -> None:
        self.rows[index:index] = list(listings)

    def remove_rows(self, listing_ids: set[int]) -> None:
        self.rows = [row for row in self.rows if row.id not in listing_ids]
        self.selected -= listing_ids

    def apply_listing(self, listing: Listing) -> None:
        self.applied.append(listing)
        self.rows = [listing if row.id == listing.id else row for row in self.rows]

    def selected_ids(self) -> set[int]:
        return set(self.selected)

    def show_summary(self, summary: GridSummary) -> None:
        self.summaries.append(summary)

    @property
    def summary(self) -> GridSummary:
        return self.summaries[-1]


@pytest.fixture
def reference() -> ReferenceData:
    # "C" is a known make without models.
    return ReferenceData(
        make_options=("A", "B", "C"),
        models_by_make={"A": ("x", "z"), "B": ("y",), "C": ()},
    )


@pytest.fixture
def store(reference: ReferenceData) -> ListingStore:
    return ListingStore(
        reference,
        [
            Listing(id=1, make="A", model="x", price=10),
            Listing(id=2, make="B", model="y", price=20),
        ],
    )


@pytest.fixture
def builder() -> SummaryBuilder:
    return SummaryBuilder(threshold=100)


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def session(store: ListingStore, builder: SummaryBuilder, surface: RecordingSurface) -> GridSession:
    return GridSession(store, builder, surface)
