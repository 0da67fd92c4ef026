"""Authoritative in-memory store of listings."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from ..models import EDITABLE_FIELDS, Listing, ReferenceData
from ..summary import coerce_amount

logger = logging.getLogger(__name__)


class ListingNotFoundError(Exception):
    """Update targeted a listing ID that is not in the store."""

    def __init__(self, listing_id: int):
        super().__init__(f"Listing not found: {listing_id}")
        self.listing_id = listing_id


class UnknownFieldError(Exception):
    """Update targeted a field that cannot be edited."""

    def __init__(self, field: str):
        super().__init__(f"Field is not editable: {field}")
        self.field = field


class ListingStore:
    """Ordered collection of listings that owns every mutation.

    After each write the make/model pairing is re-validated against the
    reference data, so a listing is never observable with a model that does
    not belong to its make.
    """

    def __init__(self, reference: ReferenceData, listings: Iterable[Listing] = ()):
        self._reference = reference
        self._listings: list[Listing] = []

        seen: set[int] = set()
        for listing in listings:
            if listing.id in seen:
                raise ValueError(f"Duplicate listing id: {listing.id}")
            seen.add(listing.id)
            resolved = self._resolve(listing)
            if resolved.model != listing.model:
                logger.warning(
                    f"Listing {listing.id}: model {listing.model!r} is not valid for "
                    f"{listing.make!r}, using {resolved.model!r}"
                )
            self._listings.append(resolved)

    @property
    def reference(self) -> ReferenceData:
        return self._reference

    def __len__(self) -> int:
        return len(self._listings)

    def snapshot(self) -> tuple[Listing, ...]:
        """Return the current listings in display order."""
        return tuple(self._listings)

    def ids(self) -> set[int]:
        return {listing.id for listing in self._listings}

    def get(self, listing_id: int) -> Listing | None:
        for listing in self._listings:
            if listing.id == listing_id:
                return listing
        return None

    def next_id(self) -> int:
        return max((listing.id for listing in self._listings), default=0) + 1

    def add(self) -> Listing:
        """Create a listing seeded from the first make and insert it at the top."""
        make = self._reference.makes()[0]
        listing = Listing(
            id=self.next_id(),
            make=make,
            model=self._reference.default_model(make),
            price=0,
        )
        self._listings.insert(0, listing)
        logger.debug(f"Added listing {listing.id}")
        return listing

    def remove(self, listing_ids: Iterable[int]) -> None:
        """Remove every listing whose ID is given; unknown IDs are ignored."""
        doomed = set(listing_ids)
        if not doomed:
            return
        before = len(self._listings)
        self._listings = [listing for listing in self._listings if listing.id not in doomed]
        logger.debug(f"Removed {before - len(self._listings)} listing(s)")

    def update_field(self, listing_id: int, field: str, raw_value: Any) -> Listing:
        """Write one field and return the fully resolved listing.

        A make change always resets the model to the new make's first model.
        The returned listing is what the edit surface must display, since the
        model may have changed as a side effect.

        Raises:
            ListingNotFoundError: No listing has this ID.
            UnknownFieldError: The field is not editable.
        """
        index = self._index_of(listing_id)
        if index is None:
            raise ListingNotFoundError(listing_id)
        if field not in EDITABLE_FIELDS:
            raise UnknownFieldError(field)

        current = self._listings[index]
        if field == "price":
            updated = current.model_copy(update={"price": coerce_amount(raw_value)})
        elif field == "make":
            make = _as_text(raw_value)
            updated = current.model_copy(
                update={"make": make, "model": self._reference.default_model(make)}
            )
        else:
            updated = current.model_copy(update={"model": _as_text(raw_value)})

        updated = self._resolve(updated)
        self._listings[index] = updated
        logger.debug(f"Updated listing {listing_id}.{field}")
        return updated

    def _index_of(self, listing_id: int) -> int | None:
        for i, listing in enumerate(self._listings):
            if listing.id == listing_id:
                return i
        return None

    def _resolve(self, listing: Listing) -> Listing:
        """Reset an invalid model to the make's first model."""
        if self._reference.is_valid_model(listing.make, listing.model):
            return listing
        return listing.model_copy(
            update={"model": self._reference.default_model(listing.make)}
        )


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)
