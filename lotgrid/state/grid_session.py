"""Edit-commit protocol between the grid's edit surface and the store."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Protocol

from pydantic import BaseModel, Field

from ..models import EditorKind, Listing, get_column
from ..summary import GridSummary, SummaryBuilder
from .listing_store import ListingNotFoundError, ListingStore, UnknownFieldError

logger = logging.getLogger(__name__)


class CellEdit(BaseModel):
    """A committed cell edit as emitted by the edit surface."""

    record: dict[str, Any] = Field(..., description="Full row after the edit")
    field: str = Field(..., description="Field that was edited")

    @property
    def listing_id(self) -> Any:
        return self.record.get("id")

    @property
    def value(self) -> Any:
        return self.record.get(self.field)


class EditSurface(Protocol):
    """Widget that renders listings and reports selection.

    The surface never edits listings itself; it displays whatever the
    session pushes to it.
    """

    def render(self, listings: Sequence[Listing]) -> None: ...

    def insert_rows(self, listings: Sequence[Listing], index: int) -> None: ...

    def remove_rows(self, listing_ids: set[int]) -> None: ...

    def apply_listing(self, listing: Listing) -> None: ...

    def selected_ids(self) -> set[int]: ...

    def show_summary(self, summary: GridSummary) -> None: ...


class GridSession:
    """Route UI intents through the store and keep the surface in sync.

    Every handler finishes the store write, pushes the authoritative result
    to the surface and refreshes the summary before it returns.
    """

    def __init__(
        self,
        store: ListingStore,
        builder: SummaryBuilder,
        surface: EditSurface | None = None,
    ):
        self._store = store
        self._builder = builder
        self._surface: EditSurface | None = None
        if surface is not None:
            self.bind(surface)

    @property
    def store(self) -> ListingStore:
        return self._store

    @property
    def builder(self) -> SummaryBuilder:
        return self._builder

    def bind(self, surface: EditSurface) -> None:
        """Attach a surface and render the current state onto it."""
        self._surface = surface
        surface.render(self._store.snapshot())
        surface.show_summary(self.summary())

    def summary(self) -> GridSummary:
        return self._builder.build(self._store.snapshot())

    def add_row(self) -> Listing:
        listing = self._store.add()
        if self._surface is not None:
            self._surface.insert_rows([listing], index=0)
        self._refresh_summary()
        return listing

    def delete_selected(self) -> set[int]:
        """Remove the rows currently selected on the surface."""
        if self._surface is None:
            return set()
        selected = set(self._surface.selected_ids())
        if not selected:
            return set()
        self._store.remove(selected)
        self._surface.remove_rows(selected)
        self._refresh_summary()
        logger.info(f"Deleted {len(selected)} selected row(s)")
        return selected

    def commit_edit(self, edit: CellEdit) -> Listing | None:
        """Apply a committed cell edit.

        Returns the listing as stored, or None when the edit was dropped
        because the surface referenced an unknown row or field.
        """
        try:
            listing = self._store.update_field(edit.listing_id, edit.field, edit.value)
        except ListingNotFoundError as e:
            logger.warning(f"Dropped edit of {edit.field!r}: {e}")
            return None
        except UnknownFieldError as e:
            logger.warning(f"Dropped edit for listing {edit.listing_id}: {e}")
            return None

        if self._surface is not None:
            self._surface.apply_listing(listing)
        self._refresh_summary()
        return listing

    def choices_for(self, field: str, listing_id: int) -> tuple[str, ...]:
        """Return the editor choice list for a cell."""
        column = get_column(field)
        if column is None:
            return ()
        reference = self._store.reference
        if column.editor == EditorKind.SELECT:
            return reference.makes()
        if column.editor == EditorKind.DEPENDENT_SELECT and column.depends_on:
            listing = self._store.get(listing_id)
            if listing is None:
                return ()
            return reference.models_for(getattr(listing, column.depends_on))
        return ()

    def _refresh_summary(self) -> None:
        if self._surface is not None:
            self._surface.show_summary(self.summary())
