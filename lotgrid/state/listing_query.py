"""Display-side filtering and sorting of the listing snapshot."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, Field, field_validator

from ..models import Listing, get_column


class ListingQuery(BaseModel):
    """Committed filter and sort applied to the rows shown in the table.

    Only columns flagged ``filterable`` may be filtered and only columns
    flagged ``sortable`` may be sorted. The store itself is never reordered.
    """

    filters: dict[str, str] = Field(
        default_factory=dict, description="Exact-match value per filterable field"
    )
    sort_field: str | None = Field(default=None, description="Sortable field to order by")
    descending: bool = Field(default=False)

    class Config:
        frozen = True

    @field_validator("filters")
    @classmethod
    def require_filterable(cls, value: dict[str, str]) -> dict[str, str]:
        for field in value:
            column = get_column(field)
            if column is None or not column.filterable:
                raise ValueError(f"Column is not filterable: {field!r}")
        return value

    @field_validator("sort_field")
    @classmethod
    def require_sortable(cls, value: str | None) -> str | None:
        if value is None:
            return value
        column = get_column(value)
        if column is None or not column.sortable:
            raise ValueError(f"Column is not sortable: {value!r}")
        return value

    def with_filter(self, field: str, value: str | None) -> ListingQuery:
        """Set or clear (value None) the filter on one field."""
        filters = {k: v for k, v in self.filters.items() if k != field}
        if value is not None:
            filters[field] = value
        return ListingQuery(
            filters=filters, sort_field=self.sort_field, descending=self.descending
        )

    def toggle_sort(self, field: str) -> ListingQuery:
        """Sort ascending by a new field, or flip direction on the current one."""
        if field == self.sort_field:
            return ListingQuery(
                filters=self.filters, sort_field=field, descending=not self.descending
            )
        return ListingQuery(filters=self.filters, sort_field=field, descending=False)

    def apply(self, listings: Sequence[Listing]) -> list[Listing]:
        rows = [
            listing
            for listing in listings
            if all(getattr(listing, field) == value for field, value in self.filters.items())
        ]
        if self.sort_field is not None:
            # Stable: equal keys keep snapshot order in both directions
            rows.sort(key=lambda listing: getattr(listing, self.sort_field), reverse=self.descending)
        return rows
