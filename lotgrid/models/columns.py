"""Column schema for the listing table."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class EditorKind(str, Enum):
    """Cell editor used for a column."""

    NONE = "none"
    SELECT = "select"  # fixed choice list
    DEPENDENT_SELECT = "dependent_select"  # choices keyed by another field
    NUMERIC = "numeric"


class ColumnSpec(BaseModel):
    """Describes one column of the listing table."""

    field: str = Field(..., description="Listing field shown in this column")
    header_key: str = Field(..., description="Translation key for the header")
    editable: bool = Field(default=False)
    editor: EditorKind = Field(default=EditorKind.NONE)
    depends_on: str | None = Field(
        default=None, description="Field whose value keys the choice list"
    )
    filterable: bool = Field(default=False)
    sortable: bool = Field(default=True)

    class Config:
        frozen = True


COLUMNS: tuple[ColumnSpec, ...] = (
    ColumnSpec(
        field="make",
        header_key="grid.column.make",
        editable=True,
        editor=EditorKind.SELECT,
        filterable=True,
    ),
    ColumnSpec(
        field="model",
        header_key="grid.column.model",
        editable=True,
        editor=EditorKind.DEPENDENT_SELECT,
        depends_on="make",
    ),
    ColumnSpec(
        field="price",
        header_key="grid.column.price",
        editable=True,
        editor=EditorKind.NUMERIC,
    ),
)


def get_column(field: str) -> ColumnSpec | None:
    """Look up a column by field name."""
    for column in COLUMNS:
        if column.field == field:
            return column
    return None
