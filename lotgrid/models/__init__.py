"""Pydantic models for listings, reference data and the column schema."""

from .columns import COLUMNS, ColumnSpec, EditorKind, get_column
from .listing import EDITABLE_FIELDS, Listing
from .reference import ReferenceData

__all__ = [
    "COLUMNS",
    "ColumnSpec",
    "EDITABLE_FIELDS",
    "EditorKind",
    "Listing",
    "ReferenceData",
    "get_column",
]
