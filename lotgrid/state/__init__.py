"""Listing store and the edit-commit session."""

from .grid_session import CellEdit, EditSurface, GridSession
from .listing_query import ListingQuery
from .listing_store import ListingNotFoundError, ListingStore, UnknownFieldError

__all__ = [
    "CellEdit",
    "EditSurface",
    "GridSession",
    "ListingNotFoundError",
    "ListingQuery",
    "ListingStore",
    "UnknownFieldError",
]
