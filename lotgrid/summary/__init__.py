"""Derived values: totals, highlight classification and price formatting."""

from .amounts import coerce_amount, format_amount, parse_amount
from .builder import (
    DEFAULT_HIGHLIGHT_THRESHOLD,
    HIGHLIGHT_BG_COLOR,
    HIGHLIGHT_ROW_CLASS,
    HIGHLIGHT_TEXT_COLOR,
    GridSummary,
    PriceCell,
    SummaryBuilder,
    is_highlighted,
    total,
)

__all__ = [
    "DEFAULT_HIGHLIGHT_THRESHOLD",
    "HIGHLIGHT_BG_COLOR",
    "HIGHLIGHT_ROW_CLASS",
    "HIGHLIGHT_TEXT_COLOR",
    "GridSummary",
    "PriceCell",
    "SummaryBuilder",
    "coerce_amount",
    "format_amount",
    "is_highlighted",
    "parse_amount",
    "total",
]
