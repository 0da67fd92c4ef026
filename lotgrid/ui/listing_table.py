"""Listing table with make filter, sorting and a pinned total row."""

import logging
from collections.abc import Sequence
from typing import Callable

from castella import (
    Button,
    Column,
    Component,
    DataTable,
    DataTableState,
    Row,
    Spacer,
    State,
    TabItem,
    Tabs,
    TabsState,
    Text,
)
from castella.theme import ThemeManager

from ..i18n import t
from ..models import COLUMNS, Listing
from ..state import ListingQuery
from ..summary import (
    HIGHLIGHT_BG_COLOR,
    HIGHLIGHT_TEXT_COLOR,
    GridSummary,
    SummaryBuilder,
    format_amount,
)

logger = logging.getLogger(__name__)

SELECTED_MARK = "[x]"
UNSELECTED_MARK = "[ ]"
SORT_ASC_MARK = "\u25b2"
SORT_DESC_MARK = "\u25bc"


class ListingTableSurface:
    """Edit surface backed by castella state.

    Holds the rows as last pushed by the session, the user's selection and
    the committed filter/sort query. Every push bumps a render trigger so attached components re-render.
    """

    def __init__(self):
        self._rows: list[Listing] = []
        self._selected: set[int] = set()
        self._focused_id: int | None = None
        self._summary = GridSummary()
        self._query = ListingQuery()
        self._render_trigger = State(0)

    def attach(self, component: Component):
        self._render_trigger.attach(component)

    def rows(self) -> list[Listing]:
        return list(self._rows)

    def summary(self) -> GridSummary:
        return self._summary

    def focused(self) -> Listing | None:
        for row in self._rows:
            if row.id == self._focused_id:
                return row
        return None

    def focus(self, listing_id: int | None):
        self._focused_id = listing_id
        self._bump()

    def toggle_selected(self, listing_id: int):
        if listing_id in self._selected:
            self._selected.discard(listing_id)
        else:
            self._selected.add(listing_id)
        self._bump()

    def is_selected(self, listing_id: int) -> bool:
        return listing_id in self._selected

    def query(self) -> ListingQuery:
        return self._query

    def set_query(self, query: ListingQuery):
        self._query = query
        self._bump()

    # EditSurface

    def render(self, listings: Sequence[Listing]) -> None:
        self._rows = list(listings)
        live = {row.id for row in self._rows}
        self._selected &= live
        self._bump()

    def insert_rows(self, listings: Sequence[Listing], index: int) -> None:
        self._rows[index:index] = list(listings)
        self._bump()

    def remove_rows(self, listing_ids: set[int]) -> None:
        self._rows = [row for row in self._rows if row.id not in listing_ids]
        self._selected -= listing_ids
        if self._focused_id in listing_ids:
            self._focused_id = None
        self._bump()

    def apply_listing(self, listing: Listing) -> None:
        for i, row in enumerate(self._rows):
            if row.id == listing.id:
                self._rows[i] = listing
                self._bump()
                return
        logger.warning(f"Listing {listing.id} is not shown in the table")

    def selected_ids(self) -> set[int]:
        return set(self._selected)

    def show_summary(self, summary: GridSummary) -> None:
        self._summary = summary
        self._bump()

    def _bump(self):
        self._render_trigger.set(self._render_trigger() + 1)


class ListingTable(Component):
    """Filter tabs, sort buttons and a DataTable of listings with the total row."""

    ALL_TAB = "__all__"

    def __init__(
        self,
        surface: ListingTableSurface,
        builder: SummaryBuilder,
        makes: Sequence[str],
        on_focus: Callable[[int], None],
    ):
        super().__init__()
        self._surface = surface
        self._builder = builder
        self._makes = list(makes)
        self._on_focus = on_focus
        self._current_ids: list[int] = []

    def view(self):
        theme = ThemeManager().current
        query = self._surface.query()
        listings = query.apply(self._surface.rows())
        summary = self._surface.summary()
        self._current_ids = [listing.id for listing in listings]

        columns = [t("grid.column.selected"), t("grid.column.id")] + [
            t(column.header_key) for column in COLUMNS
        ]
        rows = [self._row_values(listing) for listing in listings]
        # Synthetic trailing row over all listings; clicks on it are ignored.
        rows.append(["", "", t("grid.total"), "", summary.total_text])

        table_state = DataTableState(columns=columns, rows=rows)
        focused = self._surface.focused()
        if focused is not None and focused.id in self._current_ids:
            table_state.select_row(self._current_ids.index(focused.id))

        return Column(
            self._build_filter_tabs(query),
            Spacer().fixed_height(4),
            self._build_sort_bar(query),
            Spacer().fixed_height(4),
            DataTable(table_state).on_cell_click(self._handle_cell_click),
            Text(
                t("status.shown", shown=len(listings), count=summary.row_count),
                font_size=12,
            )
            .text_color(theme.colors.text_primary)
            .fixed_height(24),
            self._build_highlight_strip(listings),
        )

    def _build_filter_tabs(self, query: ListingQuery):
        selected = query.filters.get("make", self.ALL_TAB)
        tab_items = [TabItem(id=self.ALL_TAB, label=t("grid.filter_all"), content=Spacer())] + [
            TabItem(id=make, label=make, content=Spacer()) for make in self._makes
        ]
        tabs_state = TabsState(tabs=tab_items, selected_id=selected)
        return Tabs(tabs_state).on_change(self._handle_tab_change).fixed_height(44)

    def _build_sort_bar(self, query: ListingQuery):
        buttons = []
        for column in COLUMNS:
            if not column.sortable:
                continue
            label = t(column.header_key)
            if query.sort_field == column.field:
                label = f"{label} {SORT_DESC_MARK if query.descending else SORT_ASC_MARK}"
            buttons.append(
                Button(label)
                .on_click(lambda _, field=column.field: self._toggle_sort(field))
                .fixed_width(110)
            )
            buttons.append(Spacer().fixed_width(4))
        return Row(
            Text(t("grid.sort"), font_size=12).fixed_width(50),
            *buttons,
            Spacer(),
        ).fixed_height(32)

    def _build_highlight_strip(self, listings: Sequence[Listing]):
        highlighted = self._builder.highlighted_rows(listings)
        if not highlighted:
            return Spacer().fixed_height(0)
        ids = ", ".join(f"#{listing.id}" for listing in highlighted)
        return (
            Row(
                Text(
                    t("grid.highlighted", ids=ids, threshold=format_amount(self._builder.threshold)),
                    font_size=12,
                ).text_color(HIGHLIGHT_TEXT_COLOR),
            )
            .bg_color(HIGHLIGHT_BG_COLOR)
            .fixed_height(24)
        )

    def _row_values(self, listing: Listing) -> list[str]:
        mark = SELECTED_MARK if self._surface.is_selected(listing.id) else UNSELECTED_MARK
        cell = self._builder.price_cell(listing)
        return [mark, str(listing.id), listing.make, listing.model, cell.label]

    def _handle_tab_change(self, tab_id: str):
        make = None if tab_id == self.ALL_TAB else tab_id
        self._surface.set_query(self._surface.query().with_filter("make", make))

    def _toggle_sort(self, field: str):
        self._surface.set_query(self._surface.query().toggle_sort(field))

    def _handle_cell_click(self, event):
        if 0 <= event.row < len(self._current_ids):
            self._on_focus(self._current_ids[event.row])
