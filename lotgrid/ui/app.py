"""Main lotgrid application component."""

from castella import Button, Column, Component, InputState, Row, Spacer, State, Text
from castella.i18n import I18nManager
from castella.theme import ThemeManager

from ..config import ConfigLoader, LotgridConfig
from ..i18n import get_locale, next_locale, set_locale, t
from ..state import CellEdit, GridSession, ListingStore
from ..summary import SummaryBuilder, format_amount
from .edit_panel import EditPanel
from .listing_table import ListingTable, ListingTableSurface


class LotgridApp(Component):
    """Listing grid with toolbar, edit panel and status bar."""

    def __init__(self, config: LotgridConfig):
        super().__init__()

        # Reference data is built once and shared by the store and the editors
        reference = ConfigLoader.reference_data(config)
        store = ListingStore(reference, ConfigLoader.seed_listings(config))
        builder = SummaryBuilder(config.settings.highlight_threshold)

        self._surface = ListingTableSurface()
        self._surface.attach(self)
        self._session = GridSession(store, builder, self._surface)

        # Price input persists across re-renders to keep focus while typing
        self._price_input = InputState("")

        self._status_message = State(t("app.ready"))
        self._status_message.attach(self)

        # Locale change trigger for app-wide re-render
        self._locale_trigger = State(0)
        self._locale_trigger.attach(self)
        I18nManager().add_listener(self)

    def view(self):
        focused = self._surface.focused()
        return Column(
            self._build_toolbar(),
            Row(
                ListingTable(
                    surface=self._surface,
                    builder=self._session.builder,
                    makes=self._session.store.reference.makes(),
                    on_focus=self._focus,
                ).flex(1),
                Spacer().fixed_width(8),
                EditPanel(
                    session=self._session,
                    listing=focused,
                    price_input=self._price_input,
                    selected=focused is not None and self._surface.is_selected(focused.id),
                    on_commit=self._on_commit,
                    on_toggle_selected=self._surface.toggle_selected,
                ).fixed_width(380),
            ).flex(1),
            self._build_status_bar(),
        )

    def _build_toolbar(self):
        theme = ThemeManager().current
        return Row(
            Text(t("app.name"), font_size=20).fixed_width(120),
            Text(t("app.subtitle"), font_size=12).fixed_width(160),
            Spacer(),
            Button(t("toolbar.add_row"))
            .on_click(self._on_add_row)
            .bg_color(theme.colors.bg_selected)
            .fixed_width(120),
            Spacer().fixed_width(8),
            Button(t("toolbar.delete_selected"))
            .on_click(self._on_delete_selected)
            .bg_color(theme.colors.bg_secondary)
            .fixed_width(140),
            Spacer().fixed_width(8),
            Button(t("toolbar.language", name=get_locale().upper()))
            .on_click(self._on_switch_language)
            .fixed_width(120),
            Spacer().fixed_width(8),
        ).fixed_height(48)

    def _build_status_bar(self):
        theme = ThemeManager().current
        summary = self._surface.summary()
        return Row(
            Text(self._status_message(), font_size=12),
            Spacer(),
            Text(t("status.total", total=summary.total_text), font_size=12),
            Spacer().fixed_width(8),
        ).fixed_height(32).bg_color(theme.colors.bg_primary)

    def _on_add_row(self, _):
        listing = self._session.add_row()
        self._focus(listing.id)
        self._status_message.set(t("app.added", id=listing.id))

    def _on_delete_selected(self, _):
        removed = self._session.delete_selected()
        if not removed:
            self._status_message.set(t("app.nothing_selected"))
            return
        self._status_message.set(t("app.deleted", count=len(removed)))

    def _on_switch_language(self, _):
        set_locale(next_locale(get_locale()))

    def _focus(self, listing_id: int):
        listing = self._session.store.get(listing_id)
        self._price_input.set(format_amount(listing.price) if listing else "")
        self._surface.focus(listing_id)

    def _on_commit(self, edit: CellEdit):
        listing = self._session.commit_edit(edit)
        if listing is None:
            self._status_message.set(t("app.edit_dropped"))
            return
        if edit.field == "price":
            self._price_input.set(format_amount(listing.price))
        self._status_message.set(t("app.updated", id=listing.id))

    def on_locale_changed(self, locale: str) -> None:
        """Handle locale change - trigger app-wide re-render."""
        self._locale_trigger.set(self._locale_trigger() + 1)
