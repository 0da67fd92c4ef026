"""Editor for the focused listing."""

from typing import Callable

from castella import CheckBox, Column, Component, InputState, Row, Spacer, Text
from castella.theme import ThemeManager

from ..i18n import t
from ..models import Listing
from ..state import CellEdit, GridSession
from .form_fields import ButtonSelect, ButtonSelectState, PriceField


class EditPanel(Component):
    """Cell editors for one listing.

    Each editor commits a CellEdit carrying the full row; the panel is
    rebuilt from the stored listing afterwards, so a make change shows the
    reset model immediately.
    """

    def __init__(
        self,
        session: GridSession,
        listing: Listing | None,
        price_input: InputState,
        selected: bool,
        on_commit: Callable[[CellEdit], None],
        on_toggle_selected: Callable[[int], None],
    ):
        super().__init__()
        self._session = session
        self._listing = listing
        self._price_input = price_input
        self._selected = selected
        self._on_commit = on_commit
        self._on_toggle_selected = on_toggle_selected

    def view(self):
        theme = ThemeManager().current
        listing = self._listing
        if listing is None:
            return Column(
                Spacer().fixed_height(16),
                Text(t("editor.empty"), font_size=14).text_color(theme.colors.text_primary),
                Spacer(),
            ).bg_color(theme.colors.bg_primary)

        makes = list(self._session.choices_for("make", listing.id))
        models = list(self._session.choices_for("model", listing.id))
        make_state = ButtonSelectState(
            makes,
            makes.index(listing.make) if listing.make in makes else -1,
            on_change=lambda value: self._commit(listing, "make", value),
        )
        model_state = ButtonSelectState(
            models,
            models.index(listing.model) if listing.model in models else -1,
            on_change=lambda value: self._commit(listing, "model", value),
        )
        price_cell = self._session.builder.price_cell(listing)

        return Column(
            Row(
                Text(t("editor.title", id=listing.id), font_size=18),
                Spacer(),
                CheckBox(self._selected)
                .on_click(lambda _: self._on_toggle_selected(listing.id))
                .fixed_width(20)
                .fixed_height(20),
            ).fixed_height(36),
            Spacer().fixed_height(8),
            ButtonSelect(t("editor.make"), make_state),
            ButtonSelect(t("editor.model"), model_state, empty_text=t("editor.no_models")),
            PriceField(
                t("editor.price"),
                self._price_input,
                preview=price_cell.label,
                highlighted=price_cell.highlighted,
                apply_label=t("editor.apply"),
                on_apply=lambda text: self._commit(listing, "price", text),
            ),
            Spacer(),
        ).bg_color(theme.colors.bg_primary)

    def _commit(self, listing: Listing, field: str, value):
        record = listing.to_record()
        record[field] = value
        self._on_commit(CellEdit(record=record, field=field))
