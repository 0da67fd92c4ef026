"""Reusable form field components for the listing editor."""

from typing import Callable

from castella import Button, Column, Component, Input, InputState, Row, Spacer, State, Text
from castella.theme import ThemeManager

from ..summary import HIGHLIGHT_BG_COLOR, HIGHLIGHT_TEXT_COLOR


class ButtonSelectState:
    """State for ButtonSelect component."""

    def __init__(
        self,
        options: list[str],
        selected_index: int = -1,
        on_change: Callable[[str], None] | None = None,
    ):
        self._options = options
        self._selected_index = selected_index
        self._on_change = on_change
        self._state = State(selected_index)

    def attach(self, component: Component):
        self._state.attach(component)

    def options(self) -> list[str]:
        return self._options

    def selected_index(self) -> int:
        return self._selected_index

    def selected_value(self) -> str:
        if 0 <= self._selected_index < len(self._options):
            return self._options[self._selected_index]
        return ""

    def select(self, index: int):
        if self._selected_index != index and 0 <= index < len(self._options):
            self._selected_index = index
            # Commit before state.set() so the store is updated before re-render
            if self._on_change:
                self._on_change(self._options[index])
            self._state.set(index)


class ButtonSelect(Component):
    """Wrapping button-based selector with a label."""

    PER_ROW = 3

    def __init__(self, label: str, state: ButtonSelectState, empty_text: str = ""):
        super().__init__()
        self._label = label
        self._state = state
        self._empty_text = empty_text
        self._state.attach(self)

    def view(self):
        theme = ThemeManager().current
        options = self._state.options()
        selected = self._state.selected_index()

        rows = []
        for start in range(0, len(options), self.PER_ROW):
            buttons = []
            for i in range(start, min(start + self.PER_ROW, len(options))):
                btn = (
                    Button(options[i])
                    .on_click(lambda _, idx=i: self._state.select(idx))
                    .fixed_height(32)
                )
                if i == selected:
                    btn = btn.bg_color(theme.colors.bg_selected)
                else:
                    btn = btn.bg_color(theme.colors.bg_secondary)
                buttons.append(btn)
                buttons.append(Spacer().fixed_width(4))
            rows.append(Row(*buttons).fixed_height(36))

        if not rows:
            rows.append(
                Text(self._empty_text, font_size=12)
                .text_color(theme.colors.text_warning)
                .fixed_height(24)
            )

        return Column(
            Text(self._label, font_size=13).text_color(theme.colors.text_primary).fixed_height(20),
            *rows,
            Spacer().fixed_height(8),
        )


class PriceField(Component):
    """Price input with an apply button and a formatted preview."""

    def __init__(
        self,
        label: str,
        state: InputState,
        preview: str,
        highlighted: bool,
        apply_label: str,
        on_apply: Callable[[str], None],
    ):
        super().__init__()
        self._label = label
        self._state = state
        self._preview = preview
        self._highlighted = highlighted
        self._apply_label = apply_label
        self._on_apply = on_apply

    def view(self):
        theme = ThemeManager().current
        preview_color = HIGHLIGHT_TEXT_COLOR if self._highlighted else theme.colors.text_primary
        preview_bg = HIGHLIGHT_BG_COLOR if self._highlighted else theme.colors.bg_primary

        return Column(
            Text(self._label, font_size=13).text_color(theme.colors.text_primary).fixed_height(20),
            Row(
                Input(self._state).flex(1).fixed_height(32),
                Spacer().fixed_width(8),
                Button(self._apply_label)
                .on_click(lambda _: self._on_apply(self._state.value()))
                .fixed_width(70)
                .fixed_height(32),
            ).fixed_height(36),
            Row(Text(self._preview, font_size=16).text_color(preview_color))
            .bg_color(preview_bg)
            .fixed_height(28),
        ).fixed_height(92)
