"""
Generic searchable combobox.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, List, Optional, Sequence, TypeVar

from .views import ComboboxView, OptionView

T = TypeVar("T")


class Combobox(Generic[T]):
    """
    Searchable single-choice picker over any item shape.

    ``display`` and ``value_of`` pull the label and the stored value out of
    an item. The selected value is owned by the caller and passed in; the
    only local state is whether the popover is open.
    """

    def __init__(
        self,
        options: Sequence[T],
        value: Optional[str],
        on_value_change: Callable[[Optional[str]], None],
        *,
        display: Callable[[T], Any],
        value_of: Callable[[T], Any],
        placeholder: str = "Select item...",
        search_placeholder: str = "Search items...",
        no_results_message: str = "No item found.",
    ) -> None:
        self.options = list(options)
        self.value = value
        self.on_value_change = on_value_change
        self.display = display
        self.value_of = value_of
        self.placeholder = placeholder
        self.search_placeholder = search_placeholder
        self.no_results_message = no_results_message
        self.open = False

    def _key(self, option: T) -> str:
        return str(self.value_of(option))

    def _label(self, option: T) -> str:
        return str(self.display(option))

    @property
    def selected_option(self) -> Optional[T]:
        return next((o for o in self.options if self._key(o) == self.value), None)

    @property
    def display_value(self) -> str:
        selected = self.selected_option
        return self._label(selected) if selected is not None else ""

    def set_open(self, open_: bool) -> None:
        self.open = open_

    def filter(self, query: str) -> List[T]:
        """Options whose display text contains the query, case-insensitive."""
        needle = query.strip().lower()
        if not needle:
            return list(self.options)
        return [o for o in self.options if needle in self._label(o).lower()]

    def select(self, option: T) -> None:
        """Pick an option; picking the current value again clears it."""
        key = self._key(option)
        self.on_value_change(None if key == self.value else key)
        self.open = False

    def render(self, query: str = "") -> ComboboxView:
        return ComboboxView(
            trigger_text=self.display_value if self.value else self.placeholder,
            expanded=self.open,
            search_placeholder=self.search_placeholder,
            empty_message=self.no_results_message,
            value=self.value,
            options=[
                OptionView(
                    value=self._key(o),
                    label=self._label(o),
                    checked=self._key(o) == self.value,
                )
                for o in self.filter(query)
            ],
        )
