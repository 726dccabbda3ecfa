"""
Controlled radio option.
"""

from dataclasses import dataclass
from typing import Callable

from .views import RadioView


@dataclass(frozen=True)
class CustomRadio:
    """
    A single radio choice whose checked state is supplied by the caller.

    Clicking only reports the value; the caller decides what is checked.
    """
    value: str
    checked: bool
    on_change: Callable[[str], None]
    label: str
    name: str
    disabled: bool = False

    def click(self) -> None:
        if not self.disabled:
            self.on_change(self.value)

    def render(self) -> RadioView:
        return RadioView(
            name=self.name,
            value=self.value,
            label=self.label,
            checked=self.checked,
            disabled=self.disabled,
        )
