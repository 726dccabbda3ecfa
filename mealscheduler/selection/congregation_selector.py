"""
Dropdown for switching between the user's congregations.
"""

from typing import Callable, Optional

from ..domain.models import Congregation
from .state import SelectionState
from .views import OptionView, SelectView

CongregationCallback = Callable[[Optional[Congregation]], None]


class CongregationSelector:
    """
    Binds the user's congregation list to the shared selection state.

    Renders nothing when the user has no congregations.
    """

    PLACEHOLDER = "Select congregation"
    GROUP_LABEL = "Your Congregations"

    def __init__(
        self,
        state: SelectionState,
        on_congregation_change: Optional[CongregationCallback] = None,
    ):
        self.state = state
        self.on_congregation_change = on_congregation_change

    def handle_change(self, congregation_id: str) -> Optional[Congregation]:
        """
        Resolve the chosen identifier and publish the new selection.

        Args:
            congregation_id: Identifier in string form, as sent by the picker

        Returns:
            The matching congregation, or None if the id is unknown
        """
        congregations = self.state.user_congregations or ()
        selected = next(
            (c for c in congregations if c.key() == congregation_id),
            None,
        )

        self.state.set_selected_congregation(selected)
        if self.on_congregation_change:
            self.on_congregation_change(selected)

        return selected

    def render(self) -> Optional[SelectView]:
        congregations = self.state.user_congregations
        if not congregations:
            return None

        selected = self.state.selected_congregation
        value = selected.key() if selected else ""

        return SelectView(
            placeholder=self.PLACEHOLDER,
            group_label=self.GROUP_LABEL,
            value=value,
            options=[
                OptionView(value=c.key(), label=c.name, checked=c.key() == value)
                for c in congregations
            ],
        )
