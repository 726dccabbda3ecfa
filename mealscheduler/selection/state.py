"""
Shared selection state for the signed-in user.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from ..domain.models import Congregation

logger = logging.getLogger(__name__)


class SelectionState:
    """
    Holds the user's congregations and the one currently selected.

    Consumers read through the properties; only ``set_selected_congregation``
    writes, and only the congregation selector calls it.
    """

    def __init__(
        self,
        user_congregations: Optional[Sequence[Congregation]] = None,
        selected_congregation: Optional[Congregation] = None,
    ) -> None:
        self._user_congregations: Optional[Tuple[Congregation, ...]] = (
            tuple(user_congregations) if user_congregations is not None else None
        )
        self._selected_congregation = selected_congregation

    @property
    def user_congregations(self) -> Optional[Tuple[Congregation, ...]]:
        return self._user_congregations

    @property
    def selected_congregation(self) -> Optional[Congregation]:
        return self._selected_congregation

    def set_selected_congregation(self, congregation: Optional[Congregation]) -> None:
        logger.debug(
            "Selected congregation changed: %s",
            congregation.name if congregation else None,
        )
        self._selected_congregation = congregation
