"""
Selection controls rendered to serializable view models.
"""

from .combobox import Combobox
from .congregation_selector import CongregationSelector
from .radio import CustomRadio
from .state import SelectionState
from .views import ComboboxView, OptionView, RadioView, SelectView

__all__ = [
    "Combobox",
    "ComboboxView",
    "CongregationSelector",
    "CustomRadio",
    "OptionView",
    "RadioView",
    "SelectView",
    "SelectionState",
]
