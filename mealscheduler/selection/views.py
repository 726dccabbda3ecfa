"""
Serializable view models produced by the selection components.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class OptionView(BaseModel):
    value: str
    label: str
    checked: bool = False


class SelectView(BaseModel):
    """A single-choice dropdown."""
    placeholder: str
    group_label: str
    value: str = ""
    options: List[OptionView] = Field(default_factory=list)


class ComboboxView(BaseModel):
    """A searchable dropdown with a trigger button."""
    trigger_text: str
    expanded: bool = False
    search_placeholder: str
    empty_message: str
    value: Optional[str] = None
    options: List[OptionView] = Field(default_factory=list)


class RadioView(BaseModel):
    name: str
    value: str
    label: str
    checked: bool
    disabled: bool = False
