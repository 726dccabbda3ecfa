"""
Tests for the selection controls.
"""

from typing import List, Optional

import pytest

from mealscheduler.domain.models import Congregation
from mealscheduler.selection import Combobox, CongregationSelector, CustomRadio, SelectionState


CONGREGATIONS = [
    Congregation(id=1, name="Maple Grove"),
    Congregation(id=2, name="Riverside"),
    Congregation(id=12, name="Old Town"),
]


class Recorder:
    """Collects callback invocations."""

    def __init__(self):
        self.calls: List[object] = []

    def __call__(self, value):
        self.calls.append(value)


class TestCongregationSelector:
    """Tests for CongregationSelector."""

    @pytest.mark.parametrize("congregations", [None, []])
    def test_renders_nothing_without_congregations(self, congregations):
        selector = CongregationSelector(SelectionState(congregations))

        assert selector.render() is None

    def test_render_lists_congregations(self):
        selector = CongregationSelector(SelectionState(CONGREGATIONS))

        view = selector.render()

        assert view.placeholder == "Select congregation"
        assert view.group_label == "Your Congregations"
        assert view.value == ""
        assert [(o.value, o.label) for o in view.options] == [
            ("1", "Maple Grove"),
            ("2", "Riverside"),
            ("12", "Old Town"),
        ]

    def test_change_updates_state_and_notifies(self):
        state = SelectionState(CONGREGATIONS)
        recorder = Recorder()
        selector = CongregationSelector(state, on_congregation_change=recorder)

        selected = selector.handle_change("2")

        assert selected == CONGREGATIONS[1]
        assert state.selected_congregation == CONGREGATIONS[1]
        assert recorder.calls == [CONGREGATIONS[1]]
        assert selector.render().value == "2"
        assert [o.checked for o in selector.render().options] == [False, True, False]

    def test_unknown_id_clears_selection(self):
        """Test that an unknown id yields None for both state and callback."""
        state = SelectionState(CONGREGATIONS, selected_congregation=CONGREGATIONS[0])
        recorder = Recorder()
        selector = CongregationSelector(state, on_congregation_change=recorder)

        selected = selector.handle_change("99")

        assert selected is None
        assert state.selected_congregation is None
        assert recorder.calls == [None]

    def test_ids_compared_as_strings(self):
        state = SelectionState(CONGREGATIONS)
        selector = CongregationSelector(state)

        assert selector.handle_change("12") == CONGREGATIONS[2]
        assert selector.handle_change("1") == CONGREGATIONS[0]
        assert selector.handle_change(" 1") is None

    def test_callback_is_optional(self):
        state = SelectionState(CONGREGATIONS)

        CongregationSelector(state).handle_change("1")

        assert state.selected_congregation == CONGREGATIONS[0]


class TestCombobox:
    """Tests for the generic Combobox."""

    OPTIONS = [
        {"id": 1, "name": "Elder Smith"},
        {"id": 2, "name": "Elder Jones"},
        {"id": 3, "name": "Sister Brown"},
    ]

    def _build(self, value: Optional[str], recorder: Recorder) -> Combobox:
        return Combobox(
            self.OPTIONS,
            value,
            recorder,
            display=lambda o: o["name"],
            value_of=lambda o: o["id"],
            placeholder="Select missionary...",
        )

    def test_placeholder_without_value(self):
        combobox = self._build(None, Recorder())

        view = combobox.render()

        assert view.trigger_text == "Select missionary..."
        assert combobox.display_value == ""
        assert not any(o.checked for o in view.options)

    def test_display_value_for_selection(self):
        combobox = self._build("2", Recorder())

        assert combobox.selected_option == self.OPTIONS[1]
        assert combobox.render().trigger_text == "Elder Jones"

    def test_select_reports_value_field(self):
        """Test that the callback gets the value field, not the item."""
        recorder = Recorder()
        combobox = self._build(None, recorder)
        combobox.set_open(True)

        combobox.select(self.OPTIONS[2])

        assert recorder.calls == ["3"]
        assert combobox.open is False

    def test_reselect_clears(self):
        """Test clear-on-reselect semantics."""
        recorder = Recorder()
        combobox = self._build("1", recorder)

        combobox.select(self.OPTIONS[0])

        assert recorder.calls == [None]

    def test_filter_by_display_text(self):
        combobox = self._build(None, Recorder())

        assert combobox.filter("elder") == self.OPTIONS[:2]
        assert combobox.filter("  BROWN ") == [self.OPTIONS[2]]
        assert combobox.filter("") == self.OPTIONS
        assert combobox.filter("nobody") == []

    def test_render_with_query(self):
        combobox = self._build("3", Recorder())

        view = combobox.render(query="sister")

        assert [(o.value, o.checked) for o in view.options] == [("3", True)]
        assert view.empty_message == "No item found."
        assert view.search_placeholder == "Search items..."

    def test_value_not_in_options(self):
        combobox = self._build("42", Recorder())

        assert combobox.selected_option is None
        assert combobox.render().trigger_text == ""


class TestCustomRadio:
    """Tests for the controlled radio."""

    def test_click_reports_value(self):
        recorder = Recorder()
        radio = CustomRadio(value="dinner", checked=False, on_change=recorder, label="Dinner", name="meal")

        radio.click()

        assert recorder.calls == ["dinner"]

    def test_click_ignored_when_disabled(self):
        recorder = Recorder()
        radio = CustomRadio(
            value="dinner", checked=False, on_change=recorder, label="Dinner", name="meal", disabled=True
        )

        radio.click()

        assert recorder.calls == []
        assert radio.render().disabled

    def test_checked_follows_caller(self):
        """Test that clicking never flips the checked state by itself."""
        recorder = Recorder()
        radio = CustomRadio(value="lunch", checked=False, on_change=recorder, label="Lunch", name="meal")

        radio.click()

        assert radio.render().checked is False
        assert CustomRadio(
            value="lunch", checked=True, on_change=recorder, label="Lunch", name="meal"
        ).render().checked is True
