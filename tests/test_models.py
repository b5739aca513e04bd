"""Tests for the dialog data model and the button mapping table."""

from __future__ import annotations

import dataclasses

import pytest

from scrolldialog.core.models import (
    BUTTON_LAYOUTS,
    ButtonSet,
    ButtonSlot,
    DialogIcon,
    DialogOutcome,
    DialogRequest,
    button_specs_for,
)


class TestButtonSetCoerce:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (ButtonSet.YES_NO, ButtonSet.YES_NO),
            ("ok_cancel", ButtonSet.OK_CANCEL),
            ("YES_NO", ButtonSet.YES_NO),
            ("ok-cancel", ButtonSet.OK_CANCEL),
        ],
    )
    def test_known_values(self, value, expected) -> None:
        assert ButtonSet.coerce(value) is expected

    @pytest.mark.parametrize("value", ["abort_retry_ignore", 42, None, object()])
    def test_unknown_values_fall_back_to_ok(self, value, caplog) -> None:
        assert ButtonSet.coerce(value) is ButtonSet.OK
        assert "Unknown button set" in caplog.text


class TestDialogIconCoerce:
    def test_none_means_no_icon(self) -> None:
        assert DialogIcon.coerce(None) is DialogIcon.NONE

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("error", DialogIcon.ERROR),
            ("Warning", DialogIcon.WARNING),
            (DialogIcon.QUESTION, DialogIcon.QUESTION),
        ],
    )
    def test_known_values(self, value, expected) -> None:
        assert DialogIcon.coerce(value) is expected

    @pytest.mark.parametrize("value", ["asterisk", 16, 3.5])
    def test_unknown_values_mean_no_icon(self, value) -> None:
        assert DialogIcon.coerce(value) is DialogIcon.NONE


class TestButtonLayouts:
    def test_every_button_set_has_a_layout(self) -> None:
        assert set(BUTTON_LAYOUTS) == set(ButtonSet)

    def test_ok_is_single_centered_default(self) -> None:
        (spec,) = button_specs_for(ButtonSet.OK)
        assert spec.label == "OK"
        assert spec.slot is ButtonSlot.CENTER
        assert spec.is_default is True
        assert spec.outcome is DialogOutcome.DISMISSED

    @pytest.mark.parametrize(
        ("buttons", "labels"),
        [
            (ButtonSet.OK_CANCEL, ("OK", "Cancel")),
            (ButtonSet.YES_NO, ("Yes", "No")),
        ],
    )
    def test_pairs_confirm_left_decline_right(self, buttons, labels) -> None:
        left, right = button_specs_for(buttons)
        assert (left.label, right.label) == labels
        assert left.slot is ButtonSlot.LEFT
        assert right.slot is ButtonSlot.RIGHT
        assert left.outcome is DialogOutcome.CONFIRMED
        assert right.outcome is DialogOutcome.DECLINED
        assert not left.is_default
        assert not right.is_default

    def test_unknown_set_renders_ok(self) -> None:
        assert button_specs_for("retry_cancel") == BUTTON_LAYOUTS[ButtonSet.OK]


class TestDialogOutcome:
    def test_result_is_tri_state(self) -> None:
        assert DialogOutcome.CONFIRMED.result is True
        assert DialogOutcome.DECLINED.result is False
        assert DialogOutcome.DISMISSED.result is None


class TestDialogRequest:
    def test_defaults(self) -> None:
        request = DialogRequest("hello")
        assert request.caption == ""
        assert request.buttons is ButtonSet.OK
        assert request.icon is DialogIcon.NONE

    def test_coerces_fields(self) -> None:
        request = DialogRequest(None, None, "yes_no", "bogus")
        assert request.message == ""
        assert request.caption == ""
        assert request.buttons is ButtonSet.YES_NO
        assert request.icon is DialogIcon.NONE

    def test_is_immutable(self) -> None:
        request = DialogRequest("hello")
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.caption = "changed"  # type: ignore[misc]
