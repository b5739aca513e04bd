"""Shared fixtures for the scrolldialog tests.

All tests run against the offscreen Qt platform. The blocking exec() of
ScrollingDialog is replaced with ``fake_exec`` so show() can be driven
without a display or a nested event loop.
"""

from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication

from scrolldialog.core.models import DialogOutcome
from scrolldialog.ui.dialogs.scrolling_dialog import ScrollingDialog
from scrolldialog.ui.managers.theme_manager import ThemeManager


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication(["scrolldialog-tests"])
    return app


@pytest.fixture(autouse=True)
def light_theme(qapp):
    """Every test starts from the light theme."""
    ThemeManager.get_instance().set_theme("light", qapp)
    yield


class ExecRecorder:
    """Stand-in for ScrollingDialog.exec.

    Records each dialog passed to exec() and clicks the button whose
    outcome matches ``click``; with ``click=None`` the dialog is rejected
    as if the window-manager close button was used.
    """

    def __init__(self) -> None:
        self.dialogs: list[ScrollingDialog] = []
        self.click: DialogOutcome | None = DialogOutcome.DISMISSED

    def __call__(self, dialog: ScrollingDialog) -> int:
        self.dialogs.append(dialog)
        if self.click is None:
            dialog.reject()
        else:
            for button in dialog.buttons:
                if button.property("outcome") == self.click.name:
                    button.click()
                    break
        return dialog.result()

    @property
    def last(self) -> ScrollingDialog:
        return self.dialogs[-1]


@pytest.fixture
def fake_exec(qapp, monkeypatch) -> ExecRecorder:
    recorder = ExecRecorder()
    monkeypatch.setattr(ScrollingDialog, "exec", lambda self: recorder(self))
    return recorder
