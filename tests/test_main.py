"""Tests for the command line launcher."""

from __future__ import annotations

import logging

import pytest

from scrolldialog.__main__ import build_parser, exit_code_for, main, read_message
from scrolldialog.core.models import ButtonSet, DialogIcon, DialogOutcome


def test_parser_defaults() -> None:
    args = build_parser().parse_args(["hello"])
    assert args.message == "hello"
    assert args.caption == ""
    assert ButtonSet(args.buttons) is ButtonSet.OK
    assert DialogIcon(args.icon) is DialogIcon.NONE


def test_parser_rejects_unknown_buttons() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["hello", "--buttons", "retry"])


def test_message_read_from_file(tmp_path) -> None:
    path = tmp_path / "report.txt"
    path.write_text("line 1\nline 2\n", encoding="utf-8")
    args = build_parser().parse_args(["--file", str(path)])
    assert read_message(args) == "line 1\nline 2\n"


@pytest.mark.parametrize(
    ("outcome", "code"),
    [
        (DialogOutcome.CONFIRMED, 0),
        (DialogOutcome.DISMISSED, 0),
        (DialogOutcome.DECLINED, 1),
    ],
)
def test_exit_codes(outcome, code) -> None:
    assert exit_code_for(outcome) == code


def test_main_shows_dialog(fake_exec, tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    monkeypatch.setenv("APP_THEME", "light")
    monkeypatch.setattr(
        "scrolldialog.__main__.SettingsManager.load_debug_mode", lambda self: False
    )
    fake_exec.click = DialogOutcome.DECLINED

    try:
        code = main(["hello", "-c", "Title", "-b", "yes_no", "-i", "question"])
    finally:
        logger = logging.getLogger("ScrollDialog")
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            handler.close()

    dialog = fake_exec.last
    assert code == 1
    assert dialog.caption == "Title"
    assert dialog.icon_kind is DialogIcon.QUESTION
