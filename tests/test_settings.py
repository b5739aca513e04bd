"""Tests for SettingsManager persistence and environment overrides."""

from __future__ import annotations

import pytest
from PyQt6.QtCore import QSettings

from scrolldialog.core.settings import SettingsManager


@pytest.fixture
def settings_manager(qapp, tmp_path, monkeypatch) -> SettingsManager:
    monkeypatch.delenv("APP_THEME", raising=False)
    QSettings.setPath(QSettings.Format.NativeFormat, QSettings.Scope.UserScope, str(tmp_path))
    QSettings.setPath(QSettings.Format.IniFormat, QSettings.Scope.UserScope, str(tmp_path))
    manager = SettingsManager("scrolldialog-tests", "settings")
    manager.settings.clear()
    return manager


def test_theme_defaults_to_auto(settings_manager) -> None:
    assert settings_manager.load_theme() == "auto"


def test_theme_round_trip(settings_manager) -> None:
    settings_manager.save_theme("dark")
    assert settings_manager.load_theme() == "dark"


def test_unknown_theme_is_rejected(settings_manager) -> None:
    with pytest.raises(ValueError, match="Unknown theme"):
        settings_manager.save_theme("solarized")


def test_environment_overrides_saved_theme(settings_manager, monkeypatch) -> None:
    settings_manager.save_theme("light")
    monkeypatch.setenv("APP_THEME", "DARK")
    assert settings_manager.load_theme() == "dark"


def test_debug_mode_round_trip(settings_manager) -> None:
    assert settings_manager.load_debug_mode() is False
    settings_manager.save_debug_mode(True)
    assert settings_manager.load_debug_mode() is True
