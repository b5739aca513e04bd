"""
Theme manager for scrolling dialogs.

Keeps the current light/dark theme and the registered color palettes,
and notifies widgets through theme_changed when either changes.
"""

import copy
import logging
from typing import Dict, Optional

from PyQt6.QtCore import QObject, Qt, pyqtSignal
from PyQt6.QtGui import QColor, QGuiApplication, QPalette
from PyQt6.QtWidgets import QApplication

from scrolldialog.core.theme import DARK_THEME_PALETTE, LIGHT_THEME_PALETTE

logger = logging.getLogger("ScrollDialog")

COLOR_ROLES = {
    "Window": QPalette.ColorRole.Window,
    "WindowText": QPalette.ColorRole.WindowText,
    "Base": QPalette.ColorRole.Base,
    "AlternateBase": QPalette.ColorRole.AlternateBase,
    "ToolTipBase": QPalette.ColorRole.ToolTipBase,
    "ToolTipText": QPalette.ColorRole.ToolTipText,
    "Text": QPalette.ColorRole.Text,
    "Button": QPalette.ColorRole.Button,
    "ButtonText": QPalette.ColorRole.ButtonText,
    "BrightText": QPalette.ColorRole.BrightText,
    "Highlight": QPalette.ColorRole.Highlight,
    "HighlightedText": QPalette.ColorRole.HighlightedText,
}

class ThemeManager(QObject):
    """
    Singleton theme manager.

    Starts with the bundled palettes; applications may replace them with
    register_palettes().
    """

    theme_changed = pyqtSignal()

    _instance: Optional['ThemeManager'] = None

    def __init__(self):
        super().__init__()
        self._current_theme = "light"
        self._light_palette = copy.deepcopy(LIGHT_THEME_PALETTE)
        self._dark_palette = copy.deepcopy(DARK_THEME_PALETTE)

    @classmethod
    def get_instance(cls) -> 'ThemeManager':
        """Get the singleton instance of ThemeManager."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register_palettes(self, light_palette: Dict, dark_palette: Dict = None):
        """
        Register color palettes for the application.

        Args:
            light_palette: Dictionary mapping color keys to QColor objects for light theme
            dark_palette: Dictionary mapping color keys to QColor objects for dark theme (optional)
        """
        self._light_palette = copy.deepcopy(light_palette)
        if dark_palette:
            self._dark_palette = copy.deepcopy(dark_palette)
        else:
            self._dark_palette = copy.deepcopy(light_palette)
        self.theme_changed.emit()

    def get_color(self, color_key: str) -> QColor:
        """
        Get a color from the current theme palette.

        Returns a fresh QColor; unknown keys give black.
        """
        palette = self._dark_palette if self.is_dark() else self._light_palette
        value = palette.get(color_key)

        if isinstance(value, (QColor, str)):
            return QColor(value)
        return QColor("#000000")

    def get_current_theme(self) -> str:
        return self._current_theme

    def is_dark(self) -> bool:
        return self._current_theme == "dark"

    def set_theme(self, theme_name: str, app=None):
        """
        Set the current theme.

        Args:
            theme_name: "light", "dark" or "auto" (follows the system color scheme)
            app: QApplication instance (optional)
        """
        effective_theme = theme_name
        if effective_theme == "auto":
            effective_theme = self._system_theme()

        new_theme = "dark" if effective_theme == "dark" else "light"
        app_instance = app or QApplication.instance()

        if self._current_theme != new_theme:
            logger.debug(f"Switching theme: {self._current_theme} -> {new_theme}")
            self._current_theme = new_theme
            if app_instance:
                self.apply_theme_to_app(app_instance)
            self.theme_changed.emit()
        elif app_instance:
            self.apply_theme_to_app(app_instance)

    def _system_theme(self) -> str:
        style_hints = QGuiApplication.styleHints()
        if style_hints is None:
            return "light"
        if style_hints.colorScheme() == Qt.ColorScheme.Dark:
            return "dark"
        return "light"

    def apply_theme_to_app(self, app):
        """Apply the current palette to the QApplication."""
        palette_data = self._dark_palette if self.is_dark() else self._light_palette

        if not palette_data:
            return

        q_palette = QPalette()
        for name, role in COLOR_ROLES.items():
            if name in palette_data:
                q_palette.setColor(role, QColor(palette_data[name]))

        app.setPalette(q_palette)

    def apply_theme_to_dialog(self, dialog):
        """Re-polish a dialog after a theme switch."""
        dialog.style().unpolish(dialog)
        dialog.style().polish(dialog)
        dialog.updateGeometry()
        dialog.update()
