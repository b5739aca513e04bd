"""
Dialog helper functions and base class.
"""

from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QGuiApplication, QIcon
from PyQt6.QtWidgets import QDialog, QWidget

from scrolldialog.ui.managers.theme_manager import ThemeManager

class BaseDialog(QDialog):
    """
    Base dialog class with standard setup.

    Sets window flags and sizing, connects to the theme manager and
    applies the dialog background color.
    """

    def __init__(self, parent=None, title="", min_width=350, min_height=0):
        super().__init__(parent)
        self.setObjectName(f"{self.__class__.__name__}")
        self.theme_manager = ThemeManager.get_instance()

        self._setup_window(title, min_width, min_height)
        self._setup_theme()

    def _setup_window(self, title, min_width, min_height):
        self.setWindowTitle(title or "")

        self.setWindowFlags(
            Qt.WindowType.Dialog
            | Qt.WindowType.WindowTitleHint
            | Qt.WindowType.WindowCloseButtonHint
        )
        self.setModal(True)
        self.setSizeGripEnabled(True)

        if min_width > 0:
            self.setMinimumWidth(min_width)
        if min_height > 0:
            self.setMinimumHeight(min_height)

    def _setup_theme(self):
        self.theme_manager.theme_changed.connect(self._on_theme_changed)
        self._apply_background()

    def _apply_background(self):
        background = self.theme_manager.get_color("dialog.background").name()
        text = self.theme_manager.get_color("dialog.text").name()
        self.setStyleSheet(
            f"#{self.objectName()} {{ background-color: {background}; color: {text}; }}"
        )

    def _on_theme_changed(self):
        """Override to restyle children; call super() to keep the background in sync."""
        self._apply_background()
        self.theme_manager.apply_theme_to_dialog(self)

def setup_dialog_icon(dialog: QDialog, icon: Optional[QIcon]):
    """
    Sets the window icon of a dialog.

    Args:
        dialog: Dialog to set icon for
        icon: Icon to use; None leaves the application icon in place
    """
    if icon is not None and not icon.isNull():
        dialog.setWindowIcon(icon)

def center_dialog(dialog: QWidget, parent: Optional[QWidget] = None):
    """
    Moves a dialog to the center of its parent, or of the screen without one.

    Uses the current dialog size, so call it after the dialog is resized.
    """
    size = dialog.size()

    if parent is not None and parent.isVisible():
        # Screen coordinates of the top-level window, also for child widgets.
        area = parent.window().frameGeometry()
    else:
        screen = QGuiApplication.primaryScreen()
        if screen is None:
            return
        area = screen.availableGeometry()

    x = area.x() + (area.width() - size.width()) // 2
    y = area.y() + (area.height() - size.height()) // 2
    dialog.move(max(area.x(), x), max(area.y(), y))
