"""
Scrolling message box.

A modal dialog that shows text of any length in a scrollable area, with an
optional caption, one of three button layouts and an optional stock icon.
Each ScrollingDialog is built from one DialogRequest and presented once;
show() builds a fresh dialog for every call.
"""

import logging
import sys
from functools import partial
from typing import List, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QApplication,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QVBoxLayout,
    QWidget,
)

from scrolldialog.core.errors import DialogStateError
from scrolldialog.core.models import (
    ButtonSet,
    ButtonSlot,
    ButtonSpec,
    DialogIcon,
    DialogOutcome,
    DialogRequest,
    button_specs_for,
)
from scrolldialog.ui.dialogs.dialog_helpers import BaseDialog, center_dialog, setup_dialog_icon
from scrolldialog.ui.services.icon_service import ICON_SIZE, get_stock_icon
from scrolldialog.ui.widgets.atomic.custom_button import CustomButton
from scrolldialog.ui.widgets.atomic.minimalist_scrollbar import OverlayScrollArea

logger = logging.getLogger("ScrollDialog")

HORIZONTAL_MASK = Qt.AlignmentFlag.AlignHorizontal_Mask
VERTICAL_MASK = Qt.AlignmentFlag.AlignVertical_Mask

class ScrollingDialog(BaseDialog):
    ICON_MARGIN = 50
    BUTTON_WIDTH = 75
    DEFAULT_SIZE = (480, 320)

    def __init__(self, request: DialogRequest, parent: QWidget = None):
        super().__init__(parent, title=request.caption, min_width=360, min_height=200)
        self.request = request

        self._outcome = DialogOutcome.DISMISSED
        self._presented = False
        self._default_button: Optional[CustomButton] = None
        self.buttons: List[CustomButton] = []
        self.icon_label: Optional[QLabel] = None
        self.icon_kind = DialogIcon.NONE

        self._setup_ui()
        self.message_label.setText(request.message)
        self._attach_buttons(request.buttons)
        self._attach_icon(request.icon)

        self.resize(*self.DEFAULT_SIZE)
        center_dialog(self, parent)

        logger.debug(
            f"Built dialog '{request.caption}': buttons={request.buttons.name}, "
            f"icon={self.icon_kind.name}, {len(request.message)} chars"
        )

    def _setup_ui(self):
        self.main_layout = QGridLayout(self)
        self.main_layout.setContentsMargins(16, 16, 16, 12)
        self.main_layout.setVerticalSpacing(12)

        self.message_container = QWidget()
        self._message_layout = QVBoxLayout(self.message_container)
        self._message_layout.setContentsMargins(0, 0, 0, 0)

        self.message_label = QLabel()
        self.message_label.setObjectName("ScrollingDialogMessage")
        self.message_label.setTextFormat(Qt.TextFormat.PlainText)
        self.message_label.setWordWrap(True)
        self.message_label.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
        self.message_label.setTextInteractionFlags(
            Qt.TextInteractionFlag.TextSelectableByMouse
            | Qt.TextInteractionFlag.TextSelectableByKeyboard
        )
        self.message_label.setContentsMargins(4, 4, 18, 4)

        self.scroll_area = OverlayScrollArea()
        self.scroll_area.setWidget(self.message_label)
        self._message_layout.addWidget(self.scroll_area)

        self.main_layout.addWidget(self.message_container, 0, 0)
        self.main_layout.setRowStretch(0, 1)

        self.buttons_layout = QHBoxLayout()
        self.buttons_layout.setSpacing(8)
        self.main_layout.addLayout(self.buttons_layout, 1, 0)

        self._apply_message_style()

    def _apply_message_style(self):
        text = self.theme_manager.get_color("dialog.text").name()
        background = self.theme_manager.get_color("dialog.message.background").name()
        self.message_label.setStyleSheet(f"color: {text}; background: {background};")

    def _on_theme_changed(self):
        super()._on_theme_changed()
        self._apply_message_style()

    def _attach_buttons(self, buttons: ButtonSet):
        specs = button_specs_for(buttons)
        centered = [spec for spec in specs if spec.slot is ButtonSlot.CENTER]
        paired = sorted(
            (spec for spec in specs if spec.slot is not ButtonSlot.CENTER),
            key=lambda spec: spec.slot is ButtonSlot.RIGHT,
        )

        self.buttons_layout.addStretch(1)
        for spec in centered + paired:
            self.buttons_layout.addWidget(self._create_button(spec))
        if centered:
            self.buttons_layout.addStretch(1)

    def _create_button(self, spec: ButtonSpec) -> CustomButton:
        button = CustomButton(spec.label, self)
        button.setFixedWidth(self.BUTTON_WIDTH)
        button.setProperty("outcome", spec.outcome.name)
        if spec.is_default:
            button.setDefault(True)
            self._default_button = button
        button.clicked.connect(partial(self._on_button_clicked, spec.outcome))
        self.buttons.append(button)
        return button

    def _attach_icon(self, icon: DialogIcon):
        if self.icon_label is not None:
            return

        stock_icon = get_stock_icon(icon, self.style())
        if stock_icon is None or stock_icon.isNull():
            return

        self.icon_kind = DialogIcon.coerce(icon)
        self.icon_label = QLabel()
        self.icon_label.setObjectName("ScrollingDialogIcon")
        self.icon_label.setPixmap(stock_icon.pixmap(ICON_SIZE))
        self.icon_label.setFixedSize(ICON_SIZE)

        self._message_layout.setContentsMargins(self.ICON_MARGIN, 0, 0, 0)
        self.main_layout.addWidget(
            self.icon_label,
            0,
            0,
            Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop,
        )
        setup_dialog_icon(self, stock_icon)

    def _on_button_clicked(self, outcome: DialogOutcome):
        self._outcome = outcome
        logger.debug(f"Dialog '{self.request.caption}' closed with {outcome.name}")
        if outcome is DialogOutcome.DECLINED:
            self.reject()
        else:
            self.accept()

    def keyPressEvent(self, event):
        if (
            event.key() in (Qt.Key.Key_Return, Qt.Key.Key_Enter)
            and self._default_button is not None
        ):
            self._default_button.click()
            event.accept()
            return
        super().keyPressEvent(event)

    def showEvent(self, event):
        super().showEvent(event)
        if self._default_button is not None:
            self._default_button.setFocus()

    @property
    def outcome(self) -> DialogOutcome:
        return self._outcome

    @property
    def message(self) -> str:
        return self.message_label.text()

    @property
    def caption(self) -> str:
        return self.windowTitle()

    @property
    def default_button(self) -> Optional[CustomButton]:
        return self._default_button

    @property
    def text_margin(self) -> int:
        """Left margin of the message area; non-zero when an icon is attached."""
        return self._message_layout.contentsMargins().left()

    @property
    def horizontal_alignment(self) -> Qt.AlignmentFlag:
        return self.message_label.alignment() & HORIZONTAL_MASK

    @horizontal_alignment.setter
    def horizontal_alignment(self, value: Qt.AlignmentFlag):
        self.message_label.setAlignment((value & HORIZONTAL_MASK) | self.vertical_alignment)

    @property
    def vertical_alignment(self) -> Qt.AlignmentFlag:
        return self.message_label.alignment() & VERTICAL_MASK

    @vertical_alignment.setter
    def vertical_alignment(self, value: Qt.AlignmentFlag):
        self.message_label.setAlignment(self.horizontal_alignment | (value & VERTICAL_MASK))

    def present(self) -> DialogOutcome:
        """
        Shows the dialog modally and blocks until it is closed.

        Returns:
            DialogOutcome: CONFIRMED or DECLINED for paired buttons,
            DISMISSED for OK-only dialogs and host-level closes

        Raises:
            DialogStateError: If the dialog was already presented
        """
        if self._presented:
            raise DialogStateError("A ScrollingDialog can only be presented once")
        self._presented = True

        self.exec()
        logger.debug(f"Dialog '{self.request.caption}' outcome: {self._outcome.name}")
        return self._outcome

def _ensure_application() -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    return app

def build_dialog(
    message: str,
    caption: str = "",
    buttons: ButtonSet = ButtonSet.OK,
    icon: DialogIcon = DialogIcon.NONE,
    *,
    parent: QWidget = None,
) -> ScrollingDialog:
    """
    Builds a fresh, not yet shown dialog for one presentation.

    The caller owns the returned dialog: call deleteLater() on it once
    present() returns, or it stays alive and connected to theme updates.
    """
    _ensure_application()
    request = DialogRequest(message=message, caption=caption, buttons=buttons, icon=icon)
    return ScrollingDialog(request, parent)

def show(
    message: str,
    caption: str = "",
    buttons: ButtonSet = ButtonSet.OK,
    icon: DialogIcon = DialogIcon.NONE,
    *,
    parent: QWidget = None,
) -> DialogOutcome:
    """
    Shows a scrolling message box and waits for the user to close it.

    Args:
        message: Text to display, scrolled when it does not fit
        caption: Window title
        buttons: ButtonSet.OK, OK_CANCEL or YES_NO; anything else means OK
        icon: DialogIcon kind; NONE or unknown values show no icon
        parent: Optional parent widget the dialog is centered on

    Returns:
        DialogOutcome of the presentation
    """
    dialog = build_dialog(message, caption, buttons, icon, parent=parent)
    try:
        return dialog.present()
    finally:
        dialog.deleteLater()
