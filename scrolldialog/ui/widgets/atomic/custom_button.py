from PyQt6.QtCore import QPointF, QRectF, QSize, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFontMetrics, QPainter, QPen
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QWidget

from scrolldialog.ui.managers.theme_manager import ThemeManager

class CustomButton(QWidget):
    """
    Text button painted from the theme palette.

    A default button uses the primary colors and is the one the owning
    dialog clicks when Enter is pressed.
    """

    clicked = pyqtSignal()

    RADIUS = 6
    HEIGHT = 30

    def __init__(self, text: str = "", parent: QWidget = None):
        super().__init__(parent)

        self.setObjectName("CustomButton")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        self.theme_manager = ThemeManager.get_instance()
        self._is_default = False

        layout = QHBoxLayout(self)
        layout.setContentsMargins(15, 5, 15, 5)
        layout.setSpacing(0)

        self.text_label = QLabel(text)
        self.text_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.text_label)

        self.setProperty("class", "custom-button")
        self.setProperty("state", "normal")
        self.setMinimumHeight(self.HEIGHT)

        self.theme_manager.theme_changed.connect(self._on_theme_changed)
        self._on_theme_changed()

    def _on_theme_changed(self):
        prefix = self._style_prefix()
        text_color_key = f"{prefix}.text" if self._is_default else "dialog.text"
        text_color = self.theme_manager.get_color(text_color_key)

        self.text_label.setStyleSheet(
            f"color: {text_color.name()}; background: transparent;"
        )
        self.update()

    def setText(self, text):
        self.text_label.setText(text)
        self.updateGeometry()

    def text(self):
        return self.text_label.text()

    def setDefault(self, is_default: bool):
        self._is_default = bool(is_default)
        self.setProperty("class", "primary" if self._is_default else "custom-button")
        self._on_theme_changed()

    def isDefault(self) -> bool:
        return self._is_default

    def click(self):
        if self.isEnabled():
            self.clicked.emit()

    def sizeHint(self):
        fm = QFontMetrics(self.font())
        text_width = fm.horizontalAdvance(self.text_label.text())
        return QSize(text_width + 30, max(self.HEIGHT, fm.height() + 6))

    def minimumSizeHint(self):
        hint = self.sizeHint()
        hint.setWidth(max(hint.width(), 50))
        return hint

    def _style_prefix(self) -> str:
        return "button.primary" if self._is_default else "button.default"

    def enterEvent(self, event):
        if not self.isEnabled():
            return
        self.setProperty("state", "hover")
        self.update()
        super().enterEvent(event)

    def leaveEvent(self, event):
        if not self.isEnabled():
            return
        self.setProperty("state", "normal")
        self.update()
        super().leaveEvent(event)

    def mousePressEvent(self, event):
        if not self.isEnabled():
            return
        self.setProperty("state", "pressed")
        self.update()
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event):
        self.setProperty(
            "state", "hover" if self.rect().contains(event.pos()) else "normal"
        )
        self.update()
        if not self.isEnabled():
            return
        if (
            self.rect().contains(event.pos())
            and event.button() == Qt.MouseButton.LeftButton
        ):
            self.clicked.emit()
        super().mouseReleaseEvent(event)

    def keyPressEvent(self, event):
        if event.key() == Qt.Key.Key_Space:
            self.click()
            event.accept()
            return
        super().keyPressEvent(event)

    def paintEvent(self, _):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        rectf = QRectF(self.rect()).adjusted(0.5, 0.5, -0.5, -0.5)
        prefix = self._style_prefix()

        if not self.isEnabled():
            fill_color = QColor(self.theme_manager.get_color("dialog.border"))
            fill_color.setAlpha(40)
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QBrush(fill_color))
            painter.drawRoundedRect(rectf, self.RADIUS, self.RADIUS)
            return

        state = str(self.property("state") or "normal")
        if state == "hover":
            bg_key = f"{prefix}.background.hover"
        elif state == "pressed":
            bg_key = f"{prefix}.background.pressed"
        else:
            bg_key = f"{prefix}.background"

        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(self.theme_manager.get_color(bg_key)))
        painter.drawRoundedRect(rectf, self.RADIUS, self.RADIUS)

        pen_border = QPen(self.theme_manager.get_color(f"{prefix}.border"))
        pen_border.setWidthF(1.0)
        if self.hasFocus():
            pen_border = QPen(self.theme_manager.get_color("accent"))
            pen_border.setWidthF(1.5)
        painter.setPen(pen_border)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawRoundedRect(rectf, self.RADIUS, self.RADIUS)

        if not self.theme_manager.is_dark():
            edge_pen = QPen(self.theme_manager.get_color(f"{prefix}.bottom.edge"))
            edge_pen.setWidthF(1.0)
            painter.setPen(edge_pen)
            base_y = rectf.bottom() - 0.5
            painter.drawLine(
                QPointF(rectf.left() + self.RADIUS, base_y),
                QPointF(rectf.right() - self.RADIUS, base_y),
            )
