"""
Thin overlay scrollbar and the scroll area that hosts it.

The message area of a dialog scrolls through OverlayScrollArea, which keeps
the native scrollbars hidden and draws a MinimalistScrollBar over the right
edge of the viewport only while the content is taller than the viewport.
"""

from PyQt6.QtCore import QEvent, QRect, Qt
from PyQt6.QtGui import QColor, QPainter
from PyQt6.QtWidgets import QFrame, QScrollArea, QScrollBar

from scrolldialog.ui.managers.theme_manager import ThemeManager

class MinimalistScrollBar(QScrollBar):
    """
    Vertical scrollbar drawn as a rounded handle.

    Handle thickness is 4px idle, 6px on hover and 10px while dragging.
    """

    V_PADDING = 8
    MIN_HANDLE = 20

    def __init__(self, parent=None):
        super().__init__(Qt.Orientation.Vertical, parent)
        self.theme_manager = ThemeManager.get_instance()

        self._is_dragging = False
        self._drag_start_offset = 0.0

        self._idle_thickness = 4
        self._hover_thickness = 6
        self._drag_thickness = 10

        self._idle_color = QColor()
        self._hover_color = QColor()

        self._update_colors()
        self.theme_manager.theme_changed.connect(self._update_colors)

        self.setMouseTracking(True)

    def _update_colors(self):
        if self.theme_manager.is_dark():
            self._idle_color = QColor(255, 255, 255, 60)
            self._hover_color = QColor(255, 255, 255, 90)
        else:
            self._idle_color = QColor(0, 0, 0, 70)
            self._hover_color = QColor(0, 0, 0, 100)
        self.update()

    def _thickness(self) -> int:
        if self._is_dragging:
            return self._drag_thickness
        if self.underMouse():
            return self._hover_thickness
        return self._idle_thickness

    def _track_height(self, handle_height: float) -> float:
        return (self.height() - self.V_PADDING * 2) - handle_height

    def _value_at(self, y: float, handle_height: float) -> int:
        track_height = self._track_height(handle_height)
        if track_height <= 0:
            return self.value()
        scroll_range = self.maximum() - self.minimum()
        return int(self.minimum() + (y / track_height) * scroll_range)

    def handle_rect(self) -> QRect:
        if self.minimum() == self.maximum():
            return QRect()

        groove_height = self.height() - self.V_PADDING * 2
        total_range = self.maximum() - self.minimum() + self.pageStep()
        if total_range <= 0 or groove_height <= 0:
            return QRect()

        handle_height = max((self.pageStep() / total_range) * groove_height, self.MIN_HANDLE)
        scroll_range = self.maximum() - self.minimum()
        track_height = groove_height - handle_height

        handle_y = self.V_PADDING + (
            (self.value() - self.minimum()) / scroll_range * track_height
            if scroll_range > 0
            else 0
        )
        thickness = self._thickness()
        handle_x = (self.width() - thickness) // 2

        return QRect(int(handle_x), int(handle_y), int(thickness), int(handle_height))

    def paintEvent(self, event):
        handle_rect = self.handle_rect()
        if handle_rect.isEmpty():
            return

        if self._is_dragging:
            current_color = self.theme_manager.get_color("accent")
        elif self.underMouse():
            current_color = self._hover_color
        else:
            current_color = self._idle_color

        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(current_color)
        radius = handle_rect.width() / 2.0
        painter.drawRoundedRect(handle_rect, radius, radius)

    def mousePressEvent(self, event):
        if event.button() != Qt.MouseButton.LeftButton:
            return

        handle_rect = self.handle_rect()
        y = event.position().y()

        if handle_rect.contains(event.position().toPoint()):
            self._drag_start_offset = y - handle_rect.y()
        else:
            # Jump so the handle is centered under the cursor, then keep dragging.
            handle_height = handle_rect.height()
            self.setValue(self._value_at(y - self.V_PADDING - handle_height / 2, handle_height))
            self._drag_start_offset = handle_height / 2

        self._is_dragging = True
        self.update()
        event.accept()

    def mouseMoveEvent(self, event):
        if self._is_dragging:
            handle_height = self.handle_rect().height()
            y = event.position().y() - self.V_PADDING - self._drag_start_offset
            self.setValue(self._value_at(y, handle_height))
        event.accept()

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self._is_dragging = False
            self.update()
            event.accept()

    def enterEvent(self, event):
        self.update()
        super().enterEvent(event)

    def leaveEvent(self, event):
        self.update()
        super().leaveEvent(event)

class OverlayScrollArea(QScrollArea):
    """QScrollArea that shows a MinimalistScrollBar as an overlay."""

    SCROLLBAR_WIDTH = 14

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setFrameShape(QFrame.Shape.NoFrame)
        self.setWidgetResizable(True)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)

        self.overlay_scrollbar = MinimalistScrollBar(self)

        native = self.verticalScrollBar()
        native.valueChanged.connect(self.overlay_scrollbar.setValue)
        native.rangeChanged.connect(self._on_range_changed)
        self.overlay_scrollbar.valueChanged.connect(native.setValue)

        self.overlay_scrollbar.setVisible(False)

    def setWidget(self, widget):
        super().setWidget(widget)
        if widget:
            widget.installEventFilter(self)

    def eventFilter(self, watched, event):
        if watched == self.widget() and event.type() == QEvent.Type.Resize:
            self._update_scrollbar_visibility()
        return super().eventFilter(watched, event)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._position_scrollbar()
        self._update_scrollbar_visibility()

    def _on_range_changed(self, minimum: int, maximum: int):
        self.overlay_scrollbar.setRange(minimum, maximum)
        self.overlay_scrollbar.setPageStep(self.verticalScrollBar().pageStep())
        self._update_scrollbar_visibility()

    def _update_scrollbar_visibility(self):
        if self.widget() is None:
            return
        is_visible = self.widget().height() > self.viewport().height()
        if self.overlay_scrollbar.isVisible() != is_visible:
            self.overlay_scrollbar.setVisible(is_visible)

    def _position_scrollbar(self):
        self.overlay_scrollbar.setGeometry(
            self.width() - self.SCROLLBAR_WIDTH, 0, self.SCROLLBAR_WIDTH, self.height()
        )
        self.overlay_scrollbar.raise_()
