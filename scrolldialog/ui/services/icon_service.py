"""
Stock icon lookup for dialog icons.

Maps each DialogIcon kind to the platform's standard message box pixmap.
DialogIcon.NONE is intentionally absent from the table.
"""

from typing import Dict, Optional

from PyQt6.QtCore import QSize
from PyQt6.QtGui import QIcon, QPixmap
from PyQt6.QtWidgets import QApplication, QStyle

from scrolldialog.core.models import DialogIcon

STOCK_ICONS: Dict[DialogIcon, QStyle.StandardPixmap] = {
    DialogIcon.ERROR: QStyle.StandardPixmap.SP_MessageBoxCritical,
    DialogIcon.WARNING: QStyle.StandardPixmap.SP_MessageBoxWarning,
    DialogIcon.INFORMATION: QStyle.StandardPixmap.SP_MessageBoxInformation,
    DialogIcon.QUESTION: QStyle.StandardPixmap.SP_MessageBoxQuestion,
}

ICON_SIZE = QSize(32, 32)

def stock_pixmap_kind(icon) -> Optional[QStyle.StandardPixmap]:
    """Returns the standard pixmap for icon, or None when no glyph applies."""
    return STOCK_ICONS.get(DialogIcon.coerce(icon))

def get_stock_icon(icon, style: QStyle = None) -> Optional[QIcon]:
    """
    Fetch the stock icon for a dialog icon kind.

    Args:
        icon: DialogIcon (or anything DialogIcon.coerce accepts)
        style: Style to ask; defaults to the application style

    Returns:
        QIcon, or None for DialogIcon.NONE and unknown kinds
    """
    kind = stock_pixmap_kind(icon)
    if kind is None:
        return None
    style = style or QApplication.style()
    return style.standardIcon(kind)

def get_stock_pixmap(icon, style: QStyle = None, size: QSize = ICON_SIZE) -> Optional[QPixmap]:
    stock_icon = get_stock_icon(icon, style)
    if stock_icon is None:
        return None
    return stock_icon.pixmap(size)
