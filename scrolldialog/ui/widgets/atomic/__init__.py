from .custom_button import CustomButton
from .minimalist_scrollbar import MinimalistScrollBar, OverlayScrollArea

__all__ = [
    'CustomButton',
    'MinimalistScrollBar',
    'OverlayScrollArea'
]
