"""
Dialogs: the scrolling message box and the helpers it is built on.
"""

from .dialog_helpers import BaseDialog, center_dialog, setup_dialog_icon
from .scrolling_dialog import ScrollingDialog, build_dialog, show

__all__ = [
    'BaseDialog',
    'center_dialog',
    'setup_dialog_icon',
    'ScrollingDialog',
    'build_dialog',
    'show'
]
