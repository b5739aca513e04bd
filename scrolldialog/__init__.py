"""
ScrollDialog - a PyQt6 message box for long text.

Shows a modal window with a scrollable message, an optional caption, one of
the OK, OK/Cancel or Yes/No button layouts and an optional stock icon:

    from scrolldialog import ButtonSet, DialogIcon, show

    outcome = show(report, "Import finished", ButtonSet.YES_NO, DialogIcon.QUESTION)
    if outcome.result:
        ...
"""

from .core import (
    ButtonSet,
    DialogIcon,
    DialogOutcome,
    DialogRequest,
    DialogStateError,
)
from .ui.dialogs import ScrollingDialog, build_dialog, show
from .ui.managers import ThemeManager

__version__ = "1.0.0"

__all__ = [
    'ButtonSet',
    'DialogIcon',
    'DialogOutcome',
    'DialogRequest',
    'DialogStateError',
    'ScrollingDialog',
    'ThemeManager',
    'build_dialog',
    'show'
]
