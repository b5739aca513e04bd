"""
Data model for scrolling dialogs.

Holds the request/outcome types and the button mapping table. Nothing here
touches Qt, so the selection rules can be checked without a display.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

logger = logging.getLogger("ScrollDialog")

class ButtonSet(Enum):
    OK = "ok"
    OK_CANCEL = "ok_cancel"
    YES_NO = "yes_no"

    @classmethod
    def coerce(cls, value) -> "ButtonSet":
        """Returns a ButtonSet for value, falling back to OK when unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            pass
        if isinstance(value, str):
            name = value.strip().upper().replace("-", "_")
            if name in cls.__members__:
                return cls[name]
        logger.warning(f"Unknown button set {value!r}, using OK")
        return cls.OK

class DialogIcon(Enum):
    NONE = "none"
    ERROR = "error"
    WARNING = "warning"
    INFORMATION = "information"
    QUESTION = "question"

    @classmethod
    def coerce(cls, value) -> "DialogIcon":
        """Returns a DialogIcon for value, NONE when value is None or unknown."""
        if value is None:
            return cls.NONE
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            pass
        if isinstance(value, str):
            name = value.strip().upper()
            if name in cls.__members__:
                return cls[name]
        logger.warning(f"Unknown dialog icon {value!r}, showing no icon")
        return cls.NONE

class DialogOutcome(Enum):
    """Result of one presentation; value is True, False or None."""

    CONFIRMED = True
    DECLINED = False
    DISMISSED = None

    @property
    def result(self):
        return self.value

class ButtonSlot(Enum):
    CENTER = "center"
    LEFT = "left"
    RIGHT = "right"

@dataclass(frozen=True)
class ButtonSpec:
    label: str
    outcome: DialogOutcome
    slot: ButtonSlot
    is_default: bool = False

BUTTON_LAYOUTS: Dict[ButtonSet, Tuple[ButtonSpec, ...]] = {
    ButtonSet.OK: (
        ButtonSpec("OK", DialogOutcome.DISMISSED, ButtonSlot.CENTER, is_default=True),
    ),
    ButtonSet.OK_CANCEL: (
        ButtonSpec("OK", DialogOutcome.CONFIRMED, ButtonSlot.LEFT),
        ButtonSpec("Cancel", DialogOutcome.DECLINED, ButtonSlot.RIGHT),
    ),
    ButtonSet.YES_NO: (
        ButtonSpec("Yes", DialogOutcome.CONFIRMED, ButtonSlot.LEFT),
        ButtonSpec("No", DialogOutcome.DECLINED, ButtonSlot.RIGHT),
    ),
}

def button_specs_for(buttons) -> Tuple[ButtonSpec, ...]:
    return BUTTON_LAYOUTS[ButtonSet.coerce(buttons)]

@dataclass(frozen=True)
class DialogRequest:
    """
    Everything one presentation needs.

    Args:
        message: Text shown in the scrollable area, any length
        caption: Window title
        buttons: Button layout; unknown values fall back to OK
        icon: Stock icon kind; unknown values mean no icon
    """

    message: str
    caption: str = ""
    buttons: ButtonSet = ButtonSet.OK
    icon: DialogIcon = DialogIcon.NONE

    def __post_init__(self):
        object.__setattr__(self, "message", "" if self.message is None else str(self.message))
        object.__setattr__(self, "caption", "" if self.caption is None else str(self.caption))
        object.__setattr__(self, "buttons", ButtonSet.coerce(self.buttons))
        object.__setattr__(self, "icon", DialogIcon.coerce(self.icon))
