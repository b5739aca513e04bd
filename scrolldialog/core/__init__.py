from .errors import DialogStateError
from .logging import get_log_directory, setup_logging
from .models import (
    BUTTON_LAYOUTS,
    ButtonSet,
    ButtonSlot,
    ButtonSpec,
    DialogIcon,
    DialogOutcome,
    DialogRequest,
    button_specs_for,
)

__all__ = [
    'DialogStateError',
    'get_log_directory',
    'setup_logging',
    'BUTTON_LAYOUTS',
    'ButtonSet',
    'ButtonSlot',
    'ButtonSpec',
    'DialogIcon',
    'DialogOutcome',
    'DialogRequest',
    'button_specs_for',
]
