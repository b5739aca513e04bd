class DialogStateError(RuntimeError):
    """Raised when a dialog that was already presented is presented again."""
