"""Base error for pearstate."""


class PearStateError(Exception):
    """Raised when launch state cannot be resolved.

    Subclasses carry a stable ``code`` so callers can classify failures
    without matching on messages.
    """

    code = "ERR_PEARSTATE"

    def __init__(self, message: str = ""):
        self.message = message
        super().__init__(message or self.code)
