"""Invalid application storage error."""

from ..PearStateError import PearStateError


class InvalidAppStorageError(PearStateError):
    """Raised when an explicit storage path lies inside the project directory."""

    code = "ERR_INVALID_APP_STORAGE"
