"""Malformed link error."""

from ..PearStateError import PearStateError


class InvalidLinkError(PearStateError, ValueError):
    """Raised when a link fails scheme or key validation."""

    code = "ERR_INVALID_LINK"
