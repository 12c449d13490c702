"""pearstate - resolve the launch identity of an application instance."""

from .api.link.InvalidLinkError import InvalidLinkError
from .api.PearStateError import PearStateError
from .api.state.State import State
from .api.state.StateOptions import StateOptions
from .api.storage.InvalidAppStorageError import InvalidAppStorageError

__all__ = [
    "InvalidAppStorageError",
    "InvalidLinkError",
    "PearStateError",
    "State",
    "StateOptions",
]
