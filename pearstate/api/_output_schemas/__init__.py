"""Output schemas for pearstate commands."""

from ._base import BaseOutputSchema
from .config import ConfigVersionOutput
from .state import StatePkgOutput, StateRouteOutput, StateShowOutput, StateStorageOutput

__all__ = [
    "BaseOutputSchema",
    "ConfigVersionOutput",
    "StatePkgOutput",
    "StateRouteOutput",
    "StateShowOutput",
    "StateStorageOutput",
]
