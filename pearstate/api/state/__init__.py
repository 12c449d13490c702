"""Composed launch state."""

from .config_from import config_from
from .Runtime import Runtime
from .State import State
from .StateOptions import StateOptions

__all__ = ["Runtime", "State", "StateOptions", "config_from"]
