"""pearstate utility functions.

Each file in this package exports exactly one function or class.
"""

from .configure_logging import configure_logging
from .get_logger import get_logger

__all__ = ["configure_logging", "get_logger"]
