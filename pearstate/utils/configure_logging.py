import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home: Path | None = None, level: int = logging.INFO) -> None:
    """Configure unified pearstate logging.

    Args:
        home: Path to pearstate home directory. If None, derived from environment.
        level: Level for the ``pearstate`` logger.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        from ..api.config.get_home_dir import get_home_dir

        home = get_home_dir()

    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "pearstate.log"

    root_logger = logging.getLogger("pearstate")
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
