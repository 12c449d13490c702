import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Library code only asks for a namespaced logger; handlers are installed by
    ``configure_logging`` at application entry (the CLI does this).
    """
    return logging.getLogger(f"pearstate.{name}")
