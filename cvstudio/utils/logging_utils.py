"""Logging helpers for CV Studio."""

import logging

LOG = logging.getLogger("cvstudio")


def setup_logging(level: str = "INFO") -> None:
    """
    Configure console logging for the package logger.

    Safe to call on every Streamlit rerun: the handler is only added once.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...)
    """
    LOG.setLevel(level.upper())
    if LOG.handlers:
        return

    console = logging.StreamHandler()
    console.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    LOG.addHandler(console)
