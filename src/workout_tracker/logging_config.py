"""Logging setup for the CLI and web server."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure root logging for workout-tracker."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # aiosqlite logs every statement at DEBUG
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


def enable_request_logging() -> None:
    """Show workout-tracker INFO messages (mutations) while serving."""
    logger = logging.getLogger("workout_tracker")
    if logger.getEffectiveLevel() > logging.INFO:
        logger.setLevel(logging.INFO)
