"""Logging configuration helpers."""

import logging

LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """Attach a single stream handler to the ``health_tracker`` logger."""
    logger = logging.getLogger("health_tracker")
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
