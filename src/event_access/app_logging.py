"""Logging configuration helpers."""

import logging

_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    """Attach one stream handler to the package logger and apply ``level``.

    Repeated calls only update the level.
    """
    package_logger = logging.getLogger("event_access")
    package_logger.setLevel(level.upper() if isinstance(level, str) else level)
    package_logger.propagate = False
    if any(
        isinstance(handler, logging.StreamHandler)
        for handler in package_logger.handlers
    ):
        return
    stream = logging.StreamHandler()
    stream.setFormatter(logging.Formatter(_FORMAT))
    package_logger.addHandler(stream)
