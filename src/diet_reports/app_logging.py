"""Logging configuration helpers."""

import logging

_LOGGER_NAME = "diet_reports"


def configure_logging(level: int | str = logging.INFO) -> None:
    """Attach a single stream handler to the package logger.

    ``level`` accepts a level number or name (``"DEBUG"``); it is applied on
    every call, while the handler is only installed once.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s: %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
