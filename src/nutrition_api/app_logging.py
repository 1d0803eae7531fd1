"""Logging configuration helpers."""

import logging

PACKAGE_LOGGER = __name__.partition(".")[0]


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach one stream handler to the package logger and return it.

    Repeated calls only adjust the level.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(levelname)s: %(name)s: %(message)s")
        )
        logger.addHandler(handler)
        logger.propagate = False
    return logger
