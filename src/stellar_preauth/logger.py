"""Console logging for the stellar_preauth package."""
import logging
from typing import Union

LOGGER_NAME = "stellar_preauth"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Attach a single console handler to the package logger and set its level.

    Calling this more than once only updates the level.

    Args:
        level (int | str): A logging level number or name such as ``"DEBUG"``.

    Returns:
        logging.Logger: The package logger.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
