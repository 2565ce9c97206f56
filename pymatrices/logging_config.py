"""
Logging setup for the ``pymatrices`` logger.

Library modules only call ``logging.getLogger(__name__)``; handlers are
attached here, by the command-line entry point or by an application that
wants the package's messages on stdout.
"""
import logging
import sys
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s %(levelname)-8s %(name)s: %(message)s'
DATE_FORMAT = '%H:%M:%S'


def _level_number(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    number = logging.getLevelName(level.upper())
    if not isinstance(number, int):
        raise ValueError(f"Unknown logging level: {level}")
    return number


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach stdout (and optionally file) handlers to the package logger.

    Calling it again replaces the handlers from the previous call.

    Args:
        level: Level number or name, e.g. logging.DEBUG or "info"
        log_file: Path of a log file to write alongside stdout (truncated)

    Returns:
        The ``pymatrices`` logger.

    Raises:
        ValueError: If ``level`` is a name logging does not know
    """
    number = _level_number(level)

    logger = logging.getLogger("pymatrices")
    logger.setLevel(number)
    for old in list(logger.handlers):
        logger.removeHandler(old)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(number)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Handlers attached at level %s", logging.getLevelName(number))
    return logger
