"""Shared logger for the calculator."""
import logging
import sys

LOGGER_NAME: str = "arithmetic_calc"
LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str = LOGGER_NAME, level: int = logging.WARNING) -> logging.Logger:
    """
    Return the project logger, attaching a stderr handler on first use.

    Standard output is reserved for results and user diagnostics, so log
    records always go to standard error.

    :param str name: Logger name
    :param int level: Initial logging level

    :return: Configured logger
    :rtype: logging.Logger
    """
    _logger = logging.getLogger(name)
    if not _logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        _logger.addHandler(handler)
        _logger.setLevel(level)
    return _logger


logger: logging.Logger = get_logger()
