"""Console (and optional file) logging for figgen command-line runs."""
import logging
import sys
from typing import List, Optional

PACKAGE_LOGGER = "figgen"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _handlers(log_file: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    return handlers


def setup_logging(level_name: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Route records from every ``figgen.*`` module logger to stdout and, when
    ``log_file`` is given, to that file as well.

    Library callers never need this; generators only emit through module
    loggers and stay silent until the host application configures logging.
    Calling it again replaces the handlers installed by the previous call.
    """
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {level_name!r}")

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _handlers(log_file):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("logging at %s%s", logging.getLevelName(level),
                 f", copy in {log_file}" if log_file else "")
    return logger
