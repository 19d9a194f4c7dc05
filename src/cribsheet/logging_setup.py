import logging
import sys

LOGGER_NAME = "cribsheet"
HANDLER_NAME = "cribsheet-stderr"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def setup_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """
    Send cribsheet log records to stderr. Safe to call more than once.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)
    logger.propagate = False

    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name(HANDLER_NAME)
        logger.addHandler(handler)

    return logger
