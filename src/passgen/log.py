import logging
import sys

LOGGER_NAME = "passgen"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(filename)s:%(lineno)d] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def level_for(verbosity: int) -> int:
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def configure_logging(verbosity: int = 0) -> logging.Logger:
    """
    Send the package logger to the current stderr at the level for `verbosity`.

    A handler installed by an earlier call is replaced, never stacked.
    """
    logger = logging.getLogger(LOGGER_NAME)
    level = level_for(verbosity)
    logger.setLevel(level)

    for old in [h for h in logger.handlers if getattr(h, "_passgen", False)]:
        logger.removeHandler(old)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    handler.setLevel(level)
    handler._passgen = True
    logger.addHandler(handler)
    return logger
