import logging

from .config import LOG_LEVEL

LOGGER_NAME = "webdriver_conditions"
FORMAT = "%(asctime)-15s %(process)-5d %(levelname)-8s %(filename)s:%(lineno)d:%(funcName)s %(message)s"


def init_logger(level: str | int = LOG_LEVEL, stream=None) -> logging.Logger:
    """Attach a formatted stream handler to the package logger.

    Calling it again replaces the previously attached handler instead of
    stacking a second one.
    """
    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(level)
    for handler in list(log.handlers):
        if getattr(handler, "_wdcond_handler", False):
            log.removeHandler(handler)
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(FORMAT))
    handler._wdcond_handler = True
    log.addHandler(handler)
    log.debug("Logger has been initialised (level=%s)", logging.getLevelName(log.level))
    return log


def disable_logging():
    # child loggers inherit this level
    logging.getLogger(LOGGER_NAME).setLevel(logging.CRITICAL + 1)
