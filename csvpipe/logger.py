from logging import INFO, Logger, StreamHandler, getLogger
from typing import Optional

from json_log_formatter import JSONFormatter

LoggerLevelT = int


def get_logger(level: Optional[LoggerLevelT] = None) -> Logger:
    """
    Return the package logger, installing its JSON handler on first use.

    Passing ``level`` sets the level of both the logger and its handler; calls
    without a level keep whatever level was configured last (INFO initially).
    """
    logger = getLogger(__name__)
    if len(logger.handlers) == 0:
        stream_handler = StreamHandler()
        stream_handler.setFormatter(JSONFormatter())
        logger.addHandler(stream_handler)
        if level is None:
            level = INFO
    if level is not None:
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
    return logger
