import logging
import os
import sys

LOG_LEVEL_ENV = "FACULTY_PAY_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOGGER_NAME = "faculty_pay"


def configure_logging(level=None, stream=None, handler=None):
    """Route the ``faculty_pay`` logger hierarchy to one handler.

    Existing handlers are dropped first, so calling this on every Streamlit
    rerun leaves exactly one handler in place.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    if handler is None:
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.handlers.clear()
    logger.addHandler(handler)
    return logger
