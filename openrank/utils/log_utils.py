"""logging setup shared by every module in the package"""
import logging
import sys

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
PACKAGE_LOGGER_NAME = 'openrank'


def get_logger(name: str) -> logging.Logger:
    """
    Return the named module logger.

    The stdout handler and the WARNING level live on the package logger only and are set
    up the first time any module asks for a logger. Module loggers stay at NOTSET and
    propagate, so logging.getLogger('openrank').setLevel(logging.DEBUG) turns on the debug
    output of the whole package.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if not package_logger.handlers:
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(stream_handler)
        package_logger.setLevel(logging.WARNING)
    return logging.getLogger(name)
