"""
Logging Package
Namespaced loggers for the package, silent until configured

Provides a drop-in replacement for logging.getLogger that keeps
every logger under the package namespace.
"""
from viewable.logging.logger_config import (
    LoggerConfig,
    JSONFormatter,
)
import logging
from typing import Optional

from viewable.defaults import DEFAULT_LOGGER_NAME

__all__ = [
    'LoggerConfig',
    'JSONFormatter',
    'getLogger',
    'INFO',
    'DEBUG',
    'WARNING',
    'ERROR',
    'CRITICAL',
]

# Export logging levels for convenience
INFO = logging.INFO
DEBUG = logging.DEBUG
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL

# Library stays silent unless the application configures output
logging.getLogger(DEFAULT_LOGGER_NAME).addHandler(logging.NullHandler())


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance (drop-in replacement for logging.getLogger)

    Only returns loggers inside the package namespace:
    - None returns the package root logger
    - Names already under the namespace (e.g. 'viewable.view.view') are kept
    - Any other name is nested below it ('render' -> 'viewable.render')

    Args:
        name: Logger name, usually __name__

    Returns:
        Logger instance

    Example:
        from viewable.logging import getLogger
        logger = getLogger(__name__)

        logger.debug("Display registered", extra={'display': 'shout'})
    """
    if name is None or name == DEFAULT_LOGGER_NAME:
        return logging.getLogger(DEFAULT_LOGGER_NAME)

    if not name.startswith(DEFAULT_LOGGER_NAME + '.'):
        name = f'{DEFAULT_LOGGER_NAME}.{name}'

    return logging.getLogger(name)
