"""
Logging Package
Structured logging for the view layer

Provides a drop-in replacement for logging.getLogger that keeps package
loggers under the 'routeview' hierarchy configured by LoggerConfig.
"""
from routeview.logging.logger_config import (
    LoggerConfig,
    JSONFormatter,
)
import logging
from typing import Optional

__all__ = [
    'LoggerConfig',
    'JSONFormatter',
    'getLogger',
]


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance (drop-in replacement for logging.getLogger)

    Sanic's own loggers ('sanic.*') and module-based names (containing '.')
    pass through unchanged. Bare names are placed under the 'routeview'
    logger so a single LoggerConfig.setup_logger('routeview') call
    configures them.

    Args:
        name: Logger name (None returns the 'routeview' logger)

    Returns:
        Logger instance

    Example:
        from routeview.logging import getLogger
        logger = getLogger(__name__)
        logger.debug("Loaded template %s", name)
    """
    if name is None:
        return logging.getLogger('routeview')

    if name.startswith('sanic.') or '.' in name or name == 'routeview':
        return logging.getLogger(name)

    return logging.getLogger(f'routeview.{name}')
