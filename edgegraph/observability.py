"""Logging setup for applications embedding edgegraph.

The library itself only creates loggers under the ``edgegraph``
namespace; nothing is emitted until a handler is attached here or by
the host application.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config

LOGGER_NAME = "edgegraph"

_HANDLER_ATTR = "_edgegraph_handler"


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Logger:
    """Apply level and format from ``config`` to the package logger.

    Calling this more than once replaces the handler installed by the
    previous call instead of stacking a new one.

    Args:
        config: Observability settings. Defaults to the global config.

    Returns:
        The configured ``edgegraph`` logger.
    """
    if config is None:
        config = get_config().observability

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.level.upper())

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(config.format))
    setattr(handler, _HANDLER_ATTR, True)
    logger.addHandler(handler)

    logger.debug("Logging configured", extra={"level": config.level})
    return logger
