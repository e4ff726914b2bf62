"""
Logging Configuration.

The conversion code is a library, so loggers default to WARNING and only the
disambiguation search says anything below that. Raise the level through
``ConverterConfig.log_level`` or ``get_logger(name, logging.DEBUG)`` to trace
how truncated references are resolved.
"""

import logging
import sys


DEFAULT_FORMAT = '%(asctime)s | %(name)s | %(levelname)s | %(message)s'
DEFAULT_DATEFMT = '%Y-%m-%d %H:%M:%S'


def get_logger(name: str, level: int = logging.WARNING) -> logging.Logger:
    """Get a logger configured for the grid conversion package.

    Parameters
    ----------
    name : str
        Logger name (typically __name__).
    level : int
        Logging level.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATEFMT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


def set_package_level(level: int) -> None:
    """Set the level of every logger created under the package namespaces."""
    for name, logger in logging.Logger.manager.loggerDict.items():
        if isinstance(logger, logging.Logger) and name.split(".")[0] in ("usng", "geospatial"):
            logger.setLevel(level)
