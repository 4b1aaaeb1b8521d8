"""Logging utilities for librus modules."""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger that automatically inherits from root logger.

    Loggers returned here work with basicConfig() without an explicit
    setup_logging() call. The logger will:
    - Propagate to root logger (default behavior)
    - Only set a default level if root logger has no handlers

    Args:
        name: Logger name (typically 'librus.<component>')

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.propagate = True

    # basicConfig() not called yet: stay quiet until the caller opts in
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logger.setLevel(logging.WARNING)

    return logger


def mask(value: str, visible: int = 2) -> str:
    """Mask a sensitive value for log output, keeping a short prefix."""
    if not value:
        return ''
    if len(value) <= visible:
        return '*' * len(value)
    return value[:visible] + '*' * (len(value) - visible)
