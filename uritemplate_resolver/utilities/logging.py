"""Logging setup for applications embedding uritemplate_resolver.

The library itself only logs through module loggers under the
"uritemplate_resolver" namespace; nothing is printed unless the host
application configures a handler, e.g. via setup_logging().
"""

import logging

from uritemplate_resolver.config import get_settings

PACKAGE_LOGGER = "uritemplate_resolver"
DEFAULT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(level: str | int | None = None, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Calling it again replaces the handler installed by the previous call
    instead of stacking a second one.

    Args:
        level: Log level name or number (None = settings.log_level)
        fmt: logging.Formatter format string

    Returns:
        The package logger
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = level.upper()

    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(pkg_logger.handlers):
        if getattr(handler, "_uritemplate_handler", False):
            pkg_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))
    handler._uritemplate_handler = True  # type: ignore[attr-defined]
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(level)
    return pkg_logger
