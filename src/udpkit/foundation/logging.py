from __future__ import annotations

import logging

LOGGER_NAME = "udpkit"
DEFAULT_FORMAT = "%(name)s: %(message)s"


def configure_udpkit_logging(*, level: int = logging.INFO, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    Attach a console handler to the "udpkit" logger and return it.

    Opt-in: library modules never call logging.basicConfig(). Nothing is
    attached when the root or "udpkit" logger already has handlers, so
    container and gradient-fallback debug messages follow the application's
    own logging setup.
    """
    udpkit_logger = logging.getLogger(LOGGER_NAME)
    if logging.getLogger().handlers or udpkit_logger.handlers:
        return udpkit_logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))
    udpkit_logger.addHandler(handler)
    udpkit_logger.setLevel(level)
    udpkit_logger.propagate = False
    return udpkit_logger


__all__ = ["DEFAULT_FORMAT", "LOGGER_NAME", "configure_udpkit_logging"]
