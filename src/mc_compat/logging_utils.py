"""Logging setup for hosts embedding the compatibility layer.

Library modules only ever call ``logging.getLogger(__name__)``; nothing in
``mc_compat`` installs handlers on import.  A host that wants the layer's
log output formatted according to ``[logging]`` in ``compat.ini`` calls
:func:`configure_logging` once at startup.
"""

from __future__ import annotations

import logging

from mc_compat.config import LoggingSettings

__all__ = ["configure_logging"]

_MANAGED_HANDLER_FLAG = "_mc_compat_managed_handler"

_FORMATS = {
    "simple": "%(levelname)s %(name)s: %(message)s",
    "detailed": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
}


def _remove_managed_handlers(logger: logging.Logger) -> None:
    """Detach any handlers previously installed by :func:`configure_logging`."""
    for handler in list(logger.handlers):
        if getattr(handler, _MANAGED_HANDLER_FLAG, False):
            logger.removeHandler(handler)
            handler.close()


def configure_logging(settings: LoggingSettings | None = None) -> logging.Logger:
    """Install a console handler on the ``mc_compat`` logger.

    Calling this again replaces the handler installed by the previous call
    rather than stacking a second one.

    Args:
        settings: Level and format to apply.  Defaults to ``config.logging``.

    Returns:
        The configured ``mc_compat`` package logger.
    """
    from mc_compat.config import config

    settings = settings or config.logging
    level = logging.getLevelName(settings.level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    package_logger = logging.getLogger("mc_compat")
    package_logger.setLevel(level)
    _remove_managed_handlers(package_logger)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            fmt=_FORMATS.get(settings.format, _FORMATS["detailed"]),
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    setattr(handler, _MANAGED_HANDLER_FLAG, True)
    package_logger.addHandler(handler)

    return package_logger
