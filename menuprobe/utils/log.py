from __future__ import annotations

import logging
import sys
from logging.config import dictConfig
from typing import TYPE_CHECKING

from twisted.python import log as twisted_log

if TYPE_CHECKING:
    from menuprobe.settings import BaseSettings


logger = logging.getLogger(__name__)

DEFAULT_LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "loggers": {
        "menuprobe": {"level": "DEBUG"},
        "twisted": {"level": "ERROR"},
    },
}

_menuprobe_root_handler: logging.Handler | None = None


def configure_logging(
    settings: BaseSettings | None = None, install_root_handler: bool = True
) -> None:
    """
    Initialize logging defaults for menuprobe.

    :param settings: settings used to create and configure a handler for the
        root logger (default: None).
    :type settings: :class:`~menuprobe.settings.Settings` object or ``None``

    :param install_root_handler: whether to install root logging handler
        (default: True)
    :type install_root_handler: bool

    This function does:

    - Route warnings and twisted logging through Python standard logging
    - Assign DEBUG and ERROR level to menuprobe and Twisted loggers respectively
    - Install a root handler configured by the ``LOG_*`` settings, if
      ``install_root_handler`` is True (default)

    Warnings about overridden definition files and duplicate submenus are
    emitted at WARNING level, the scan trace at DEBUG level.
    """
    if not sys.warnoptions:
        # Route warnings through python logging
        logging.captureWarnings(True)

    observer = twisted_log.PythonLoggingObserver("twisted")
    observer.start()

    dictConfig(DEFAULT_LOGGING)

    if settings is None:
        from menuprobe.settings import Settings

        settings = Settings()

    if install_root_handler:
        install_menuprobe_root_handler(settings)


def install_menuprobe_root_handler(settings: BaseSettings) -> None:
    global _menuprobe_root_handler  # noqa: PLW0603

    _uninstall_menuprobe_root_handler()
    logging.root.setLevel(logging.NOTSET)
    _menuprobe_root_handler = _get_handler(settings)
    logging.root.addHandler(_menuprobe_root_handler)


def _uninstall_menuprobe_root_handler() -> None:
    global _menuprobe_root_handler  # noqa: PLW0603

    if (
        _menuprobe_root_handler is not None
        and _menuprobe_root_handler in logging.root.handlers
    ):
        logging.root.removeHandler(_menuprobe_root_handler)
    _menuprobe_root_handler = None


def get_menuprobe_root_handler() -> logging.Handler | None:
    return _menuprobe_root_handler


def _get_handler(settings: BaseSettings) -> logging.Handler:
    """Return a log handler object according to settings"""
    filename = settings.get("LOG_FILE")
    handler: logging.Handler
    if filename:
        mode = "a" if settings.getbool("LOG_FILE_APPEND") else "w"
        encoding = settings.get("LOG_ENCODING")
        handler = logging.FileHandler(filename, mode=mode, encoding=encoding)
    elif settings.getbool("LOG_ENABLED"):
        handler = logging.StreamHandler()
    else:
        handler = logging.NullHandler()

    formatter = logging.Formatter(
        fmt=settings.get("LOG_FORMAT"), datefmt=settings.get("LOG_DATEFORMAT")
    )
    handler.setFormatter(formatter)
    level = settings.get("LOG_LEVEL")
    handler.setLevel(level.upper() if isinstance(level, str) else level)
    return handler
