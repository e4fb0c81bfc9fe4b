from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from menuprobe.settings import BaseSettings


DEFAULT_DATA_HOME = "~/.local/share"
DEFAULT_DATA_DIRS = ("/usr/share",)


def arglist_to_dict(arglist: list[str]) -> dict[str, str]:
    """Convert a list of arguments like ['arg1=val1', 'arg2=val2', ...] to a
    dict
    """
    return dict(x.split("=", 1) for x in arglist)


def data_home(environ: Mapping[str, str] | None = None) -> str:
    """Return the user data directory, ``$XDG_DATA_HOME`` or
    ``~/.local/share`` when it is unset or empty"""
    if environ is None:
        environ = os.environ
    return environ.get("XDG_DATA_HOME") or str(Path(DEFAULT_DATA_HOME).expanduser())


def data_dirs(environ: Mapping[str, str] | None = None) -> tuple[str, ...]:
    """Return the system data directories from ``$XDG_DATA_DIRS``, left to
    right, or ``/usr/share`` when it is unset or empty"""
    if environ is None:
        environ = os.environ
    value = environ.get("XDG_DATA_DIRS")
    if not value:
        return DEFAULT_DATA_DIRS
    return _split_path(value) or DEFAULT_DATA_DIRS


def _split_path(value: str | list[str] | tuple[str, ...]) -> tuple[str, ...]:
    if isinstance(value, str):
        value = value.split(":")
    return tuple(d for d in value if d)


def get_search_path(
    settings: BaseSettings | None = None,
    environ: Mapping[str, str] | None = None,
) -> tuple[str, ...]:
    """Return the ordered list of data directories to search for menu
    definitions: the user data directory first, then every system data
    directory.

    The ``DATA_HOME`` and ``DATA_DIRS`` settings take precedence over the
    environment when they are set.
    """
    home = settings.get("DATA_HOME") if settings is not None else None
    dirs = settings.get("DATA_DIRS") if settings is not None else None
    if not home:
        home = data_home(environ)
    dirs = _split_path(dirs) if dirs else data_dirs(environ)
    return (str(home), *dirs)
