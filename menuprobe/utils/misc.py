"""Helper functions which don't fit anywhere else"""

from __future__ import annotations

from importlib import import_module
from pkgutil import iter_modules
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from types import ModuleType


TRUTHY_VALUES = frozenset({"true", "1", "yes"})


def walk_modules(path: str) -> list[ModuleType]:
    """Loads a module and all its submodules from the given module path and
    returns them. If *any* module throws an exception while importing, that
    exception is thrown back.

    For example: walk_modules('menuprobe.commands')
    """

    mods: list[ModuleType] = []
    mod = import_module(path)
    mods.append(mod)
    if hasattr(mod, "__path__"):
        for _, subpath, ispkg in iter_modules(mod.__path__):
            fullpath = path + "." + subpath
            if ispkg:
                mods += walk_modules(fullpath)
            else:
                submod = import_module(fullpath)
                mods.append(submod)
    return mods


def is_truthy(value: str | None) -> bool:
    """Return whether a definition file value reads as true.

    >>> is_truthy("true"), is_truthy("False"), is_truthy(None)
    (True, False, False)
    """
    if value is None:
        return False
    return value.strip().lower() in TRUTHY_VALUES
