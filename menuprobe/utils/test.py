"""
This module contains some assorted functions used in tests
"""

from __future__ import annotations

import os
from importlib import import_module
from pathlib import Path
from typing import TYPE_CHECKING, Any

from menuprobe.inventory import MenuInventory
from menuprobe.settings import Settings

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


def write_definition(path: str | os.PathLike[str], fields: Mapping[str, str]) -> Path:
    """Write a .desktop or .directory file with the given keys, creating its
    parent directories"""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = ["[Desktop Entry]", *(f"{k}={v}" for k, v in fields.items())]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def get_inventory(
    search_path: Iterable[str | os.PathLike[str]],
    settings_dict: dict[str, Any] | None = None,
) -> MenuInventory:
    """Return a MenuInventory built from ``search_path``, with the given
    settings"""
    inventory = MenuInventory.from_settings(Settings(settings_dict))
    return inventory.build([str(d) for d in search_path])


def get_pythonpath() -> str:
    """Return a PYTHONPATH suitable to use in processes so that they find this
    installation of menuprobe"""
    menuprobe_path = import_module("menuprobe").__path__[0]
    return str(Path(menuprobe_path).parent) + os.pathsep + os.environ.get("PYTHONPATH", "")


def get_testenv() -> dict[str, str]:
    """Return a OS environment dict suitable to fork processes that need to import
    this installation of menuprobe, instead of a system installed one.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = get_pythonpath()
    return env
