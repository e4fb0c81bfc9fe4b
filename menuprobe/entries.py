"""
Menu definitions found while scanning the search path
"""

from __future__ import annotations

import os
from enum import Enum
from typing import TYPE_CHECKING

from menuprobe.utils.misc import is_truthy

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


class Decision(Enum):
    """Outcome of offering a .desktop file to the resolver"""

    #: not an application (``Type`` is something other than ``Application``)
    IGNORED = "ignored"
    #: first file with this name, it is the authoritative entry from now on
    CHOSEN = "chosen"
    #: a later file with the same name which agrees with the chosen entry
    SHADOWED = "shadowed"
    #: a later file with the same name which disagrees with the chosen entry
    MISMATCHED = "mismatched"


class ApplicationEntry:
    """An application defined by a ``.desktop`` file.

    ``fields`` holds every key of the file untouched. ``categories`` is the
    ``Categories`` field split on ``;`` with empty and reserved names removed,
    or ``(default_category,)`` when the field is absent. Category renaming is
    not applied here, it only happens when the entry is recorded in a
    :class:`~menuprobe.categories.CategoryIndex`.
    """

    def __init__(
        self,
        filename: str,
        directory: str,
        fields: Mapping[str, str],
        *,
        default_category: str = "Other",
        reserved: Iterable[str] = (),
    ):
        self.filename: str = filename
        self.directory: str = directory
        self.fields: dict[str, str] = dict(fields)
        self.categories: tuple[str, ...] = split_categories(
            self.fields.get("Categories"), default_category, reserved
        )

    @property
    def name(self) -> str:
        return self.fields.get("Name", self.filename)

    @property
    def path(self) -> str:
        return os.path.join(self.directory, self.filename)

    @property
    def visible(self) -> bool:
        return not is_truthy(self.fields.get("NoDisplay"))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} at {self.path}>"


class DirectoryEntry:
    """A submenu defined by a ``.directory`` file"""

    def __init__(
        self,
        name: str,
        directory: str,
        filename: str,
        fields: Mapping[str, str] | None = None,
    ):
        self.name: str = name
        self.directory: str = directory
        self.filename: str = filename
        self.fields: dict[str, str] = dict(fields or {})

    @property
    def path(self) -> str:
        return os.path.join(self.directory, self.filename)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} at {self.path}>"


def split_categories(
    value: str | None, default_category: str, reserved: Iterable[str] = ()
) -> tuple[str, ...]:
    if value is None:
        return (default_category,)
    reserved = set(reserved)
    return tuple(c for c in value.split(";") if c and c not in reserved)
