from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from menuprobe.entries import DirectoryEntry

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping


logger = logging.getLogger(__name__)


class DirectoryIndex:
    """Submenus by display name.

    Unlike applications, a submenu defined twice is not overridden: the menu
    would just show two submenus with the same name. The first definition is
    kept as the representative and every later one is reported against it.
    """

    def __init__(self) -> None:
        self._directories: dict[str, DirectoryEntry] = {}

    def record(
        self,
        name: str,
        directory: str,
        filename: str,
        fields: Mapping[str, str] | None = None,
    ) -> bool:
        """Record a submenu, return whether it became the representative for
        ``name``"""
        entry = DirectoryEntry(name, directory, filename, fields)
        representative = self._directories.get(name)
        if representative is not None:
            logger.warning(
                "Duplicate submenu '%(name)s' is defined in %(first)s"
                " and also in %(other)s",
                {"name": name, "first": representative.path, "other": entry.path},
            )
            return False
        self._directories[name] = entry
        return True

    def lookup(self, name: str) -> DirectoryEntry | None:
        return self._directories.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._directories

    def __iter__(self) -> Iterator[str]:
        return iter(self._directories)

    def __len__(self) -> int:
        return len(self._directories)
