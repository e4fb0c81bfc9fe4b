"""
The menu inventory: every definition file on the search path, merged.

Directories are scanned strictly in search path order, and the files of a
directory in filename order, because which .desktop file wins depends on the
order in which they are offered to the :class:`~menuprobe.resolver.EntryResolver`.
The scan is laid out as a chain of Twisted callbacks, two per data directory,
each one running only once the previous one is done.
"""

from __future__ import annotations

import logging
import os
from functools import partial
from typing import TYPE_CHECKING

from menuprobe.categories import CategoryIndex
from menuprobe.directories import DirectoryIndex
from menuprobe.loader import load_definition
from menuprobe.resolver import EntryResolver
from menuprobe.utils.defer import deferred_result, process_chain

if TYPE_CHECKING:
    from collections.abc import Iterable

    from twisted.internet.defer import Deferred

    # typing.Self requires Python 3.11
    from typing_extensions import Self

    from menuprobe.settings import BaseSettings


logger = logging.getLogger(__name__)


class MenuInventory:
    def __init__(self, settings: BaseSettings):
        self.settings: BaseSettings = settings
        self.categories: CategoryIndex = CategoryIndex(
            settings.getdict("CATEGORY_RENAMES")
        )
        self.resolver: EntryResolver = EntryResolver.from_settings(
            settings, self.categories
        )
        self.directories: DirectoryIndex = DirectoryIndex()

    @classmethod
    def from_settings(cls, settings: BaseSettings) -> Self:
        return cls(settings)

    def scan_applications(self, datadir: str) -> None:
        path = os.path.join(datadir, self.settings["APPLICATIONS_DIR"])
        for filename in self._list_definitions(path, self.settings["APPLICATION_SUFFIX"]):
            fields = load_definition(os.path.join(path, filename))
            self.resolver.accept(filename, path, fields)

    def scan_directories(self, datadir: str) -> None:
        path = os.path.join(datadir, self.settings["DIRECTORIES_DIR"])
        for filename in self._list_definitions(path, self.settings["DIRECTORY_SUFFIX"]):
            fields = load_definition(os.path.join(path, filename))
            name = fields.get("Name")
            if name is None:
                logger.debug(
                    "Skipping %(path)s: no Name",
                    {"path": os.path.join(path, filename)},
                )
                continue
            self.directories.record(name, path, filename, fields)

    def _list_definitions(self, path: str, suffix: str) -> list[str]:
        logger.debug("Scanning %(path)s", {"path": path})
        try:
            with os.scandir(path) as it:
                filenames = [
                    e.name for e in it if e.name.endswith(suffix) and e.is_file()
                ]
        except OSError as e:
            logger.debug("Skipping %(path)s: %(error)s", {"path": path, "error": e})
            return []
        return sorted(filenames)

    def walk(self, search_path: Iterable[str]) -> Deferred[Self]:
        """Scan every directory of ``search_path``, return a Deferred which
        fires with this inventory once the whole path has been scanned"""
        steps = []
        for datadir in search_path:
            steps.append(partial(_step, self.scan_applications, datadir))
            steps.append(partial(_step, self.scan_directories, datadir))
        return process_chain(steps, self)

    def build(self, search_path: Iterable[str]) -> Self:
        """Synchronous version of :meth:`walk`"""
        return deferred_result(self.walk(search_path))


def _step(scan, datadir: str, inventory: MenuInventory) -> MenuInventory:
    scan(datadir)
    return inventory
