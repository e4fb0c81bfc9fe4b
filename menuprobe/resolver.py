"""
Precedence between .desktop files that share a filename.

The search path is scanned in order and the first .desktop file found with a
given filename is the one the menu uses ("chosen"). Files found later with the
same filename are usually the packaged originals that a user or an admin has
overridden; they are never used, but they are compared against the chosen
entry so that a package update which changed e.g. ``Exec`` does not go
unnoticed.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from menuprobe.entries import ApplicationEntry, Decision
from menuprobe.exceptions import NotConfigured

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    # typing.Self requires Python 3.11
    from typing_extensions import Self

    from menuprobe.categories import CategoryIndex
    from menuprobe.settings import BaseSettings


logger = logging.getLogger(__name__)

APPLICATION_TYPE = "Application"


class EntryResolver:
    def __init__(
        self,
        categories: CategoryIndex,
        *,
        default_category: str = "Other",
        reserved: Iterable[str] = (),
        ignore_keys: str | re.Pattern[str] = "",
    ):
        self.categories: CategoryIndex = categories
        self.default_category: str = default_category
        self.reserved: frozenset[str] = frozenset(reserved)
        try:
            self.ignore_keys: re.Pattern[str] | None = (
                re.compile(ignore_keys) if ignore_keys else None
            )
        except re.error as e:
            raise NotConfigured(f"Invalid key pattern {ignore_keys!r}: {e}") from e
        self._entries: dict[str, ApplicationEntry] = {}

    @classmethod
    def from_settings(cls, settings: BaseSettings, categories: CategoryIndex) -> Self:
        return cls(
            categories,
            default_category=settings["CATEGORY_DEFAULT"],
            reserved=settings.getlist("CATEGORY_RESERVED"),
            ignore_keys=settings["CHECK_IGNORE_KEYS"],
        )

    def accept(
        self, filename: str, directory: str, fields: Mapping[str, str]
    ) -> Decision:
        """Offer the .desktop file ``directory/filename`` to the resolver.

        Files must be offered in search path order: the first application
        offered for a filename is chosen, even if it is hidden with
        ``NoDisplay``, and every later one is only cross-checked.
        """
        if fields.get("Type") != APPLICATION_TYPE:
            return Decision.IGNORED

        entry = ApplicationEntry(
            filename,
            directory,
            fields,
            default_category=self.default_category,
            reserved=self.reserved,
        )
        chosen = self._entries.get(filename)
        if chosen is not None:
            mismatches = self.compare(chosen, entry)
            if not mismatches:
                return Decision.SHADOWED
            self._log_mismatches(chosen, entry, mismatches)
            return Decision.MISMATCHED

        self._entries[filename] = entry
        if entry.visible:
            logger.debug(
                "Loading %(name)s from %(filename)s",
                {"name": entry.name, "filename": filename},
            )
            self.categories.record(entry)
        else:
            logger.debug("Hidden entry %(path)s", {"path": entry.path})
        return Decision.CHOSEN

    def compare(self, chosen: ApplicationEntry, other: ApplicationEntry) -> list[str]:
        """Return the keys of ``other`` whose value differs in ``chosen``.

        Keys missing from ``other`` are not checked, keys missing from
        ``chosen`` always differ.
        """
        return [
            key
            for key, value in other.fields.items()
            if not self._ignored(key) and chosen.fields.get(key) != value
        ]

    def _ignored(self, key: str) -> bool:
        return self.ignore_keys is not None and self.ignore_keys.match(key) is not None

    def _log_mismatches(
        self, chosen: ApplicationEntry, other: ApplicationEntry, keys: list[str]
    ) -> None:
        lines = [f"+={chosen.path}", f"-={other.path}"]
        for key in keys:
            if chosen.fields.get(key):
                lines.append(f"+{key}={chosen.fields[key]}")
            if other.fields.get(key):
                lines.append(f"-{key}={other.fields[key]}")
        logger.warning(
            "%(filename)s is overridden, but keys don't match\n%(diff)s",
            {"filename": chosen.filename, "diff": "\n".join(lines)},
        )

    @property
    def entries(self) -> dict[str, ApplicationEntry]:
        """Chosen entries by filename, in the order they were chosen"""
        return dict(self._entries)

    def get(self, filename: str) -> ApplicationEntry | None:
        return self._entries.get(filename)

    def find_by_name(self, name: str) -> ApplicationEntry | None:
        """Return the first visible chosen entry displayed as ``name``"""
        for entry in self._entries.values():
            if entry.visible and entry.name == name:
                return entry
        return None

    def __contains__(self, filename: object) -> bool:
        return filename in self._entries

    def __iter__(self) -> Iterator[ApplicationEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)
