from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from menuprobe.entries import ApplicationEntry


logger = logging.getLogger(__name__)


class CategoryIndex:
    """Menu categories and the applications listed in each of them.

    Categories are stored under their renamed form, members keep the order in
    which they were recorded. A category only exists once it has a member.
    """

    def __init__(self, renames: Mapping[str, str] | None = None):
        self.renames: dict[str, str] = dict(renames or {})
        self._categories: dict[str, list[ApplicationEntry]] = {}

    def record(self, entry: ApplicationEntry) -> None:
        for category in entry.categories:
            category = self.renames.get(category, category)
            members = self._categories.get(category)
            if members is None:
                logger.debug("Category '%(category)s'", {"category": category})
                self._categories[category] = [entry]
            else:
                members.append(entry)

    def lookup(self, name: str) -> list[ApplicationEntry] | None:
        members = self._categories.get(name)
        return list(members) if members is not None else None

    def __contains__(self, name: object) -> bool:
        return name in self._categories

    def __iter__(self) -> Iterator[str]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)
