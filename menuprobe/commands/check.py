from __future__ import annotations

from typing import TYPE_CHECKING

from menuprobe.commands import BaseQueryCommand

if TYPE_CHECKING:
    from menuprobe.query import MenuQuery


class Command(BaseQueryCommand):
    def short_desc(self) -> str:
        return "Check the menus for consistency"

    def long_desc(self) -> str:
        return (
            "Scan every data directory and warn about .desktop files that "
            "override another one with different keys, and about submenus "
            "defined more than once."
        )

    def ask(self, query: MenuQuery, args: list[str]) -> str:
        return query.check()
