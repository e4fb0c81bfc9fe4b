from __future__ import annotations

from typing import TYPE_CHECKING

from menuprobe.commands import BaseQueryCommand
from menuprobe.exceptions import UsageError

if TYPE_CHECKING:
    import argparse

    from menuprobe.query import MenuQuery


class Command(BaseQueryCommand):
    def syntax(self) -> str:
        return "[options] <category>"

    def short_desc(self) -> str:
        return "Find entries in a category"

    def long_desc(self) -> str:
        return (
            "List the applications shown under a menu category. Use the name "
            "the menu displays, e.g. 'Accessories' rather than 'Utility'."
        )

    def process_options(self, args: list[str], opts: argparse.Namespace) -> None:
        super().process_options(args, opts)
        if not args:
            raise UsageError("Missing category")

    def ask(self, query: MenuQuery, args: list[str]) -> str:
        return query.by_category(args[0])
