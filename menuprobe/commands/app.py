from __future__ import annotations

from typing import TYPE_CHECKING

from menuprobe.commands import BaseQueryCommand
from menuprobe.exceptions import UsageError

if TYPE_CHECKING:
    import argparse

    from menuprobe.query import MenuQuery


class Command(BaseQueryCommand):
    def syntax(self) -> str:
        return "[options] <application>"

    def short_desc(self) -> str:
        return "Find the entry for an application"

    def long_desc(self) -> str:
        return (
            "Show which .desktop file defines an application. The application "
            "can be given either as the menu item name or as the full filename "
            "of the .desktop file."
        )

    def process_options(self, args: list[str], opts: argparse.Namespace) -> None:
        super().process_options(args, opts)
        if not args:
            raise UsageError("Missing application")

    def ask(self, query: MenuQuery, args: list[str]) -> str:
        return query.by_application(args[0])
