"""
Base class for menuprobe commands
"""

from __future__ import annotations

import argparse
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from menuprobe.exceptions import UsageError
from menuprobe.inventory import MenuInventory
from menuprobe.query import MenuQuery
from menuprobe.utils.conf import arglist_to_dict, get_search_path

if TYPE_CHECKING:
    from collections.abc import Iterable

    from menuprobe.settings import Settings


logger = logging.getLogger(__name__)


class MenuCommand(ABC):
    """
    Base class for implementing menuprobe commands.

    Every module of :mod:`menuprobe.commands` defines one ``Command`` subclass
    of this class, and the module name is the command name.

    Class Attributes:
        default_settings (dict[str, Any]): settings to use for this command
            instead of global defaults. Default: {}.

        max_args (int): how many positional arguments the command takes at
            most. Default: 1.

    Instance Attributes:
        settings (Settings | None): The settings instance for this command,
            set automatically by menuprobe.cmdline when the command is run.

        exitcode (int): The exit code to return when the command finishes.
            Default: 0.
    """

    # default settings to be used for this command instead of global defaults
    default_settings: dict[str, Any] = {}

    max_args: int = 1

    exitcode: int = 0

    def __init__(self) -> None:
        self.settings: Settings | None = None  # set in menuprobe.cmdline

    def syntax(self) -> str:
        """
        Command syntax (preferably one-line). Do not include command name.
        """
        return ""

    @abstractmethod
    def short_desc(self) -> str:
        """
        A short description of the command
        """
        return ""

    def long_desc(self) -> str:
        """A long description of the command. Return short description when not
        available. It cannot contain newlines since contents will be formatted
        by argparse which removes newlines and wraps text.
        """
        return self.short_desc()

    def add_options(self, parser: argparse.ArgumentParser) -> None:
        """
        Populate option parse with options available for this command
        """
        assert self.settings is not None
        group = parser.add_argument_group(title="Global Options")
        group.add_argument(
            "-d",
            "--debug",
            action="store_true",
            help="generate debug info (same as --loglevel DEBUG)",
        )
        group.add_argument(
            "--logfile", metavar="FILE", help="log file. if omitted stderr will be used"
        )
        group.add_argument(
            "-L",
            "--loglevel",
            metavar="LEVEL",
            default=None,
            help=f"log level (default: {self.settings['LOG_LEVEL']})",
        )
        group.add_argument(
            "--nolog", action="store_true", help="disable logging completely"
        )
        group.add_argument(
            "-s",
            "--set",
            action="append",
            default=[],
            metavar="NAME=VALUE",
            help="set/override setting (may be repeated)",
        )

    def process_options(self, args: list[str], opts: argparse.Namespace) -> None:
        assert self.settings is not None
        try:
            self.settings.setdict(arglist_to_dict(opts.set), priority="cmdline")
        except ValueError:
            raise UsageError("Invalid -s value, use -s NAME=VALUE", print_help=False)

        if opts.logfile:
            self.settings.set("LOG_ENABLED", True, priority="cmdline")
            self.settings.set("LOG_FILE", opts.logfile, priority="cmdline")

        if opts.loglevel:
            self.settings.set("LOG_ENABLED", True, priority="cmdline")
            self.settings.set("LOG_LEVEL", opts.loglevel, priority="cmdline")

        if opts.debug:
            self.settings.set("LOG_ENABLED", True, priority="cmdline")
            self.settings.set("LOG_LEVEL", "DEBUG", priority="cmdline")

        if opts.nolog:
            self.settings.set("LOG_ENABLED", False, priority="cmdline")

        unknown = [a for a in args if a.startswith("-")]
        if unknown:
            raise UsageError(f"Unrecognized option: {unknown[0]}")
        if len(args) > self.max_args:
            raise UsageError(f"Unexpected argument: {args[self.max_args]}")

    @abstractmethod
    def run(self, args: list[str], opts: argparse.Namespace) -> None:
        """
        Entry point for running commands
        """
        raise NotImplementedError


class BaseQueryCommand(MenuCommand):
    """
    The base class for commands that answer a question about the menus: they
    scan the whole search path first, then ask a
    :class:`~menuprobe.query.MenuQuery`.
    """

    def build_inventory(self) -> MenuInventory:
        assert self.settings is not None
        search_path = get_search_path(self.settings)
        logger.debug("Search path: %(path)s", {"path": list(search_path)})
        inventory = MenuInventory.from_settings(self.settings)
        return inventory.build(search_path)

    def run(self, args: list[str], opts: argparse.Namespace) -> None:
        query = MenuQuery(self.build_inventory())
        print(self.ask(query, args))

    @abstractmethod
    def ask(self, query: MenuQuery, args: list[str]) -> str:
        raise NotImplementedError


class MenuHelpFormatter(argparse.HelpFormatter):
    """
    Help Formatter for menuprobe command line help messages.
    """

    def __init__(
        self,
        prog: str,
        indent_increment: int = 2,
        max_help_position: int = 24,
        width: int | None = None,
    ):
        super().__init__(
            prog,
            indent_increment=indent_increment,
            max_help_position=max_help_position,
            width=width,
        )

    def _join_parts(self, part_strings: Iterable[str]) -> str:
        parts = self.format_part_strings(list(part_strings))
        return super()._join_parts(parts)

    def format_part_strings(self, part_strings: list[str]) -> list[str]:
        """
        Underline and title case command line help message headers.
        """
        if part_strings and part_strings[0].startswith("usage: "):
            part_strings[0] = "Usage\n=====\n  " + part_strings[0][len("usage: ") :]
        headings = [
            i for i in range(len(part_strings)) if part_strings[i].endswith(":\n")
        ]
        for index in headings[::-1]:
            char = "-" if "Global Options" in part_strings[index] else "="
            part_strings[index] = part_strings[index][:-2].title()
            underline = "".join(["\n", (char * len(part_strings[index])), "\n"])
            part_strings.insert(index + 1, underline)
        return part_strings
