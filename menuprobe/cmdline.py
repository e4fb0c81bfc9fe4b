from __future__ import annotations

import argparse
import inspect
import sys
from typing import TYPE_CHECKING

import menuprobe
from menuprobe.commands import BaseQueryCommand, MenuCommand, MenuHelpFormatter
from menuprobe.exceptions import UsageError
from menuprobe.utils.log import configure_logging
from menuprobe.utils.misc import walk_modules
from menuprobe.utils.project import get_settings

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    # typing.ParamSpec requires Python 3.10
    from typing_extensions import ParamSpec

    from menuprobe.settings import Settings

    _P = ParamSpec("_P")


def _iter_command_classes(module_name: str) -> Iterable[type[MenuCommand]]:
    for module in walk_modules(module_name):
        for obj in vars(module).values():
            if (
                inspect.isclass(obj)
                and issubclass(obj, MenuCommand)
                and obj.__module__ == module.__name__
                and obj not in (MenuCommand, BaseQueryCommand)
            ):
                yield obj


def _get_commands_from_module(module: str) -> dict[str, MenuCommand]:
    d: dict[str, MenuCommand] = {}
    for cmd in _iter_command_classes(module):
        cmdname = cmd.__module__.split(".")[-1]
        d[cmdname] = cmd()
    return d


def _get_commands_dict() -> dict[str, MenuCommand]:
    return _get_commands_from_module("menuprobe.commands")


# global options whose value is the next argv item
_OPTIONS_WITH_VALUE = frozenset({"-L", "--loglevel", "-s", "--set", "--logfile"})


def _pop_command_name(argv: list[str]) -> str | None:
    i = 1
    while i < len(argv):
        arg = argv[i]
        if not arg.startswith("-"):
            return argv.pop(i)
        i += 2 if arg in _OPTIONS_WITH_VALUE else 1
    return None


def _print_header() -> None:
    print(
        f"menuprobe {menuprobe.__version__} - dump desktop files used to build menus\n",
        file=sys.stderr,
    )


def _print_commands() -> None:
    _print_header()
    out = sys.stderr
    print("Usage:", file=out)
    print("  menuprobe [options] <command> [<what>]\n", file=out)
    print("Available commands:", file=out)
    cmds = _get_commands_dict()
    for cmdname, cmdclass in sorted(cmds.items()):
        print(f"  {cmdname:<13} {cmdclass.short_desc()}", file=out)
    print(file=out)
    print("Options:", file=out)
    print("  -d, --debug   generate debug info", file=out)
    print(file=out)
    print('Use "menuprobe <command> -h" to see more info about a command', file=out)


def _print_unknown_command(cmdname: str) -> None:
    _print_commands()
    print(f"\nUnknown command: {cmdname}", file=sys.stderr)


def _run_print_help(
    parser: argparse.ArgumentParser,
    func: Callable[_P, None],
    *a: _P.args,
    **kw: _P.kwargs,
) -> None:
    try:
        func(*a, **kw)
    except UsageError as e:
        if e.print_help:
            parser.print_help(sys.stderr)
        if str(e):
            parser.error(str(e))
        sys.exit(2)


def execute(argv: list[str] | None = None, settings: Settings | None = None) -> None:
    if argv is None:
        argv = sys.argv

    if settings is None:
        settings = get_settings()

    cmds = _get_commands_dict()
    cmdname = _pop_command_name(argv)
    if not cmdname:
        _print_commands()
        print("\nMissing command", file=sys.stderr)
        sys.exit(2)
    elif cmdname not in cmds:
        _print_unknown_command(cmdname)
        sys.exit(2)

    cmd = cmds[cmdname]
    parser = argparse.ArgumentParser(
        prog="menuprobe",
        formatter_class=MenuHelpFormatter,
        usage=f"menuprobe {cmdname} {cmd.syntax()}",
        conflict_handler="resolve",
        description=cmd.long_desc(),
    )
    settings.setdict(cmd.default_settings, priority="command")
    cmd.settings = settings
    cmd.add_options(parser)
    opts, args = parser.parse_known_args(args=argv[1:])
    _run_print_help(parser, cmd.process_options, args, opts)

    configure_logging(settings)
    cmd.run(args, opts)
    sys.exit(cmd.exitcode)


if __name__ == "__main__":
    execute()
