"""
Loose reader for .desktop and .directory files.

This is not a Desktop Entry parser: it knows nothing about groups, comments
or escapes, it just collects every ``key=value`` line of the file. Lines
without ``=`` are skipped and a repeated key keeps its last value.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

_LINE_SEPARATOR = re.compile(r"\r?\n")


def parse_definition(text: str) -> dict[str, str]:
    fields: dict[str, str] = {}
    for line in _LINE_SEPARATOR.split(text):
        key, sep, value = line.partition("=")
        if sep:
            fields[key] = value
    return fields


def load_definition(path: str | os.PathLike[str]) -> dict[str, str]:
    """Load a definition file and return all the keys it defines"""
    # newline="" keeps a lone "\r" inside its line
    with Path(path).open(encoding="utf-8", errors="replace", newline="") as f:
        text = f.read()
    return parse_definition(text)
