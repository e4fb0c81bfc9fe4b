from __future__ import annotations

import json
from collections.abc import Iterator, Mapping, MutableMapping
from importlib import import_module
from typing import TYPE_CHECKING, Any, Union, cast

from menuprobe.settings import default_settings

if TYPE_CHECKING:
    from types import ModuleType

    _SettingsInputT = Union[MutableMapping[str, Any], "BaseSettings", str, None]


SETTINGS_PRIORITIES: dict[str, int] = {
    "default": 0,
    "command": 10,
    "project": 20,
    "cmdline": 40,
}


def get_settings_priority(priority: int | str) -> int:
    """Return the numerical value of a priority given by name (a key of
    :attr:`~menuprobe.settings.SETTINGS_PRIORITIES`) or by number."""
    if isinstance(priority, str):
        return SETTINGS_PRIORITIES[priority]
    return priority


class SettingsAttribute:
    """A setting value together with the priority it was set with."""

    def __init__(self, value: Any, priority: int):
        self.value: Any = value
        self.priority: int
        if isinstance(self.value, BaseSettings):
            self.priority = max(self.value.maxpriority(), priority)
        else:
            self.priority = priority

    def set(self, value: Any, priority: int) -> None:
        """Replace the value, unless ``priority`` is lower than the current one."""
        if priority >= self.priority:
            if isinstance(self.value, BaseSettings):
                value = BaseSettings(value, priority=priority)
            self.value = value
            self.priority = priority

    def __repr__(self) -> str:
        return f"<SettingsAttribute value={self.value!r} priority={self.priority}>"


class BaseSettings(Mapping[str, Any]):
    """
    A mapping of setting names to values where every value remembers the
    priority it was set with. Setting a value again only takes effect when
    the new priority is at least the stored one, so command line overrides
    (``-s NAME=VALUE``) win over a settings module, which wins over the
    defaults.

    Priorities are given either by name, looked up in
    :attr:`~menuprobe.settings.SETTINGS_PRIORITIES`, or as integers. Missing
    settings read as ``None``.

    Values that come from the command line are always strings, so read them
    with the typed getters.
    """

    def __init__(self, values: _SettingsInputT = None, priority: int | str = "project"):
        self.attributes: dict[str, SettingsAttribute] = {}
        if values:
            self.update(values, priority)

    def __getitem__(self, opt_name: str) -> Any:
        if opt_name not in self:
            return None
        return self.attributes[opt_name].value

    def __contains__(self, name: Any) -> bool:
        return name in self.attributes

    def get(self, name: str, default: Any = None) -> Any:
        """Return the value of ``name``, or ``default`` when it is unset or
        ``None``"""
        return self[name] if self[name] is not None else default

    def getbool(self, name: str, default: bool = False) -> bool:
        """
        Return a setting as a boolean.

        ``1``, ``'1'``, ``True``, ``'True'`` and ``'true'`` read as ``True``;
        ``0``, ``'0'``, ``False``, ``'False'`` and ``'false'`` read as
        ``False``. Anything else raises ``ValueError``.
        """
        got = self.get(name, default)
        try:
            return bool(int(got))
        except ValueError:
            if got in ("True", "true"):
                return True
            if got in ("False", "false"):
                return False
            raise ValueError(
                "Supported values for boolean settings "
                "are 0/1, True/False, '0'/'1', "
                "'True'/'False' and 'true'/'false'"
            )

    def getlist(self, name: str, default: list[Any] | None = None) -> list[Any]:
        """
        Return a setting as a new list. Strings are split on ``,``, so
        ``-s CATEGORY_RESERVED=Applet,Shell`` reads as ``['Applet', 'Shell']``.
        An empty value reads as an empty list.
        """
        value = self.get(name, default or [])
        if not value:
            return []
        if isinstance(value, str):
            value = value.split(",")
        return list(value)

    def getdict(
        self, name: str, default: dict[Any, Any] | None = None
    ) -> dict[Any, Any]:
        """
        Return a setting as a new plain dict. Strings are decoded as JSON, so
        ``-s 'CATEGORY_RENAMES={"Game": "Games"}'`` works. Priorities of a
        nested :class:`~menuprobe.settings.BaseSettings` are dropped.
        """
        value = self.get(name, default or {})
        if isinstance(value, str):
            value = json.loads(value)
        return dict(value)

    def getpriority(self, name: str) -> int | None:
        """Return the priority of ``name``, or ``None`` when it is unset"""
        if name not in self:
            return None
        return self.attributes[name].priority

    def maxpriority(self) -> int:
        """Return the highest priority of all the stored settings, or the
        ``default`` priority when there are none"""
        if len(self) > 0:
            return max(cast(int, self.getpriority(name)) for name in self)
        return get_settings_priority("default")

    def __setitem__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def set(self, name: str, value: Any, priority: int | str = "project") -> None:
        """
        Store ``value`` for ``name`` with the given ``priority``.

        :param priority: a key of :attr:`~menuprobe.settings.SETTINGS_PRIORITIES`
            or an integer
        :type priority: str or int
        """
        priority = get_settings_priority(priority)
        if name not in self:
            if isinstance(value, SettingsAttribute):
                self.attributes[name] = value
            else:
                self.attributes[name] = SettingsAttribute(value, priority)
        else:
            self.attributes[name].set(value, priority)

    def setdict(self, values: _SettingsInputT, priority: int | str = "project") -> None:
        self.update(values, priority)

    def setmodule(
        self, module: ModuleType | str, priority: int | str = "project"
    ) -> None:
        """
        Store every uppercase global of ``module`` with the given
        ``priority``. ``module`` may also be given by its import path, as
        ``MENUPROBE_SETTINGS_MODULE`` is.
        """
        if isinstance(module, str):
            module = import_module(module)
        for key in dir(module):
            if key.isupper():
                self.set(key, getattr(module, key), priority)

    def update(self, values: _SettingsInputT, priority: int | str = "project") -> None:
        """
        Store several settings at once.

        A string is decoded as a JSON object first. When ``values`` is a
        :class:`~menuprobe.settings.BaseSettings`, each of its own priorities
        is kept and ``priority`` is ignored.
        """
        if isinstance(values, str):
            values = cast(dict[str, Any], json.loads(values))
        if values is not None:
            if isinstance(values, BaseSettings):
                for name, value in values.items():
                    self.set(name, value, cast(int, values.getpriority(name)))
            else:
                for name, value in values.items():
                    self.set(name, value, priority)

    def __iter__(self) -> Iterator[str]:
        return iter(self.attributes)

    def __len__(self) -> int:
        return len(self.attributes)


class Settings(BaseSettings):
    """
    The settings of a menuprobe run, preloaded with
    :mod:`menuprobe.settings.default_settings`.

    Dict defaults such as ``CATEGORY_RENAMES`` are stored as nested
    :class:`~menuprobe.settings.BaseSettings` so that a higher priority value
    replaces them as a whole.
    """

    def __init__(self, values: _SettingsInputT = None, priority: int | str = "project"):
        super().__init__()
        self.setmodule(default_settings, "default")
        for name, val in self.items():
            if isinstance(val, dict):
                self.set(name, BaseSettings(val, "default"), "default")
        self.update(values, priority)
