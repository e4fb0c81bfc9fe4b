"""
Read-only questions about a built :class:`~menuprobe.inventory.MenuInventory`
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from menuprobe.inventory import MenuInventory


class MenuQuery:
    def __init__(self, inventory: MenuInventory):
        self.inventory: MenuInventory = inventory

    def check(self) -> str:
        # overridden files and duplicate submenus are reported while the
        # inventory is built, there is nothing left to do here
        return "Check finished"

    def by_category(self, name: str) -> str:
        members = self.inventory.categories.lookup(name)
        if members is None:
            return f"Unknown category '{name}'"
        names = ", ".join(entry.name for entry in members)
        return f"{name} is used in {names}"

    def by_application(self, identifier: str) -> str:
        """Describe an application given either its .desktop filename or the
        name it is displayed with"""
        resolver = self.inventory.resolver
        entry = resolver.get(identifier) or resolver.find_by_name(identifier)
        if entry is None:
            return f"Can't find a .desktop file for '{identifier}'"
        return f"{entry.name} is defined in {entry.path}"
