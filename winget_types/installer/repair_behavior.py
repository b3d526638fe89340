"""How existing installations are repaired."""

from __future__ import annotations

import enum


class RepairBehavior(enum.Enum):
    """The method used to repair an installation; values are manifest names."""

    MODIFY = "modify"
    UNINSTALLER = "uninstaller"
    INSTALLER = "installer"

    def __str__(self) -> str:
        return _DISPLAY[self]


_DISPLAY = {
    RepairBehavior.MODIFY: "Modify",
    RepairBehavior.UNINSTALLER: "Uninstaller",
    RepairBehavior.INSTALLER: "Installer",
}