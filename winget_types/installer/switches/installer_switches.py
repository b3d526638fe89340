"""The full set of switches passed to an installer."""

from __future__ import annotations

import functools
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from .custom import CustomSwitch
from .silent import SilentSwitch, SilentWithProgressSwitch
from .switch import (
    InstallerSwitch,
    InstallLocationSwitch,
    InteractiveSwitch,
    LogSwitch,
    RepairSwitch,
    UpgradeSwitch,
)

_KEYS: dict[str, tuple[str, type[InstallerSwitch]]] = {
    "silent": ("Silent", SilentSwitch),
    "silent_with_progress": ("SilentWithProgress", SilentWithProgressSwitch),
    "interactive": ("Interactive", InteractiveSwitch),
    "install_location": ("InstallLocation", InstallLocationSwitch),
    "log": ("Log", LogSwitch),
    "upgrade": ("Upgrade", UpgradeSwitch),
    "custom": ("Custom", CustomSwitch),
    "repair": ("Repair", RepairSwitch),
}


@functools.total_ordering
@dataclass(eq=True)
class InstallerSwitches:
    """Switches for each install experience; each may be absent."""

    silent: SilentSwitch | None = None
    silent_with_progress: SilentWithProgressSwitch | None = None
    interactive: InteractiveSwitch | None = None
    install_location: InstallLocationSwitch | None = None
    log: LogSwitch | None = None
    upgrade: UpgradeSwitch | None = None
    custom: CustomSwitch | None = None
    repair: RepairSwitch | None = None

    def _values(self) -> list[InstallerSwitch | None]:
        return [getattr(self, field.name) for field in fields(self)]

    def is_empty(self) -> bool:
        """True if no switches are present."""
        return all(value is None for value in self._values())

    def _sort_key(self) -> tuple:
        return tuple(
            (0,) if value is None else (1, list(value)) for value in self._values()
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, InstallerSwitches):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def to_dict(self) -> dict[str, str]:
        """The manifest mapping; absent switches are left out."""
        data: dict[str, str] = {}
        for name, (key, _) in _KEYS.items():
            value = getattr(self, name)
            if value is not None:
                data[key] = str(value)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> InstallerSwitches:
        """Build from a manifest mapping; unknown keys are ignored."""
        values: dict[str, InstallerSwitch] = {}
        for name, (key, switch_type) in _KEYS.items():
            raw = data.get(key)
            if raw is None:
                continue
            if not isinstance(raw, str):
                raise ValueError(f"`{key}` must be a string")
            values[name] = switch_type.parse(raw)
        return cls(**values)  # type: ignore[arg-type]