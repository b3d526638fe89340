"""Switches for silent install experiences."""

from __future__ import annotations

from .switch import InstallerSwitch


class SilentSwitch(InstallerSwitch):
    """Switches for a silent install, at most 512 characters."""

    __slots__ = ()

    MAX_CHAR_LENGTH = 512


class SilentWithProgressSwitch(InstallerSwitch):
    """Switches for a silent install that shows progress, at most 512 characters."""

    __slots__ = ()

    MAX_CHAR_LENGTH = 512