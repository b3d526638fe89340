"""Extra switches passed to an installer alongside the install-mode ones."""

from __future__ import annotations

from .switch import InstallerSwitch


class CustomSwitch(InstallerSwitch):
    """A custom switch of at most 2048 characters."""

    __slots__ = ()

    MAX_CHAR_LENGTH = 2048

    @classmethod
    def all_users(cls) -> CustomSwitch:
        """The ``/ALLUSERS`` switch."""
        return cls.parse("/ALLUSERS")

    @classmethod
    def current_user(cls) -> CustomSwitch:
        """The ``/CURRENTUSER`` switch."""
        return cls.parse("/CURRENTUSER")