"""What happens to an installed package during an upgrade."""

from __future__ import annotations

import enum


class UpgradeBehaviorParseError(ValueError):
    """Raised when a value is not a known upgrade behaviour."""

    def __init__(self, value: str | None = None) -> None:
        message = (
            "Upgrade behavior did not match any of `Install`, `UninstallPrevious`, or `Deny`"
        )
        if value is not None:
            message = f"{message}: {value!r}"
        super().__init__(message)


class UpgradeBehavior(enum.Enum):
    """Upgrade behaviour; values are manifest names."""

    INSTALL = "install"
    UNINSTALL_PREVIOUS = "uninstallPrevious"
    DENY = "deny"

    @classmethod
    def parse(cls, text: str) -> UpgradeBehavior:
        """Parse a display name such as ``UninstallPrevious``."""
        for member, name in _DISPLAY.items():
            if name == text:
                return member
        raise UpgradeBehaviorParseError(text)

    def __str__(self) -> str:
        return _DISPLAY[self]


_DISPLAY = {
    UpgradeBehavior.INSTALL: "Install",
    UpgradeBehavior.UNINSTALL_PREVIOUS: "UninstallPrevious",
    UpgradeBehavior.DENY: "Deny",
}