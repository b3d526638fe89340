"""The Windows platforms an installer targets."""

from __future__ import annotations

import enum
from collections.abc import Iterable


class PlatformParseError(ValueError):
    """Raised when a value is not a known platform."""

    def __init__(self, value: str | None = None) -> None:
        message = "Platform did not match either `Windows.Desktop` or `Windows.Universal`"
        if value is not None:
            message = f"{message}: {value!r}"
        super().__init__(message)


class Platform(enum.Flag):
    """A set of supported platforms held as bit flags."""

    WINDOWS_DESKTOP = 1
    WINDOWS_UNIVERSAL = 1 << 1

    @classmethod
    def parse(cls, text: str) -> Platform:
        """Parse a single platform name."""
        for member, name in _NAMES.items():
            if name == text:
                return member
        raise PlatformParseError(text)

    def _members(self) -> list[Platform]:
        return [member for member in type(self) if member in self]

    def to_list(self) -> list[str]:
        """Platform names in flag order, as written in a manifest."""
        return [_NAMES[member] for member in self._members()]

    @classmethod
    def from_list(cls, values: Iterable[str]) -> Platform:
        """Combine a sequence of platform names into one value."""
        platform = cls(0)
        for value in values:
            platform |= cls.parse(value)
        return platform

    def __str__(self) -> str:
        if self in _NAMES:
            return _NAMES[self]
        return " | ".join(member.name for member in self._members())


_NAMES = {
    Platform.WINDOWS_DESKTOP: "Windows.Desktop",
    Platform.WINDOWS_UNIVERSAL: "Windows.Universal",
}