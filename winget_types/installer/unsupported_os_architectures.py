"""Operating system architectures an installer is known not to support."""

from __future__ import annotations

import enum
from collections.abc import Iterable


class UnsupportedOSArchitecture(enum.Flag):
    """A set of unsupported architectures held as bit flags."""

    X86 = 1
    X64 = 1 << 1
    ARM = 1 << 2
    ARM64 = 1 << 3

    def _members(self) -> list[UnsupportedOSArchitecture]:
        return [member for member in type(self) if member in self]

    def to_list(self) -> list[str]:
        """Architecture names in flag order, as written in a manifest."""
        return [_NAMES[member] for member in self._members()]

    @classmethod
    def from_list(cls, values: Iterable[str]) -> UnsupportedOSArchitecture:
        """Combine a sequence of architecture names into one value."""
        lookup = {name: member for member, name in _NAMES.items()}
        architectures = cls(0)
        for value in values:
            if value not in lookup:
                expected = ", ".join(f"`{name}`" for name in lookup)
                raise ValueError(f"unknown variant `{value}`, expected one of {expected}")
            architectures |= lookup[value]
        return architectures

    def __str__(self) -> str:
        if self in _NAMES:
            return _NAMES[self]
        return " | ".join(member.name for member in self._members())


_NAMES = {
    UnsupportedOSArchitecture.X86: "x86",
    UnsupportedOSArchitecture.X64: "x64",
    UnsupportedOSArchitecture.ARM: "arm",
    UnsupportedOSArchitecture.ARM64: "arm64",
}