"""Client arguments an installer does not support."""

from __future__ import annotations

import enum
from collections.abc import Iterable


class UnsupportedArguments(enum.Flag):
    """A set of unsupported arguments held as bit flags."""

    LOG = 1
    LOCATION = 1 << 1

    def _members(self) -> list[UnsupportedArguments]:
        return [member for member in type(self) if member in self]

    def to_list(self) -> list[str]:
        """Argument names in flag order, as written in a manifest."""
        return [_NAMES[member] for member in self._members()]

    @classmethod
    def from_list(cls, values: Iterable[str]) -> UnsupportedArguments:
        """Combine a sequence of argument names into one value."""
        lookup = {name: member for member, name in _NAMES.items()}
        arguments = cls(0)
        for value in values:
            if value not in lookup:
                expected = ", ".join(f"`{name}`" for name in lookup)
                raise ValueError(f"unknown variant `{value}`, expected one of {expected}")
            arguments |= lookup[value]
        return arguments

    def __str__(self) -> str:
        if self in _NAMES:
            return _NAMES[self]
        return " | ".join(member.name for member in self._members())


_NAMES = {
    UnsupportedArguments.LOG: "Log",
    UnsupportedArguments.LOCATION: "Location",
}