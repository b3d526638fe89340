"""Installer switches: command-line arguments passed to an installer."""

from __future__ import annotations

import functools
import re
import string
from collections.abc import Iterable, Iterator

_DELIMITERS = re.compile(r"[, ]")
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _ascii_fold(text: str) -> str:
    return text.translate(_ASCII_LOWER)


class SwitchError(ValueError):
    """Raised when a switch cannot be parsed."""


class EmptySwitchError(SwitchError):
    """Raised when a switch is empty."""

    def __init__(self) -> None:
        super().__init__("Switch cannot be empty")


class SwitchTooLongError(SwitchError):
    """Raised when a switch has more characters than allowed."""

    def __init__(self, max_length: int) -> None:
        self.max_length = max_length
        super().__init__(f"Switch cannot be more than {max_length} characters long")


@functools.total_ordering
class InstallerSwitch:
    """An ordered list of switch parts, written space separated."""

    __slots__ = ("_parts",)
    __hash__ = None  # type: ignore[assignment]

    MAX_CHAR_LENGTH = 512

    def __init__(self, parts: Iterable[str] = ()) -> None:
        self._parts: list[str] = list(parts)

    @classmethod
    def parse(cls, text: str) -> InstallerSwitch:
        """Split text on commas and spaces, dropping empty parts."""
        if not text:
            raise EmptySwitchError()
        if len(text) > cls.MAX_CHAR_LENGTH:
            raise SwitchTooLongError(cls.MAX_CHAR_LENGTH)
        return cls(part for part in _DELIMITERS.split(text) if part)

    def push(self, part: str) -> None:
        """Append a part."""
        self._parts.append(str(part))

    def contains(self, part: str) -> bool:
        """True if any part equals the value, ignoring ASCII case."""
        folded = _ascii_fold(str(part))
        return any(_ascii_fold(existing) == folded for existing in self._parts)

    def is_empty(self) -> bool:
        """True if there are no parts."""
        return not self._parts

    def __iter__(self) -> Iterator[str]:
        return iter(self._parts)

    def __len__(self) -> int:
        return len(self._parts)

    def __str__(self) -> str:
        return " ".join(self._parts)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._parts!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._parts == other._parts  # type: ignore[attr-defined]

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._parts < other._parts  # type: ignore[attr-defined]


InstallLocationSwitch = InstallerSwitch
InteractiveSwitch = InstallerSwitch
LogSwitch = InstallerSwitch
RepairSwitch = InstallerSwitch
UpgradeSwitch = InstallerSwitch