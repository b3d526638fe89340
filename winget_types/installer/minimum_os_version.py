"""The minimum Windows version an installer supports."""

from __future__ import annotations

import re
from dataclasses import dataclass

_MAX_PARTS = 4
_SEPARATOR = "."
_U16_MAX = 0xFFFF
_UNSIGNED = re.compile(r"\+?[0-9]+")


class MinimumOSVersionError(ValueError):
    """Raised when a minimum OS version cannot be parsed."""


def _parse_part(part: str) -> int:
    if not part:
        raise MinimumOSVersionError("cannot parse integer from empty string")
    if not _UNSIGNED.fullmatch(part):
        raise MinimumOSVersionError("invalid digit found in string")
    value = int(part)
    if value > _U16_MAX:
        raise MinimumOSVersionError("number too large to fit in target type")
    return value


@dataclass(frozen=True, order=True)
class MinimumOSVersion:
    """A four-part version, each part an unsigned 16-bit integer."""

    major: int = 0
    minor: int = 0
    patch: int = 0
    build: int = 0

    def __post_init__(self) -> None:
        for value in (self.major, self.minor, self.patch, self.build):
            if not isinstance(value, int) or not 0 <= value <= _U16_MAX:
                raise MinimumOSVersionError(
                    f"version part {value!r} is not in the range 0..={_U16_MAX}"
                )

    @classmethod
    def parse(cls, text: str) -> MinimumOSVersion:
        """Parse a dotted version; missing trailing parts default to zero."""
        parts = text.split(_SEPARATOR, _MAX_PARTS - 1)
        if not parts:
            raise MinimumOSVersionError(
                "Minimum OS version must have at least a major version part"
            )
        return cls(*(_parse_part(part) for part in parts))

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}.{self.build}"