"""Command aliases for portable packages."""

from __future__ import annotations

import functools

MAX_CHAR_LENGTH = 40


class PortableCommandAliasError(ValueError):
    """Raised when a portable command alias is not valid."""


class EmptyPortableCommandAliasError(PortableCommandAliasError):
    """Raised when an alias is empty or only whitespace."""

    def __init__(self) -> None:
        super().__init__("Portable command alias must not be empty")


class PortableCommandAliasTooLongError(PortableCommandAliasError):
    """Raised when an alias has too many characters."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(
            "Portable command alias must not have more than "
            f"{MAX_CHAR_LENGTH} characters but has {length}"
        )


@functools.total_ordering
class PortableCommandAlias:
    """An alias of at most 40 characters once surrounding whitespace is ignored."""

    __slots__ = ("_value",)

    MAX_CHAR_LENGTH = MAX_CHAR_LENGTH

    def __init__(self, value: str) -> None:
        trimmed = value.strip()
        if not trimmed:
            raise EmptyPortableCommandAliasError()
        length = len(trimmed)
        if length > MAX_CHAR_LENGTH:
            raise PortableCommandAliasTooLongError(length)
        self._value = value

    @property
    def value(self) -> str:
        """The alias text as given."""
        return self._value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"PortableCommandAlias({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PortableCommandAlias):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PortableCommandAlias):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)