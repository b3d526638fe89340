"""URI schemes a package handles."""

from __future__ import annotations

import functools

MAX_CHAR_LENGTH = 2048


class ProtocolError(ValueError):
    """Raised when a protocol is not valid."""


class EmptyProtocolError(ProtocolError):
    """Raised when a protocol is empty."""

    def __init__(self) -> None:
        super().__init__("Protocol must not be empty")


class ProtocolTooLongError(ProtocolError):
    """Raised when a protocol has too many characters."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(
            f"Protocol must not have more than {MAX_CHAR_LENGTH} characters but has {length}"
        )


@functools.total_ordering
class Protocol:
    """A non-empty protocol name of at most 2048 characters."""

    __slots__ = ("_value",)

    MAX_CHAR_LENGTH = MAX_CHAR_LENGTH

    def __init__(self, value: str) -> None:
        if not value:
            raise EmptyProtocolError()
        length = len(value)
        if length > MAX_CHAR_LENGTH:
            raise ProtocolTooLongError(length)
        self._value = value

    @property
    def value(self) -> str:
        """The protocol text."""
        return self._value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Protocol({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Protocol):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Protocol):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)