"""Two-letter market codes."""

from __future__ import annotations

import functools

LENGTH = 2


class MarketError(ValueError):
    """Raised when a market code is not valid."""

    def __init__(self) -> None:
        super().__init__(f"Market must be exactly {LENGTH} ASCII uppercase characters long")


class InvalidMarketLengthError(MarketError):
    """Raised when a market code is not exactly two bytes long."""


class InvalidMarketCharacterError(MarketError):
    """Raised when a market code holds something other than ASCII uppercase letters."""


def _is_ascii_uppercase(data: bytes) -> bool:
    return all(ord("A") <= byte <= ord("Z") for byte in data)


@functools.total_ordering
class Market:
    """A market code of exactly two ASCII uppercase letters, such as ``US``."""

    __slots__ = ("_value",)

    def __init__(self, value: str) -> None:
        encoded = value.encode("utf-8")
        if len(encoded) != LENGTH:
            raise InvalidMarketLengthError()
        if not _is_ascii_uppercase(encoded):
            raise InvalidMarketCharacterError()
        self._value = value

    @property
    def value(self) -> str:
        """The market code."""
        return self._value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Market({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Market):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Market):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)