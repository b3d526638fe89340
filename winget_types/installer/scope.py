"""The scope a package is installed under."""

from __future__ import annotations

import enum


class ScopeParseError(ValueError):
    """Raised when a value is not a known scope."""

    def __init__(self, value: str | None = None) -> None:
        message = "Scope did not match either `user` or `machine`"
        if value is not None:
            message = f"{message}: {value!r}"
        super().__init__(message)


class Scope(enum.Enum):
    """Install scope; values are manifest names."""

    USER = "user"
    MACHINE = "machine"

    @classmethod
    def find_in(cls, value: str | bytes) -> Scope | None:
        """Find a scope name anywhere in the value, ignoring ASCII case.

        User is preferred when both names appear.
        """
        data = value.encode("utf-8") if isinstance(value, str) else bytes(value)
        lowered = data.lower()
        for scope in (cls.USER, cls.MACHINE):
            if scope.value.encode("ascii") in lowered:
                return scope
        return None

    def is_user(self) -> bool:
        """True if the scope is user."""
        return self is Scope.USER

    def is_machine(self) -> bool:
        """True if the scope is machine."""
        return self is Scope.MACHINE

    @classmethod
    def parse(cls, text: str) -> Scope:
        """Parse an exact scope name."""
        for scope in cls:
            if scope.value == text:
                return scope
        raise ScopeParseError(text)

    def __str__(self) -> str:
        return self.value