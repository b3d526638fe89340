"""Markets a package may or may not be installed in."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from .market import Market, MarketError

MAX_ITEMS = 256

_ALLOWED = "AllowedMarkets"
_EXCLUDED = "ExcludedMarkets"


class MarketsError(ValueError):
    """Raised when a set of markets is not valid."""


class TooManyMarketsError(MarketsError):
    """Raised when a set would hold more than 256 markets."""

    def __init__(self) -> None:
        super().__init__(f"Markets may not contain more than {MAX_ITEMS} markets")


def _to_market(market: Market | str) -> Market:
    return market if isinstance(market, Market) else Market(market)


class Markets:
    """Either an allowed or an excluded set of markets."""

    __slots__ = ("_excluded", "_markets")
    __hash__ = None  # type: ignore[assignment]

    MAX_ITEMS = MAX_ITEMS

    def __init__(self, markets: Iterable[Market] = (), *, excluded: bool = False) -> None:
        self._excluded = excluded
        self._markets: set[Market] = set(markets)

    @classmethod
    def new_allowed(cls) -> Markets:
        """An empty allowed set."""
        return cls()

    @classmethod
    def new_excluded(cls) -> Markets:
        """An empty excluded set."""
        return cls(excluded=True)

    @classmethod
    def _from_iter(cls, markets: Iterable[Market | str], excluded: bool) -> Markets:
        collected = {_to_market(market) for market in markets}
        if len(collected) > MAX_ITEMS:
            raise TooManyMarketsError()
        return cls(collected, excluded=excluded)

    @classmethod
    def allowed_from_iter(cls, markets: Iterable[Market | str]) -> Markets:
        """An allowed set built from market codes."""
        return cls._from_iter(markets, excluded=False)

    @classmethod
    def excluded_from_iter(cls, markets: Iterable[Market | str]) -> Markets:
        """An excluded set built from market codes."""
        return cls._from_iter(markets, excluded=True)

    def add(self, market: Market | str) -> bool:
        """Add a market; return True if it was not present before."""
        if len(self._markets) == MAX_ITEMS:
            raise TooManyMarketsError()
        item = _to_market(market)
        if item in self._markets:
            return False
        self._markets.add(item)
        return True

    def _lookup(self, market: object) -> Market | None:
        if isinstance(market, Market):
            return market
        if isinstance(market, str):
            try:
                return Market(market)
            except MarketError:
                return None
        return None

    def remove(self, market: Market | str) -> bool:
        """Remove a market; return True if it was present."""
        item = self._lookup(market)
        if item is None or item not in self._markets:
            return False
        self._markets.discard(item)
        return True

    def clear(self) -> None:
        """Remove every market."""
        self._markets.clear()

    def is_empty(self) -> bool:
        """True if there are no markets."""
        return not self._markets

    def __contains__(self, market: object) -> bool:
        item = self._lookup(market)
        return item is not None and item in self._markets

    def __len__(self) -> int:
        return len(self._markets)

    def __iter__(self) -> Iterator[Market]:
        return iter(sorted(self._markets))

    def _sort_key(self) -> tuple[bool, list[str]]:
        return (self._excluded, [market.value for market in self])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Markets):
            return NotImplemented
        return self._excluded == other._excluded and self._markets == other._markets

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Markets):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Markets):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Markets):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Markets):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def __repr__(self) -> str:
        kind = "excluded" if self._excluded else "allowed"
        return f"Markets.{kind}({[market.value for market in self]!r})"

    def to_dict(self) -> dict[str, list[str]]:
        """The manifest mapping, with markets in ascending order."""
        key = _EXCLUDED if self._excluded else _ALLOWED
        return {key: [market.value for market in self]}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Markets:
        """Build from a mapping holding exactly one of the two market keys."""
        allowed: set[Market] | None = None
        excluded: set[Market] | None = None
        for key, value in data.items():
            if key not in (_ALLOWED, _EXCLUDED):
                raise ValueError(
                    f"unknown field `{key}`, expected `{_ALLOWED}` or `{_EXCLUDED}`"
                )
            if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
                raise ValueError(f"`{key}` must be a sequence of markets")
            markets = {_to_market(item) for item in value}
            if len(markets) > MAX_ITEMS:
                raise TooManyMarketsError()
            if key == _ALLOWED:
                allowed = markets
            else:
                excluded = markets
        if allowed is not None and excluded is not None:
            raise ValueError(
                f"Expected either '{_ALLOWED}' or '{_EXCLUDED}', but found both"
            )
        if allowed is not None:
            return cls(allowed)
        if excluded is not None:
            return cls(excluded, excluded=True)
        raise ValueError(f"Expected either '{_ALLOWED}' or '{_EXCLUDED}', but found neither")