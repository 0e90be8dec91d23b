"""
Canonical data models for daily quote series.

A Series is an immutable, date-ordered mapping of closing prices. It is the
unit every pipeline stage consumes and produces.
"""

import math
from bisect import bisect_left
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..errors import CallerUsageError


@dataclass(frozen=True)
class Quote:
    """Closing price observed on a single calendar date."""
    date: date      # Calendar date, no time component
    price: float    # Finite, non-negative closing price

    def __post_init__(self) -> None:
        if not math.isfinite(self.price) or self.price < 0:
            raise ValueError(f"Quote price must be finite and non-negative, got {self.price}")


class Series(Mapping):
    """
    Ordered mapping from date to price.

    Keys are unique and strictly ascending; iteration always yields dates
    in ascending order. Instances are never mutated after construction.
    """

    __slots__ = ("_dates", "_prices")

    def __init__(self, data: Optional[Mapping[date, float]] = None):
        items = sorted((data or {}).items())
        self._dates: tuple[date, ...] = tuple(d for d, _ in items)
        self._prices: tuple[float, ...] = tuple(float(p) for _, p in items)

    @classmethod
    def from_quotes(cls, quotes: Iterable[Quote]) -> "Series":
        """
        Build a series from quotes in any order.

        Duplicate-key policy: when the same date appears more than once the
        last quote seen for it wins.
        """
        latest: dict[date, float] = {}
        for quote in quotes:
            latest[quote.date] = quote.price
        return cls(latest)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[date, float]]) -> "Series":
        """Build a series from (date, price) pairs, last write wins."""
        return cls.from_quotes(Quote(d, p) for d, p in pairs)

    def __getitem__(self, key: date) -> float:
        index = bisect_left(self._dates, key)
        if index < len(self._dates) and self._dates[index] == key:
            return self._prices[index]
        raise KeyError(key)

    def __iter__(self) -> Iterator[date]:
        return iter(self._dates)

    def __len__(self) -> int:
        return len(self._dates)

    def __repr__(self) -> str:
        body = ", ".join(f"{d.isoformat()}: {p}" for d, p in zip(self._dates, self._prices))
        return f"Series({{{body}}})"

    @property
    def first_date(self) -> Optional[date]:
        """Earliest date, None if empty."""
        return self._dates[0] if self._dates else None

    @property
    def last_date(self) -> Optional[date]:
        """Latest date, None if empty."""
        return self._dates[-1] if self._dates else None

    def dates(self) -> tuple[date, ...]:
        """All dates in ascending order."""
        return self._dates

    def prices(self) -> tuple[float, ...]:
        """All prices in date order."""
        return self._prices


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar date range."""
    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise CallerUsageError(
                f"Date range start {self.start} is after end {self.end}",
                argument="date_range",
                value=(self.start, self.end)
            )

    @classmethod
    def default(cls, start: date, today: Optional[date] = None) -> "DateRange":
        """Range from a fixed start up to today."""
        return cls(start=start, end=today or date.today())


@dataclass(frozen=True)
class NamedSeries:
    """Series paired with the name it is displayed and removed under."""
    series: Series
    display_name: str
