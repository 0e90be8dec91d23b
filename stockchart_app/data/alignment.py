"""
Leading-edge padding that lets independently fetched series share a chart axis.

The chart surface requires every plotted series to be defined over the same
visible date range. Series differ in how far back the provider has history
and in how many leading dates a moving average consumed, so each series is
padded with zero sentinels from the shared reference start up to the point
where its own smoothed data begins.
"""

from datetime import date, timedelta
from typing import Optional

from ..errors import CallerUsageError, InsufficientDataError
from .models import Series

SENTINEL_VALUE = 0.0

ONE_DAY = timedelta(days=1)


def sentinel_dates(reference_start: date, data_start: date, lag_days: int) -> list[date]:
    """
    Calendar dates that receive a zero sentinel.

    Covers every day in ``[reference_start, data_start)`` (missing history)
    followed by every day in ``[data_start, data_start + lag_days)`` (the
    moving average lag region). Either span may be empty.
    """
    if lag_days < 0:
        raise CallerUsageError(
            f"Lag days must be non-negative, got {lag_days}",
            argument="lag_days",
            value=lag_days
        )

    dates = []

    current = reference_start
    while current < data_start:
        dates.append(current)
        current += ONE_DAY

    dates.extend(data_start + timedelta(days=offset) for offset in range(lag_days))

    return dates


def align(series: Series, reference_start: date, lag_days: int,
          data_start: Optional[date] = None) -> Series:
    """
    Pad a series with zero sentinels so its first date is the reference start.

    ``data_start`` must be the first date of the series before smoothing was
    applied; smoothing moves the apparent start forward by the lag, and
    padding from the smoothed start would misplace the lag region. When it
    is omitted, the series' own first date is used.

    Every padded date reads 0.0 in the result, including lag-region dates
    the smoothed series still holds a value for. Data before ``reference_start`` is
    kept as is; nothing is truncated.

    Args:
        series: Smoothed (or raw, when lag_days is 0) series
        reference_start: Start date shared by every series on the chart
        lag_days: Averaging window the series was smoothed with
        data_start: First date of the series before smoothing

    Returns:
        New series beginning at ``min(reference_start, data_start)``

    Raises:
        InsufficientDataError: If the series is empty and no data_start is given
        CallerUsageError: If lag_days is negative
    """
    if data_start is None:
        data_start = series.first_date
    if data_start is None:
        raise InsufficientDataError(
            "Cannot align an empty series without a data start date",
            required_count=1,
            available_count=0
        )

    aligned = dict(series.items())
    aligned.update(dict.fromkeys(sentinel_dates(reference_start, data_start, lag_days), SENTINEL_VALUE))

    return Series(aligned)


class AlignmentPadder:
    """Aligns series to a fixed reference start date."""

    def __init__(self, reference_start: date):
        self.reference_start = reference_start

    def align(self, series: Series, lag_days: int, data_start: Optional[date] = None) -> Series:
        """Pad ``series`` so it starts at this padder's reference start."""
        return align(series, self.reference_start, lag_days, data_start)
