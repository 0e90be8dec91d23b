"""Trailing simple moving average over a date-ordered price series"""

from collections import deque

from stockchart_app.data.models import Series
from stockchart_app.errors import CallerUsageError, InsufficientDataError


def smooth(series: Series, window: int) -> Series:
    """
    Trailing N-day arithmetic mean keyed at the last date of each window

    The first ``window - 1`` dates have no full window and are dropped, not
    zero-filled. A window of 0 returns the input unchanged.

    Args:
        series: Ascending date-ordered prices
        window: Number of observations per average (0 disables smoothing)

    Returns:
        Smoothed series with ``len(series) - window + 1`` entries

    Raises:
        CallerUsageError: If window is negative
        InsufficientDataError: If the series is shorter than the window
    """
    if window < 0:
        raise CallerUsageError(
            f"Averaging window must be non-negative, got {window}",
            argument="window",
            value=window
        )

    if window == 0:
        return series

    if len(series) < window:
        raise InsufficientDataError(
            f"Need at least {window} observations for a {window}-day average, got {len(series)}",
            required_count=window,
            available_count=len(series)
        )

    # Bounded queue plus running sum: add newest, evict oldest.
    # The sum is compensated so evicting a large value does not cancel small ones.
    working: deque[float] = deque()
    running_sum = 0.0
    compensation = 0.0
    result = {}

    for quote_date, price in series.items():
        working.append(price)
        running_sum, compensation = _compensated_add(running_sum, compensation, price)
        if len(working) > window:
            running_sum, compensation = _compensated_add(
                running_sum, compensation, -working.popleft())
        if len(working) == window:
            result[quote_date] = (running_sum + compensation) / window

    return Series(result)


def _compensated_add(total: float, compensation: float, value: float) -> tuple[float, float]:
    """Neumaier summation step; returns the new total and its rounding error"""
    new_total = total + value
    if abs(total) >= abs(value):
        compensation += (total - new_total) + value
    else:
        compensation += (value - new_total) + total
    return new_total, compensation


class MovingAverageTransform:
    """Moving average transform with a fixed window"""

    def __init__(self, window: int = 0):
        self.window = window

    def apply(self, series: Series) -> Series:
        """
        Smooth a series with this transform's window

        Args:
            series: Ascending date-ordered prices

        Returns:
            Smoothed series (the input itself when window is 0)
        """
        return smooth(series, self.window)
