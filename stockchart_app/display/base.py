"""Base class for chart display sinks."""

from abc import ABC, abstractmethod

from ..data.models import NamedSeries


class SeriesSink(ABC):
    """Chart surface that plots several named series on one date axis."""

    @abstractmethod
    def add_series(self, named: NamedSeries) -> None:
        """Start displaying a series under its display name."""
        pass

    @abstractmethod
    def remove_series(self, display_name: str) -> None:
        """
        Stop displaying the series with this name.

        Remaining series keep their relative order.

        Raises:
            CallerUsageError: If no series with this name is displayed
        """
        pass
