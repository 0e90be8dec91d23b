"""In-memory registry of the series currently on a chart."""

from collections.abc import Iterator
from datetime import date

import structlog

from ..data.models import NamedSeries, Series
from ..errors import CallerUsageError
from .base import SeriesSink

logger = structlog.get_logger(__name__)


class SeriesRegistry(SeriesSink):
    """
    Ordered collection of displayed series keyed by display name.

    Insertion order is the plotting order. Removing a series leaves the
    others in their original relative order, so positions are recomputed
    from the remaining entries rather than stored.
    """

    def __init__(self) -> None:
        self._series: dict[str, Series] = {}

    def add_series(self, named: NamedSeries) -> None:
        if named.display_name in self._series:
            raise CallerUsageError(
                f"Series '{named.display_name}' is already displayed",
                argument="display_name",
                value=named.display_name
            )

        self._series[named.display_name] = named.series
        logger.info("Series added", display_name=named.display_name, points=len(named.series))

    def remove_series(self, display_name: str) -> None:
        self._require(display_name)
        del self._series[display_name]
        logger.info("Series removed", display_name=display_name, remaining=len(self._series))

    def get(self, display_name: str) -> NamedSeries:
        self._require(display_name)
        return NamedSeries(series=self._series[display_name], display_name=display_name)

    def names(self) -> list[str]:
        """Display names in plotting order."""
        return list(self._series)

    def index_of(self, display_name: str) -> int:
        """Plotting position of a series among those currently displayed."""
        self._require(display_name)
        return self.names().index(display_name)

    def shared_axis(self) -> list[date]:
        """Sorted union of every displayed series' dates."""
        axis: set[date] = set()
        for series in self._series.values():
            axis.update(series)
        return sorted(axis)

    def _require(self, display_name: str) -> None:
        if display_name not in self._series:
            raise CallerUsageError(
                f"Series '{display_name}' is not displayed",
                argument="display_name",
                value=display_name
            )

    def __contains__(self, display_name: object) -> bool:
        return display_name in self._series

    def __iter__(self) -> Iterator[NamedSeries]:
        for name, series in self._series.items():
            yield NamedSeries(series=series, display_name=name)

    def __len__(self) -> int:
        return len(self._series)
