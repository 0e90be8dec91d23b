"""Display sinks that receive loaded series for charting."""

from .base import SeriesSink
from .registry import SeriesRegistry

__all__ = ["SeriesSink", "SeriesRegistry"]
