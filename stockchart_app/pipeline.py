"""
Series loading pipeline coordinator.

Orchestrates a single load: fetch raw quotes through a transport, parse
them, smooth them, and pad them onto the shared chart axis.
"""

from datetime import date
from typing import Optional

from .config.defaults import DefaultConfig, get_default_config
from .data.alignment import align
from .data.models import DateRange, NamedSeries
from .data.parsers import QuoteParser
from .display.base import SeriesSink
from .errors import CallerUsageError, InsufficientDataError, ParseError
from .logging.config import get_pipeline_logger, log_load_result
from .metrics.moving_average import smooth
from .transport.base import QuoteTransport


def display_name_for(symbol: str, window: int) -> str:
    """Chart label such as ``MSFT (20)`` or ``MSFT (none)``."""
    return f"{symbol.upper()} ({window if window > 0 else 'none'})"


class SeriesPipeline:
    """
    Main coordinator for loading a displayable series.

    Manages the load pipeline:
    Transport → QuoteParser → MovingAverage → AlignmentPadder → NamedSeries

    Any failure aborts the whole load; nothing is retried and no partial
    series is returned.
    """

    def __init__(self, transport: QuoteTransport,
                 config: Optional[DefaultConfig] = None,
                 today: Optional[date] = None) -> None:
        """Initialize the pipeline with a transport and configuration."""
        self.transport = transport
        self.config = config or get_default_config()
        self.parser = QuoteParser(self.config.parser)
        self.today = today
        self.logger = get_pipeline_logger(__name__)

    def default_date_range(self) -> DateRange:
        """Configured fixed start up to today."""
        return DateRange.default(self.config.date_range.default_start, self.today)

    def load(self, symbol: str, date_range: Optional[DateRange] = None,
             window: int = 0) -> NamedSeries:
        """
        Load one symbol as an aligned, optionally smoothed series.

        Args:
            symbol: Ticker symbol as entered by the user
            date_range: Requested range; its start is the chart's reference start
            window: Trailing moving average length, 0 for none

        Returns:
            Series padded to begin at ``date_range.start`` with its display name

        Raises:
            CallerUsageError: If symbol or window is invalid
            TransportError: If the transport could not fetch the symbol
            ParseError: If the response is not well-formed quote data
            InsufficientDataError: If there are fewer quotes than the window
        """
        symbol = self._validate_symbol(symbol)
        self._validate_window(window)
        if date_range is None:
            date_range = self.default_date_range()

        log = self.logger.bind(symbol=symbol, window=window)
        log.info("Series load started", start=date_range.start.isoformat(),
                 end=date_range.end.isoformat())

        counts: dict[str, int] = {}
        try:
            raw = self.transport.fetch(symbol, date_range.start, date_range.end)
            parsed = self.parser.parse(self._decode(raw))
            counts["parsed"] = len(parsed)

            # First real observation, taken before smoothing shifts the start
            data_start = parsed.first_date
            if data_start is None:
                raise InsufficientDataError(
                    f"No quotes returned for {symbol}",
                    required_count=max(window, 1),
                    available_count=0
                )

            smoothed = smooth(parsed, window)
            counts["smoothed"] = len(smoothed)

            aligned = align(smoothed, date_range.start, window, data_start=data_start)
            counts["padded"] = len(aligned)

        except Exception as e:
            log_load_result(self.logger, symbol, window, False, counts, e)
            raise

        log_load_result(self.logger, symbol, window, True, counts)
        return NamedSeries(series=aligned, display_name=display_name_for(symbol, window))

    def load_into(self, sink: SeriesSink, symbol: str,
                  date_range: Optional[DateRange] = None,
                  window: int = 0) -> NamedSeries:
        """Load a series and hand it to the sink only if the load succeeded."""
        named = self.load(symbol, date_range, window)
        sink.add_series(named)
        return named

    def _decode(self, raw: bytes) -> str:
        try:
            return raw.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ParseError(f"Quote response is not valid UTF-8: {e}")

    def _validate_symbol(self, symbol: str) -> str:
        if not isinstance(symbol, str) or not symbol.strip():
            raise CallerUsageError("Symbol must be a non-empty string",
                                   argument="symbol", value=symbol)

        symbol = symbol.strip()
        if any(ch.isspace() for ch in symbol):
            raise CallerUsageError(f"Symbol must not contain whitespace: '{symbol}'",
                                   argument="symbol", value=symbol)
        return symbol

    def _validate_window(self, window: int) -> None:
        if not isinstance(window, int) or isinstance(window, bool) or window < 0:
            raise CallerUsageError(f"Averaging window must be a non-negative integer, got {window!r}",
                                   argument="window", value=window)
