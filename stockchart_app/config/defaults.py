"""Default configuration parameters for the quote pipeline."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class ParserParams:
    """Delimited quote record layout."""
    delimiter: str = ","                 # Field separator
    date_format: str = "%Y-%m-%d"        # strftime pattern of the first field
    price_field: int = 4                 # Date,Open,High,Low,Close,... -> Close
    has_header: bool = True              # Provider sends a header row


@dataclass(frozen=True)
class DateRangeParams:
    """Date range defaults."""
    default_start: date = date(2000, 1, 1)   # Shared reference start for all series


@dataclass(frozen=True)
class AveragingParams:
    """Moving average choices offered to the user."""
    allowed_windows: tuple[int, ...] = (0, 5, 10, 20, 50, 100, 200)
    default_window: int = 0


@dataclass(frozen=True)
class TransportParams:
    """Quote provider transport parameters."""
    url_template: str = "https://stooq.com/q/d/l/?s={symbol}&d1={start}&d2={end}&i=d"
    symbol_suffix: str = ".us"       # Provider symbol namespace, e.g. aapl.us
    date_format: str = "%Y%m%d"
    timeout_seconds: float = 30.0
    user_agent: str = "stockchart-app/0.1"


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    parser: ParserParams
    date_range: DateRangeParams
    averaging: AveragingParams
    transport: TransportParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        parser=ParserParams(),
        date_range=DateRangeParams(),
        averaging=AveragingParams(),
        transport=TransportParams(),
        logging=LoggingParams(),
    )
