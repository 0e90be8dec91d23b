"""Command-line front end: load symbols and print them on one date axis as CSV."""

import argparse
import csv
import sys
from datetime import date, datetime
from pathlib import Path
from typing import Optional, TextIO

from .config.defaults import DefaultConfig
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .data.models import DateRange
from .display.registry import SeriesRegistry
from .errors import CallerUsageError, DataQualityError, TransportError
from .logging.config import configure_logging, get_logger
from .pipeline import SeriesPipeline
from .transport.base import QuoteTransport
from .transport.file_transport import FileQuoteTransport
from .transport.http_transport import HttpQuoteTransport

EXIT_OK = 0
EXIT_TRANSPORT = 2
EXIT_DATA = 3
EXIT_USAGE = 4


def _parse_date(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got '{value}'")


def _parse_window(value: str) -> int:
    if value.lower() == "none":
        return 0
    try:
        return int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a day count or 'none', got '{value}'")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="stockchart",
        description="Load daily closing prices and align them on one date axis",
    )
    p.add_argument("symbols", nargs="+", help="Ticker symbols to load (e.g. MSFT AAPL)")
    p.add_argument("--window", type=_parse_window, default=None,
                   help="Trailing moving average length in days, or 'none'")
    p.add_argument("--start", type=_parse_date, default=None,
                   help="Reference start date YYYY-MM-DD (default from config)")
    p.add_argument("--end", type=_parse_date, default=None,
                   help="End date YYYY-MM-DD (default today)")
    p.add_argument("--source-dir", default=None,
                   help="Read <SYMBOL>.csv files from this directory instead of the network")
    p.add_argument("--config-dir", type=Path, default=None,
                   help="Directory holding stockchart.yaml")
    p.add_argument("--log-level", type=str.upper, default=None,
                   choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                   help="Logging level (default from config)")
    p.add_argument("--json-logs", action="store_true", help="Emit logs as JSON lines")
    return p


def write_csv(registry: SeriesRegistry, out: TextIO) -> None:
    """Write every displayed series as one column over the shared date axis."""
    writer = csv.writer(out, lineterminator="\n")
    displayed = list(registry)
    writer.writerow(["date"] + [named.display_name for named in displayed])
    for day in registry.shared_axis():
        writer.writerow([day.isoformat()] + [
            named.series[day] if day in named.series else "" for named in displayed
        ])


def _load_valid_config(loader: ConfigLoader, symbol: Optional[str] = None) -> Optional[DefaultConfig]:
    """Merged config for a symbol, or None after reporting why it is invalid."""
    errors = ConfigValidator.validate_config(loader.merge_config(symbol))
    if errors:
        for error in errors:
            print(f"Invalid configuration: {error.field}: {error.message} (value: {error.value})",
                  file=sys.stderr)
        return None
    try:
        return loader.load_config(symbol)
    except CallerUsageError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return None


def main(argv: Optional[list[str]] = None, transport: Optional[QuoteTransport] = None,
         out: Optional[TextIO] = None) -> int:
    args = build_parser().parse_args(argv)
    out = out or sys.stdout

    loader = ConfigLoader.create(args.config_dir)
    config = _load_valid_config(loader)
    if config is None:
        return EXIT_USAGE

    configure_logging(level=args.log_level or config.logging.level,
                      format_json=args.json_logs or config.logging.format_json)
    logger = get_logger("stockchart.cli")

    window = config.averaging.default_window if args.window is None else args.window
    if window not in config.averaging.allowed_windows:
        print(f"Window {window} is not one of {list(config.averaging.allowed_windows)}",
              file=sys.stderr)
        return EXIT_USAGE

    if transport is None and args.source_dir:
        transport = FileQuoteTransport(args.source_dir)

    registry = SeriesRegistry()
    try:
        date_range = DateRange(
            start=args.start or config.date_range.default_start,
            end=args.end or date.today(),
        )
        for symbol in args.symbols:
            # Per-symbol sections in the config file may change layout or transport
            symbol_config = _load_valid_config(loader, symbol)
            if symbol_config is None:
                return EXIT_USAGE
            pipeline = SeriesPipeline(
                transport or HttpQuoteTransport(symbol_config.transport), symbol_config)
            pipeline.load_into(registry, symbol, date_range, window)

    except TransportError as e:
        logger.error("Transport failure", error=str(e))
        print(f'Stock symbol "{symbol}" could not be retrieved.', file=sys.stderr)
        return EXIT_TRANSPORT
    except DataQualityError as e:
        logger.error("Quote data rejected", error=str(e))
        print(f"Quote data rejected: {e}", file=sys.stderr)
        return EXIT_DATA
    except CallerUsageError as e:
        print(f"Invalid request: {e}", file=sys.stderr)
        return EXIT_USAGE

    write_csv(registry, out)
    return EXIT_OK
