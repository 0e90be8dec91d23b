"""
Parsers for delimited daily quote responses.

This module turns the CSV-style text returned by a quote provider into a
date-ordered Series of closing prices, with typed errors for every way a
record can be malformed.
"""

import csv
import io
import math
from datetime import date, datetime
from typing import Optional

import structlog

from ..config.defaults import ParserParams
from ..errors import InvalidDateError, InvalidPriceError, MissingFieldError, ParseError
from .models import Quote, Series

logger = structlog.get_logger(__name__)


def parse_quotes(raw_text: str, has_header: bool, *,
                 delimiter: str = ",",
                 date_format: str = "%Y-%m-%d",
                 price_field: int = 4) -> Series:
    """
    Parse delimited quote records into a date-ordered Series.

    Expected layout (one record per line):
        Date,Open,High,Low,Close,Volume
        2020-01-03,9.8,10.2,9.7,10.0,12000

    The first field of each record is the date; ``price_field`` indexes the
    closing price. Records need not be sorted. When a date repeats, the last
    record for it wins.

    Args:
        raw_text: Decoded provider response
        has_header: Skip the first non-blank record
        delimiter: Field separator
        date_format: strftime pattern of the date field
        price_field: Zero-based index of the closing price field

    Returns:
        Series sorted ascending by date

    Raises:
        MissingFieldError: If a record is too short to hold the price field
        InvalidDateError: If a date field is not a valid calendar date
        InvalidPriceError: If a price field is not a finite non-negative number
        ParseError: If the text cannot be split into records
    """
    quotes = []
    header_pending = has_header

    try:
        reader = csv.reader(io.StringIO(raw_text), delimiter=delimiter)
        for record in reader:
            if not record or all(not field.strip() for field in record):
                continue
            if header_pending:
                header_pending = False
                continue
            quotes.append(_parse_record(record, reader.line_num, delimiter,
                                        date_format, price_field))
    except csv.Error as e:
        raise ParseError(f"Malformed delimited text: {e}")

    series = Series.from_quotes(quotes)

    duplicates = len(quotes) - len(series)
    if duplicates:
        logger.debug("Duplicate quote dates overwritten", duplicates=duplicates)

    return series


def _parse_record(record: list[str], line_number: int, delimiter: str,
                  date_format: str, price_field: int) -> Quote:
    """Parse a single record into a Quote."""
    raw = delimiter.join(record)

    if len(record) <= price_field:
        raise MissingFieldError(
            f"Record on line {line_number} has {len(record)} fields, "
            f"price field {price_field} requires at least {price_field + 1}",
            line_number=line_number,
            raw_data=raw,
            required_fields=price_field + 1,
            available_fields=len(record)
        )

    quote_date = _parse_date(record[0].strip(), date_format, line_number, raw)
    price = _parse_price(record[price_field].strip(), line_number, raw)

    return Quote(date=quote_date, price=price)


def _parse_date(value: str, date_format: str, line_number: int, raw: str) -> date:
    try:
        return datetime.strptime(value, date_format).date()
    except ValueError as e:
        raise InvalidDateError(
            f"Invalid date '{value}' on line {line_number}: {e}",
            line_number=line_number,
            raw_data=raw
        )


def _parse_price(value: str, line_number: int, raw: str) -> float:
    try:
        price = float(value)
    except ValueError:
        raise InvalidPriceError(
            f"Invalid price '{value}' on line {line_number}",
            line_number=line_number,
            raw_data=raw
        )

    if not math.isfinite(price) or price < 0:
        raise InvalidPriceError(
            f"Price must be finite and non-negative on line {line_number}, got {value}",
            line_number=line_number,
            raw_data=raw
        )

    return price


class QuoteParser:
    """Quote parser bound to a configured record layout."""

    def __init__(self, params: Optional[ParserParams] = None):
        self.params = params or ParserParams()

    def parse(self, raw_text: str, has_header: Optional[bool] = None) -> Series:
        """
        Parse raw text using the configured layout.

        Args:
            raw_text: Decoded provider response
            has_header: Override the configured header setting

        Returns:
            Series sorted ascending by date
        """
        if has_header is None:
            has_header = self.params.has_header

        return parse_quotes(
            raw_text,
            has_header,
            delimiter=self.params.delimiter,
            date_format=self.params.date_format,
            price_field=self.params.price_field,
        )
