"""
Data quality error classifications for quote ingestion.

These exceptions describe problems with the content of a provider response
rather than with the act of fetching it.
"""

from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for problems with the content of fetched quote data."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class ParseError(DataQualityError):
    """Raw response did not conform to the expected delimited format."""

    def __init__(self, message: str, line_number: Optional[int] = None,
                 raw_data: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.line_number = line_number
        self.raw_data = raw_data


class InvalidDateError(ParseError):
    """Date field is not a valid calendar date in the configured format."""
    pass


class InvalidPriceError(ParseError):
    """Price field is not a finite, non-negative number."""
    pass


class MissingFieldError(ParseError):
    """Record has fewer fields than the configured price index requires."""

    def __init__(self, message: str, required_fields: Optional[int] = None,
                 available_fields: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.required_fields = required_fields
        self.available_fields = available_fields


class InsufficientDataError(DataQualityError):
    """Not enough observations for the requested calculation."""

    def __init__(self, message: str, required_count: Optional[int] = None,
                 available_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.required_count = required_count
        self.available_count = available_count
