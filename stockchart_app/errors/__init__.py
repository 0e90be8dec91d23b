"""
Error classification for the quote loading pipeline.

Every failure aborts a load as a whole; these types let callers tell a
transport outage apart from bad data and from their own misuse.
"""

from .data_quality import (
    DataQualityError,
    ParseError,
    InvalidDateError,
    InvalidPriceError,
    MissingFieldError,
    InsufficientDataError,
)
from .system_failures import (
    SystemFailureError,
    TransportError,
)
from .usage import CallerUsageError

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "ParseError",
    "InvalidDateError",
    "InvalidPriceError",
    "MissingFieldError",
    "InsufficientDataError",
    # System Failures
    "SystemFailureError",
    "TransportError",
    # Caller misuse
    "CallerUsageError",
]
