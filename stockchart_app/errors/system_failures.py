"""
System failure error classifications.

These exceptions represent failures outside the data itself, such as the
quote provider being unreachable, that cannot be fixed locally.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class TransportError(SystemFailureError):
    """Quote data for a symbol could not be retrieved."""

    def __init__(self, message: str, symbol: Optional[str] = None,
                 status_code: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.symbol = symbol
        self.status_code = status_code
