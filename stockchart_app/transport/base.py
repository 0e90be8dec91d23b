"""Base class for quote transports."""

from abc import ABC, abstractmethod
from datetime import date

import structlog


class QuoteTransport(ABC):
    """Fetches the raw daily quote response for one symbol."""

    def __init__(self, name: str):
        self.name = name
        self.logger = structlog.get_logger(f"quote.transport.{name}")

    @abstractmethod
    def fetch(self, symbol: str, start: date, end: date) -> bytes:
        """
        Retrieve raw delimited quote data for a symbol.

        Args:
            symbol: Ticker symbol as entered by the user
            start: First date of the requested range
            end: Last date of the requested range

        Returns:
            Response body; decoding and parsing are left to the caller

        Raises:
            TransportError: If the data could not be retrieved
        """
        pass
