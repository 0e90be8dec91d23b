"""File-backed quote transport for offline use."""

from datetime import date
from pathlib import Path

from ..errors import TransportError
from .base import QuoteTransport


class FileQuoteTransport(QuoteTransport):
    """Reads ``<directory>/<SYMBOL>.csv`` instead of calling a provider.

    The whole file is returned; the date range is not applied here, matching
    a provider that answers with everything it has.
    """

    def __init__(self, directory: str, name: str = "file"):
        super().__init__(name)
        self.directory = Path(directory)

    def path_for(self, symbol: str) -> Path:
        return self.directory / f"{symbol.upper()}.csv"

    def fetch(self, symbol: str, start: date, end: date) -> bytes:
        path = self.path_for(symbol)
        try:
            body = path.read_bytes()
        except OSError as e:
            self.logger.warning("Quote file unreadable", symbol=symbol, path=str(path), error=str(e))
            raise TransportError(
                f"Cannot read quote file {path}: {e}",
                symbol=symbol
            ) from e

        self.logger.debug("Quote file read", symbol=symbol, path=str(path), size_bytes=len(body))
        return body
