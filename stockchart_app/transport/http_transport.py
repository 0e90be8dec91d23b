"""HTTP GET quote transport."""

import socket
from datetime import date
from typing import Optional
from urllib.error import HTTPError, URLError
from urllib.parse import quote, urlparse
from urllib.request import Request, urlopen

from ..config.defaults import TransportParams
from ..errors import CallerUsageError, TransportError
from .base import QuoteTransport

# Body the provider answers with (HTTP 200) for unknown symbols
NO_DATA_MARKER = b"no data"


class HttpQuoteTransport(QuoteTransport):
    """Downloads daily quote CSV from a URL template."""

    def __init__(self, params: Optional[TransportParams] = None, name: str = "http"):
        super().__init__(name)
        self.params = params or TransportParams()

        parsed = urlparse(self.params.url_template)
        if not parsed.scheme or not parsed.netloc:
            raise CallerUsageError(
                f"Invalid URL template: {self.params.url_template}",
                argument="url_template",
                value=self.params.url_template
            )

    def build_url(self, symbol: str, start: date, end: date) -> str:
        """Fill the URL template for one request."""
        provider_symbol = f"{symbol.lower()}{self.params.symbol_suffix}"
        return self.params.url_template.format(
            symbol=quote(provider_symbol, safe=""),
            start=start.strftime(self.params.date_format),
            end=end.strftime(self.params.date_format),
        )

    def fetch(self, symbol: str, start: date, end: date) -> bytes:
        """Fetch quotes via HTTP GET; any failure becomes a TransportError."""
        url = self.build_url(symbol, start, end)
        req = Request(url, headers={'User-Agent': self.params.user_agent}, method="GET")

        try:
            with urlopen(req, timeout=self.params.timeout_seconds) as response:
                response_code = response.getcode()
                body = response.read()

        except HTTPError as e:
            self.logger.warning(
                "Quote request HTTP error",
                symbol=symbol,
                error_code=e.code,
                error_reason=str(e.reason)
            )
            raise TransportError(
                f"HTTP {e.code} fetching {symbol}: {e.reason}",
                symbol=symbol,
                status_code=e.code
            ) from e

        except (URLError, socket.timeout, OSError) as e:
            self.logger.warning(
                "Quote request network error",
                symbol=symbol,
                error=str(e)
            )
            raise TransportError(
                f"Network error fetching {symbol}: {e}",
                symbol=symbol
            ) from e

        if not 200 <= response_code < 300:
            raise TransportError(
                f"HTTP {response_code} fetching {symbol}",
                symbol=symbol,
                status_code=response_code
            )

        if not body.strip() or body.strip().lower().startswith(NO_DATA_MARKER):
            raise TransportError(
                f"No quote data available for {symbol}",
                symbol=symbol,
                status_code=response_code
            )

        self.logger.debug(
            "Quote response received",
            symbol=symbol,
            response_code=response_code,
            size_bytes=len(body)
        )
        return body
