"""Quote transports: turn a symbol and date range into raw response bytes."""

from .base import QuoteTransport
from .file_transport import FileQuoteTransport
from .http_transport import HttpQuoteTransport

__all__ = ["QuoteTransport", "FileQuoteTransport", "HttpQuoteTransport"]
