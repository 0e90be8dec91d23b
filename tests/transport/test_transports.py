"""Tests for quote transports."""

import socket
import pytest
from datetime import date
from io import BytesIO
from unittest.mock import MagicMock, patch
from urllib.error import HTTPError, URLError

from stockchart_app.config.defaults import TransportParams
from stockchart_app.errors import CallerUsageError, TransportError
from stockchart_app.transport.file_transport import FileQuoteTransport
from stockchart_app.transport.http_transport import HttpQuoteTransport


START = date(2020, 1, 1)
END = date(2020, 12, 31)


def fake_response(body: bytes, code: int = 200) -> MagicMock:
    """Context-manager response as returned by urlopen."""
    response = MagicMock()
    response.getcode.return_value = code
    response.read.return_value = body
    response.__enter__.return_value = response
    return response


class TestHttpQuoteTransport:
    """Test HTTP quote transport."""

    def test_build_url(self):
        transport = HttpQuoteTransport(TransportParams(
            url_template="https://quotes.example.com/d?s={symbol}&from={start}&to={end}",
            symbol_suffix=".us",
            date_format="%Y%m%d",
        ))

        url = transport.build_url("MSFT", START, END)

        assert url == "https://quotes.example.com/d?s=msft.us&from=20200101&to=20201231"

    def test_symbol_is_url_quoted(self):
        transport = HttpQuoteTransport(TransportParams(
            url_template="https://quotes.example.com/d?s={symbol}", symbol_suffix=""))
        assert transport.build_url("a&b", START, END) == "https://quotes.example.com/d?s=a%26b"

    def test_invalid_template(self):
        with pytest.raises(CallerUsageError):
            HttpQuoteTransport(TransportParams(url_template="not a url {symbol}"))

    @patch("stockchart_app.transport.http_transport.urlopen")
    def test_fetch_success(self, mock_urlopen):
        mock_urlopen.return_value = fake_response(b"Date,Open,High,Low,Close\n2020-01-02,1,1,1,1\n")
        transport = HttpQuoteTransport(TransportParams(timeout_seconds=7))

        body = transport.fetch("msft", START, END)

        assert body.startswith(b"Date,")
        request = mock_urlopen.call_args.args[0]
        assert "msft.us" in request.full_url
        assert request.get_header("User-agent") == "stockchart-app/0.1"
        assert mock_urlopen.call_args.kwargs["timeout"] == 7

    @patch("stockchart_app.transport.http_transport.urlopen")
    def test_http_error(self, mock_urlopen):
        mock_urlopen.side_effect = HTTPError("https://x", 404, "Not Found", {}, BytesIO(b""))

        with pytest.raises(TransportError) as exc_info:
            HttpQuoteTransport().fetch("zzzz", START, END)

        assert exc_info.value.status_code == 404
        assert exc_info.value.symbol == "zzzz"
        assert exc_info.value.recoverable is False

    @patch("stockchart_app.transport.http_transport.urlopen")
    def test_network_error(self, mock_urlopen):
        mock_urlopen.side_effect = URLError("name resolution failed")

        with pytest.raises(TransportError):
            HttpQuoteTransport().fetch("msft", START, END)

    @patch("stockchart_app.transport.http_transport.urlopen")
    def test_timeout(self, mock_urlopen):
        mock_urlopen.side_effect = socket.timeout("timed out")

        with pytest.raises(TransportError):
            HttpQuoteTransport().fetch("msft", START, END)

    @patch("stockchart_app.transport.http_transport.urlopen")
    def test_no_data_body(self, mock_urlopen):
        mock_urlopen.return_value = fake_response(b"No data")

        with pytest.raises(TransportError) as exc_info:
            HttpQuoteTransport().fetch("zzzz", START, END)

        assert exc_info.value.status_code == 200

    @patch("stockchart_app.transport.http_transport.urlopen")
    def test_empty_body(self, mock_urlopen):
        mock_urlopen.return_value = fake_response(b"  \n")

        with pytest.raises(TransportError):
            HttpQuoteTransport().fetch("msft", START, END)

    @patch("stockchart_app.transport.http_transport.urlopen")
    def test_non_success_status(self, mock_urlopen):
        mock_urlopen.return_value = fake_response(b"moved", code=302)

        with pytest.raises(TransportError) as exc_info:
            HttpQuoteTransport().fetch("msft", START, END)

        assert exc_info.value.status_code == 302


class TestFileQuoteTransport:
    """Test file-backed quote transport."""

    def test_reads_symbol_file(self, tmp_path):
        (tmp_path / "MSFT.csv").write_bytes(b"Date,Open,High,Low,Close\n")

        body = FileQuoteTransport(str(tmp_path)).fetch("msft", START, END)

        assert body == b"Date,Open,High,Low,Close\n"

    def test_missing_file(self, tmp_path):
        with pytest.raises(TransportError) as exc_info:
            FileQuoteTransport(str(tmp_path)).fetch("zzzz", START, END)

        assert exc_info.value.symbol == "zzzz"
