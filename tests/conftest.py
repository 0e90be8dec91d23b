"""Pytest configuration and shared fixtures."""

import logging

import pytest
import structlog
from datetime import date
from unittest.mock import Mock

from stockchart_app.data.models import Series
from stockchart_app.transport.base import QuoteTransport


@pytest.fixture
def unsorted_quotes_csv() -> str:
    """Three daily quotes in descending date order, without a header."""
    return (
        "2020-01-03,9.9,10.1,9.8,10.0,1000\n"
        "2020-01-02,8.9,9.1,8.8,9.0,1000\n"
        "2020-01-01,7.9,8.1,7.8,8.0,1000\n"
    )


@pytest.fixture
def provider_csv() -> str:
    """Provider response with header row, newest date first."""
    return (
        "Date,Open,High,Low,Close,Volume\n"
        "2020-02-05,104.0,106.0,103.0,105.0,12000\n"
        "2020-02-04,103.0,105.0,102.0,104.0,11000\n"
        "2020-02-03,102.0,104.0,101.0,103.0,10000\n"
        "2020-02-02,101.0,103.0,100.0,102.0,9000\n"
        "2020-02-01,100.0,102.0,99.0,101.0,8000\n"
    )


@pytest.fixture
def three_day_series() -> Series:
    """Series of 8.0, 9.0, 10.0 over 2020-01-01 .. 2020-01-03."""
    return Series({
        date(2020, 1, 1): 8.0,
        date(2020, 1, 2): 9.0,
        date(2020, 1, 3): 10.0,
    })


@pytest.fixture
def make_transport():
    """Factory for a mocked transport answering with fixed bytes."""
    def _make(body) -> Mock:
        transport = Mock(spec=QuoteTransport)
        if isinstance(body, Exception):
            transport.fetch.side_effect = body
        else:
            transport.fetch.return_value = body.encode("utf-8") if isinstance(body, str) else body
        return transport
    return _make


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo configure_logging() so streams captured by one test are not reused."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()
