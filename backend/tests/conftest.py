"""
Pytest configuration for test suite

Markers:
- unit: Fast unit tests (no external dependencies)
- api: HTTP endpoint tests through the FastAPI TestClient (services mocked)
"""

from datetime import datetime, timedelta, timezone

import pytest

from app.schemas.market import PriceBar

START = datetime(2023, 1, 2, tzinfo=timezone.utc)


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "unit: Fast unit tests (no dependencies)")
    config.addinivalue_line("markers", "api: Endpoint tests (services mocked)")


def _make_bars(closes) -> list[PriceBar]:
    """Daily bars, oldest first, one per close."""
    return [
        PriceBar(timestamp=START + timedelta(days=i), close=close)
        for i, close in enumerate(closes)
    ]


@pytest.fixture
def flat_closes():
    """300 identical closes"""
    return [100.0] * 300


@pytest.fixture
def rising_closes():
    """300 closes growing 1% per bar"""
    return [100.0 * 1.01**i for i in range(300)]


@pytest.fixture
def falling_closes():
    """300 closes falling at an accelerating rate"""
    return [200.0 - 1.01**i for i in range(300)]


@pytest.fixture
def rising_bars(rising_closes):
    return _make_bars(rising_closes)


@pytest.fixture
def flat_bars(flat_closes):
    return _make_bars(flat_closes)


@pytest.fixture
def bar_factory():
    """Build daily bars from a list of closes"""
    return _make_bars
