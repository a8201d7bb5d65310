"""
Unit tests for MarketDataService

Symbol/interval normalization, yfinance frame conversion, and the
service's error mapping. Yahoo Finance is never called.
"""

import asyncio
import math
from datetime import datetime, timezone
from unittest.mock import AsyncMock, patch

import pandas as pd
import pydantic
import pytest

from app.schemas.market import Interval, MarketDataRequest, PriceBar, PriceHistory
from app.services.base import ExternalAPIError
from app.services.market_data import MarketDataService, format_symbol, normalize_interval
from app.services.market_data.yahoo_adapter import PERIOD_MAP, _frame_to_bars, fetch_yahoo_history


@pytest.mark.unit
class TestFormatSymbol:
    """Test Yahoo symbol formatting"""

    @pytest.mark.parametrize(
        "symbol,expected",
        [
            ("EURUSD", "EURUSD=X"),
            ("eurusd", "EURUSD=X"),
            (" gbpjpy ", "GBPJPY=X"),
            ("AAPL", "AAPL"),
            ("BTC-USD", "BTC-USD"),
            ("ABC-XY", "ABC-XY"),
            ("RDS.AL", "RDS.AL"),
            ("GOOGLE", "GOOGLE=X"),
        ],
    )
    def test_format(self, symbol, expected):
        assert format_symbol(symbol) == expected


@pytest.mark.unit
class TestNormalizeInterval:
    """Test interval validation"""

    @pytest.mark.parametrize("value", ["1m", "5m", "15m", "30m", "60m", "1h", "1d", "1wk", "1mo"])
    def test_supported(self, value):
        assert normalize_interval(value).value == value

    @pytest.mark.parametrize("value", ["4h", "2d", "", None, "daily"])
    def test_unsupported_falls_back_to_daily(self, value):
        assert normalize_interval(value) == Interval.D1

    def test_every_interval_has_a_period(self):
        assert set(PERIOD_MAP) == set(Interval)


@pytest.mark.unit
class TestFrameToBars:
    """Test yfinance DataFrame conversion"""

    def test_converts_rows(self):
        index = pd.DatetimeIndex([datetime(2024, 1, 2), datetime(2024, 1, 3)])
        frame = pd.DataFrame(
            {
                "Open": [1.0, 1.1],
                "High": [1.2, 1.3],
                "Low": [0.9, 1.0],
                "Close": [1.1, 1.2],
                "Volume": [100, 0],
            },
            index=index,
        )

        bars = _frame_to_bars(frame)

        assert len(bars) == 2
        assert bars[0].close == 1.1
        assert bars[0].volume == 100
        assert bars[0].timestamp.tzinfo is not None
        assert bars[1].timestamp > bars[0].timestamp

    def test_frozen(self):
        bar = PriceBar(timestamp=datetime(2024, 1, 2, tzinfo=timezone.utc), close=1.1)

        with pytest.raises(pydantic.ValidationError):
            bar.close = 2.0

    def test_skips_missing_closes(self):
        index = pd.DatetimeIndex(
            [datetime(2024, 1, 2, tzinfo=timezone.utc), datetime(2024, 1, 3, tzinfo=timezone.utc)]
        )
        frame = pd.DataFrame(
            {
                "Open": [math.nan, 1.1],
                "High": [math.nan, 1.3],
                "Low": [math.nan, 1.0],
                "Close": [math.nan, 1.2],
                "Volume": [math.nan, math.nan],
            },
            index=index,
        )

        bars = _frame_to_bars(frame)

        assert len(bars) == 1
        assert bars[0].close == 1.2
        assert bars[0].volume == 0


@pytest.mark.unit
class TestMarketDataService:
    """Test service orchestration with the Yahoo adapter mocked"""

    async def test_execute_formats_request(self, rising_bars):
        with patch(
            "app.services.market_data.service.fetch_yahoo_history",
            new=AsyncMock(return_value=rising_bars),
        ) as mock_fetch:
            result = await MarketDataService().execute(
                MarketDataRequest(symbol="eurusd", interval="4h")
            )

        mock_fetch.assert_awaited_once_with("EURUSD=X", Interval.D1)
        assert isinstance(result, PriceHistory)
        assert result.symbol == "EURUSD=X"
        assert result.interval == Interval.D1
        assert len(result.bars) == 300

    async def test_no_data_returns_none(self):
        with patch(
            "app.services.market_data.service.fetch_yahoo_history",
            new=AsyncMock(return_value=None),
        ):
            result = await MarketDataService().execute(MarketDataRequest(symbol="NOPE", interval="1d"))

        assert result is None

    async def test_provider_error(self):
        with patch(
            "app.services.market_data.service.fetch_yahoo_history",
            new=AsyncMock(side_effect=RuntimeError("connection reset")),
        ):
            with pytest.raises(ExternalAPIError) as exc_info:
                await MarketDataService().execute(MarketDataRequest(symbol="AAPL", interval="1d"))

        assert "connection reset" in exc_info.value.message
        assert exc_info.value.details["symbol"] == "AAPL"

    async def test_timeout(self):
        async def slow_fetch(symbol, interval):
            await asyncio.sleep(1)

        with patch("app.services.market_data.service.fetch_yahoo_history", new=slow_fetch):
            with pytest.raises(ExternalAPIError) as exc_info:
                await MarketDataService(timeout=0.01).execute(
                    MarketDataRequest(symbol="AAPL", interval="1d")
                )

        assert "timed out" in exc_info.value.message

    async def test_unordered_bars_are_a_provider_error(self, rising_bars):
        with patch(
            "app.services.market_data.service.fetch_yahoo_history",
            new=AsyncMock(return_value=list(reversed(rising_bars))),
        ):
            with pytest.raises(ExternalAPIError) as exc_info:
                await MarketDataService().execute(MarketDataRequest(symbol="EURUSD", interval="1d"))

        assert exc_info.value.details["symbol"] == "EURUSD=X"


@pytest.mark.unit
class TestFetchYahooHistory:
    """Test the adapter with yfinance's download mocked"""

    @staticmethod
    def _daily_frame(closes, index):
        return pd.DataFrame(
            {
                "Open": closes,
                "High": closes,
                "Low": closes,
                "Close": closes,
                "Volume": [0] * len(closes),
            },
            index=pd.DatetimeIndex(index),
        )

    async def test_repeated_last_row_is_dropped(self):
        days = list(pd.date_range("2024-01-01", periods=250, freq="D", tz="UTC"))
        closes = [1.0 + i * 0.001 for i in range(250)] + [1.5]
        frame = self._daily_frame(closes, days + [days[-1]])

        with patch(
            "app.services.market_data.yahoo_adapter._download_history",
            return_value=frame,
        ):
            bars = await fetch_yahoo_history("EURUSD=X", Interval.D1)

        assert len(bars) == 250
        assert bars[-1].close == 1.5
        assert all(cur.timestamp > prev.timestamp for prev, cur in zip(bars, bars[1:]))

    async def test_repeated_row_reaches_service_as_history(self):
        days = list(pd.date_range("2024-01-01", periods=250, freq="D", tz="UTC"))
        closes = [1.0 + i * 0.001 for i in range(251)]
        frame = self._daily_frame(closes, days + [days[-1]])

        with patch(
            "app.services.market_data.yahoo_adapter._download_history",
            return_value=frame,
        ):
            history = await MarketDataService().execute(MarketDataRequest(symbol="EURUSD", interval="1d"))

        assert isinstance(history, PriceHistory)
        assert len(history.bars) == 250

    async def test_empty_frame(self):
        with patch(
            "app.services.market_data.yahoo_adapter._download_history",
            return_value=pd.DataFrame(),
        ):
            assert await fetch_yahoo_history("NOPE") is None
