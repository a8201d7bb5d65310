"""
Market Data Service Implementation

Fetches and normalizes price history from Yahoo Finance.
"""

import asyncio
import logging
from typing import Optional

import pydantic

from app.core.config import settings
from app.schemas.market import MarketDataRequest, PriceHistory
from app.services.base import ExternalAPIError
from app.services.market_data.interface import MarketDataServiceInterface
from app.services.market_data.yahoo_adapter import (
    fetch_yahoo_history,
    format_symbol,
    normalize_interval,
)

logger = logging.getLogger(__name__)


class MarketDataService(MarketDataServiceInterface):
    """
    Market Data Service.

    Single source (Yahoo Finance); no caching, every request is fetched fresh.
    """

    def __init__(self, timeout: Optional[float] = None):
        self._timeout = timeout if timeout is not None else settings.market_data_timeout

    @property
    def name(self) -> str:
        return "MarketDataService"

    async def execute(self, input_data: MarketDataRequest) -> Optional[PriceHistory]:
        """Fetch price history for one symbol."""
        yahoo_symbol = format_symbol(input_data.symbol)
        interval = normalize_interval(input_data.interval)

        try:
            bars = await asyncio.wait_for(
                fetch_yahoo_history(yahoo_symbol, interval),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError:
            logger.error(f"Yahoo Finance timed out for {yahoo_symbol} after {self._timeout}s")
            raise ExternalAPIError(
                self.name,
                f"Market data request timed out for {yahoo_symbol}",
                {"symbol": yahoo_symbol, "interval": interval.value},
            )
        except Exception as e:
            logger.error(f"Error fetching {yahoo_symbol} from Yahoo Finance: {e}")
            raise ExternalAPIError(
                self.name,
                f"Failed to fetch market data for {yahoo_symbol}: {e}",
                {"symbol": yahoo_symbol, "interval": interval.value},
            ) from e

        if not bars:
            return None

        try:
            return PriceHistory(symbol=yahoo_symbol, interval=interval, bars=bars)
        except pydantic.ValidationError as e:
            logger.error(f"Unusable price history for {yahoo_symbol}: {e}")
            raise ExternalAPIError(
                self.name,
                f"Invalid market data for {yahoo_symbol}: {e.errors()[0]['msg']}",
                {"symbol": yahoo_symbol, "interval": interval.value},
            ) from e

    async def health_check(self) -> bool:
        """Check Yahoo Finance with a short daily fetch."""
        try:
            bars = await fetch_yahoo_history("EURUSD=X")
            return bool(bars)
        except Exception as e:
            logger.error(f"Yahoo Finance health check failed: {e}")
            return False


# Singleton instance
_service_instance: Optional[MarketDataService] = None


def get_market_data_service() -> MarketDataService:
    """Get or create market data service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = MarketDataService()
    return _service_instance
