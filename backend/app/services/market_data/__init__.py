"""
Market Data Service

CONTRACT:
    Input:  MarketDataRequest
    Output: PriceHistory

RESPONSIBILITIES:
    - Normalize symbols (forex pairs get the Yahoo =X suffix)
    - Validate intervals (unknown values fall back to 1d)
    - Fetch OHLCV history from Yahoo Finance
    - Normalize rows into oldest-first PriceBar lists

NO LLM INVOLVEMENT - Pure data fetching and transformation.
"""

from app.services.market_data.interface import MarketDataServiceInterface
from app.services.market_data.service import (
    MarketDataService,
    get_market_data_service,
)
from app.services.market_data.yahoo_adapter import format_symbol, normalize_interval

__all__ = [
    "MarketDataServiceInterface",
    "MarketDataService",
    "get_market_data_service",
    "format_symbol",
    "normalize_interval",
]
