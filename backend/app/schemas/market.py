"""
CONTRACT 1: Market Data

Input: MarketDataRequest
Output: PriceHistory

Price history fetched from the market-data provider (Yahoo Finance)
and normalized into a standard, oldest-first list of bars.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ENUMS
# =============================================================================


class Interval(str, Enum):
    M1 = "1m"
    M5 = "5m"
    M15 = "15m"
    M30 = "30m"
    M60 = "60m"
    H1 = "1h"
    D1 = "1d"
    W1 = "1wk"
    MO1 = "1mo"


# =============================================================================
# INPUT: MarketDataRequest
# =============================================================================


class MarketDataRequest(BaseModel):
    """
    Request for price history.
    Sent by: Technical indicators endpoint
    Received by: Market Data Service
    """

    symbol: str = Field(..., min_length=1, description="Ticker or forex pair (e.g. 'AAPL', 'EURUSD')")
    interval: str = Field(default="1d", description="Bar interval; unknown values fall back to 1d")


# =============================================================================
# OUTPUT: PriceHistory
# =============================================================================


class PriceBar(BaseModel):
    """Single price bar. Only close is required by the indicator pipeline."""

    timestamp: datetime
    open: Optional[float] = None
    high: Optional[float] = None
    low: Optional[float] = None
    close: float = Field(..., gt=0)
    volume: int = Field(default=0, ge=0)

    class Config:
        frozen = True


class PriceHistory(BaseModel):
    """
    Ordered price history for one symbol.
    Returned by: Market Data Service
    Consumed by: Indicator Service
    """

    symbol: str
    interval: Interval = Interval.D1
    bars: list[PriceBar]

    @field_validator("bars")
    @classmethod
    def bars_strictly_increasing(cls, bars: list[PriceBar]) -> list[PriceBar]:
        for prev, cur in zip(bars, bars[1:]):
            if cur.timestamp <= prev.timestamp:
                raise ValueError(
                    f"bars must be in strictly increasing timestamp order "
                    f"({cur.timestamp.isoformat()} follows {prev.timestamp.isoformat()})"
                )
        return bars

    class Config:
        json_schema_extra = {
            "example": {
                "symbol": "EURUSD=X",
                "interval": "1d",
                "bars": [
                    {
                        "timestamp": "2024-02-02T00:00:00+00:00",
                        "open": 1.0871,
                        "high": 1.0896,
                        "low": 1.0785,
                        "close": 1.0878,
                        "volume": 0,
                    }
                ],
            }
        }
