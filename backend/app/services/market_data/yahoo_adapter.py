"""
Yahoo Finance Data Adapter

Fetches REAL price history from Yahoo Finance.
Forex pairs use the =X suffix (EURUSD -> EURUSD=X).
"""

import asyncio
import logging
import math
from datetime import timezone
from typing import Optional

import yfinance as yf

from app.schemas.market import Interval, PriceBar

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = Interval.D1

# History window per interval. Chosen so a liquid symbol yields at least
# 200 bars (SMA 200 warm-up) within Yahoo's intraday retention limits.
PERIOD_MAP = {
    Interval.M1: "7d",
    Interval.M5: "60d",
    Interval.M15: "60d",
    Interval.M30: "60d",
    Interval.M60: "730d",
    Interval.H1: "730d",
    Interval.D1: "2y",
    Interval.W1: "10y",
    Interval.MO1: "max",
}


def format_symbol(symbol: str) -> str:
    """Convert a user symbol to Yahoo Finance format."""
    symbol = symbol.upper().strip()

    # Six letters with no exchange/class separator is a forex pair
    if len(symbol) == 6 and "." not in symbol and "-" not in symbol:
        return f"{symbol}=X"

    return symbol


def normalize_interval(interval: Optional[str]) -> Interval:
    """Map a requested interval onto a supported one, defaulting to daily."""
    try:
        return Interval((interval or "").strip())
    except ValueError:
        logger.debug(f"Unsupported interval {interval!r}, using {DEFAULT_INTERVAL.value}")
        return DEFAULT_INTERVAL


def _download_history(yahoo_symbol: str, interval: Interval):
    ticker = yf.Ticker(yahoo_symbol)
    return ticker.history(period=PERIOD_MAP[interval], interval=interval.value)


def _frame_to_bars(hist) -> list[PriceBar]:
    """Convert a yfinance DataFrame to PriceBar list, skipping rows without a close."""
    bars = []
    for idx, row in hist.iterrows():
        close = float(row["Close"])
        if math.isnan(close) or close <= 0:
            continue

        ts = idx.to_pydatetime()
        # Make timezone aware if not already
        if ts.tzinfo is None:
            ts = ts.replace(tzinfo=timezone.utc)

        volume = row.get("Volume", 0)
        bars.append(
            PriceBar(
                timestamp=ts,
                open=_optional_float(row.get("Open")),
                high=_optional_float(row.get("High")),
                low=_optional_float(row.get("Low")),
                close=close,
                volume=0 if volume is None or math.isnan(volume) else int(volume),
            )
        )
    return bars


def _optional_float(value) -> Optional[float]:
    if value is None:
        return None
    value = float(value)
    return None if math.isnan(value) else value


async def fetch_yahoo_history(
    yahoo_symbol: str,
    interval: Interval = DEFAULT_INTERVAL,
) -> Optional[list[PriceBar]]:
    """
    Fetch price history from Yahoo Finance.

    Args:
        yahoo_symbol: Symbol already in Yahoo format (see format_symbol)
        interval: Bar interval

    Returns:
        Bars oldest first, or None if Yahoo has no data for the symbol

    Raises:
        Exception: whatever yfinance raises on network/parse failure
    """
    logger.info(f"Fetching {yahoo_symbol} ({interval.value}) from Yahoo Finance...")

    # yfinance is synchronous, run it in the default executor
    loop = asyncio.get_running_loop()
    hist = await loop.run_in_executor(None, _download_history, yahoo_symbol, interval)

    if hist is None or hist.empty:
        logger.warning(f"No data returned for {yahoo_symbol}")
        return None

    # Yahoo can repeat the live bar; keep the latest copy of each timestamp
    hist = hist[~hist.index.duplicated(keep="last")].sort_index()
    bars = _frame_to_bars(hist)
    if not bars:
        logger.warning(f"No usable bars for {yahoo_symbol}")
        return None

    return bars
