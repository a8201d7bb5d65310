"""
Technical Indicator API Endpoints

Buy/sell/neutral signal summary (oscillators, moving averages, combined)
for a symbol's recent price history.
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from app.schemas.market import MarketDataRequest
from app.schemas.indicators import AnalyzeRequest, IndicatorReport
from app.services.base import ExternalAPIError, InsufficientDataError, ValidationError
from app.services.indicators import get_indicator_service
from app.services.market_data import get_market_data_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=IndicatorReport)
async def get_technical_indicators(
    symbol: Optional[str] = Query(default=None, description="Ticker or forex pair, e.g. EURUSD"),
    interval: Optional[str] = Query(default=None, description="1m, 5m, 15m, 30m, 60m, 1h, 1d, 1wk, 1mo"),
):
    """
    Get the technical signal summary for a symbol.

    Returns:
        - oscillators: RSI(14) and MACD(12, 26, 9) votes
        - movingAverages: SMA 20/50/200 crossover votes
        - summary: both groups combined
    """
    if not symbol or not interval:
        raise HTTPException(status_code=400, detail="Symbol and interval are required")

    # Fetch market data
    data_service = get_market_data_service()
    try:
        history = await data_service.execute(MarketDataRequest(symbol=symbol, interval=interval))
    except ExternalAPIError as e:
        raise HTTPException(status_code=502, detail=e.message)

    if history is None:
        raise HTTPException(status_code=404, detail="No data available for this symbol")

    # Calculate indicators
    indicator_service = get_indicator_service()
    try:
        return await indicator_service.execute(history)
    except InsufficientDataError as e:
        raise HTTPException(status_code=422, detail=e.message)


@router.post("/analyze", response_model=IndicatorReport)
async def analyze_price_history(request: AnalyzeRequest):
    """
    Get the technical signal summary for caller-supplied bars.

    Bars must be oldest first; at least 200 are needed for SMA 200.
    """
    indicator_service = get_indicator_service()
    try:
        return indicator_service.analyze(request.bars)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.message)
    except InsufficientDataError as e:
        logger.info(f"Rejected analyze request: {e.message}")
        raise HTTPException(status_code=422, detail=e.message)
