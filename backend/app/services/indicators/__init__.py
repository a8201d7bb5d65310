"""
Indicator Engine Service

CONTRACT:
    Input:  PriceHistory (close prices, oldest first)
    Output: IndicatorReport

RESPONSIBILITIES:
    - Calculate RSI(14), MACD(12, 26, 9) and SMA 20/50/200
    - Vote buy/sell/neutral on the latest readings
    - Combine oscillator and moving-average votes into a summary

PURE PYTHON - No LLM involvement.
Uses NumPy for calculations.
All math is deterministic and reproducible.
"""

from app.services.indicators.interface import IndicatorServiceInterface
from app.services.indicators.service import (
    IndicatorService,
    analyze_closes,
    build_report,
    get_indicator_service,
)

__all__ = [
    "IndicatorServiceInterface",
    "IndicatorService",
    "analyze_closes",
    "build_report",
    "get_indicator_service",
]
