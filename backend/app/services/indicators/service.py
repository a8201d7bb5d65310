"""
Indicator Engine Service Implementation

Runs the RSI / MACD / SMA pipeline over a price history and reduces it
to buy/sell/neutral votes.
NO LLM INVOLVEMENT - Pure Python/NumPy calculations.
"""

import logging
from typing import Optional

import numpy as np

from app.schemas.market import PriceBar, PriceHistory
from app.schemas.indicators import IndicatorReport
from app.services.base import InsufficientDataError, ValidationError
from app.services.indicators.interface import IndicatorServiceInterface
from app.services.indicators.calculations import macd, moving_averages, rsi
from app.services.indicators.signals import (
    classify_moving_averages,
    classify_oscillators,
    combine_votes,
)

logger = logging.getLogger(__name__)

RSI_PERIOD = 14
MACD_FAST = 12
MACD_SLOW = 26
MACD_SIGNAL = 9
SMA_PERIODS = (20, 50, 200)

# Longest warm-up in the pipeline (SMA 200)
MIN_BARS = max(RSI_PERIOD + 1, MACD_SLOW, *SMA_PERIODS)

SERVICE_NAME = "IndicatorService"


def analyze_closes(closes) -> IndicatorReport:
    """
    Build the signal report from close prices, oldest first.

    Raises:
        InsufficientDataError: fewer than MIN_BARS closes
    """
    closes = np.asarray(closes, dtype=np.float64)
    if len(closes) < MIN_BARS:
        raise InsufficientDataError(SERVICE_NAME, required=MIN_BARS, available=len(closes))

    rsi_series = rsi(closes, RSI_PERIOD)
    macd_series = macd(closes, MACD_FAST, MACD_SLOW, MACD_SIGNAL)
    ma = moving_averages(closes)

    oscillators = classify_oscillators(rsi_series, macd_series)
    ma_votes = classify_moving_averages(ma)

    return IndicatorReport(
        oscillators=oscillators,
        summary=combine_votes(oscillators, ma_votes),
        moving_averages=ma_votes,
    )


def build_report(bars: list[PriceBar]) -> IndicatorReport:
    """Build the signal report from price bars, oldest first."""
    return analyze_closes([bar.close for bar in bars])


class IndicatorService(IndicatorServiceInterface):
    """
    Indicator Engine Service.

    Stateless: every call recomputes from the bars it is given.
    """

    @property
    def name(self) -> str:
        return SERVICE_NAME

    async def execute(self, input_data: PriceHistory) -> IndicatorReport:
        """Calculate the signal report for a fetched price history."""
        try:
            report = self.analyze(input_data.bars)
        except InsufficientDataError as e:
            logger.warning(
                f"Not enough history for {input_data.symbol} ({input_data.interval.value}): "
                f"{e.available}/{e.required} bars"
            )
            raise

        logger.info(
            f"Indicators for {input_data.symbol} ({input_data.interval.value}): "
            f"summary={report.summary.signal.value}"
        )
        return report

    def analyze(self, bars: list[PriceBar]) -> IndicatorReport:
        """Calculate the signal report for caller-supplied bars, oldest first."""
        for prev, cur in zip(bars, bars[1:]):
            if cur.timestamp <= prev.timestamp:
                raise ValidationError(
                    self.name,
                    "Bars must be in strictly increasing timestamp order",
                    {"timestamp": cur.timestamp.isoformat()},
                )
        return build_report(bars)

    async def health_check(self) -> bool:
        """Indicator service is always healthy (pure computation)."""
        return True


# Singleton instance
_service_instance: Optional[IndicatorService] = None


def get_indicator_service() -> IndicatorService:
    """Get or create indicator service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = IndicatorService()
    return _service_instance
