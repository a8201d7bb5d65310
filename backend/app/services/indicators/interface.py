"""
Indicator Engine Service Interface

Defines the contract for the indicator calculation layer.
"""

from abc import abstractmethod

from app.services.base import BaseService
from app.schemas.market import PriceBar, PriceHistory
from app.schemas.indicators import IndicatorReport


class IndicatorServiceInterface(BaseService[PriceHistory, IndicatorReport]):
    """
    Indicator Engine Service Contract.

    INPUT: PriceHistory
        - bars: PriceBar list, oldest first, at least 200 bars

    OUTPUT: IndicatorReport
        - oscillators: RSI(14) + MACD(12, 26, 9) votes
        - movingAverages: SMA 20/50/200 crossover votes
        - summary: both groups combined
    """

    @property
    def name(self) -> str:
        return "IndicatorService"

    @abstractmethod
    async def execute(self, input_data: PriceHistory) -> IndicatorReport:
        """Calculate the signal report for a price history."""
        pass

    @abstractmethod
    def analyze(self, bars: list[PriceBar]) -> IndicatorReport:
        """
        Calculate the signal report for raw bars.

        Raises:
            ValidationError: bars out of timestamp order
            InsufficientDataError: fewer bars than the longest warm-up
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Indicator service is always healthy (pure computation)."""
        pass
