"""
Market Data Service Interface

Defines the contract for the market data layer.
"""

from abc import abstractmethod
from typing import Optional

from app.services.base import BaseService
from app.schemas.market import MarketDataRequest, PriceHistory


class MarketDataServiceInterface(BaseService[MarketDataRequest, Optional[PriceHistory]]):
    """
    Market Data Service Contract.

    INPUT: MarketDataRequest
        - symbol: ticker or forex pair
        - interval: bar interval (unsupported values fall back to 1d)

    OUTPUT: PriceHistory, or None when the provider has no data
        - bars: oldest first, strictly increasing timestamps
    """

    @property
    def name(self) -> str:
        return "MarketDataService"

    @abstractmethod
    async def execute(self, input_data: MarketDataRequest) -> Optional[PriceHistory]:
        """Fetch and normalize price history."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check connectivity to the data provider."""
        pass
