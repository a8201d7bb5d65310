"""
CONTRACT 2: Indicator Engine

Input: PriceHistory (or a caller-supplied list of PriceBar)
Output: IndicatorReport

Buy/sell/neutral tallies for the oscillator group (RSI, MACD), the
moving-average group (SMA 20/50/200 crossovers) and their combined summary.
Pure Python/NumPy - NO LLM involvement.
"""

from enum import Enum
from pydantic import BaseModel, Field

from app.schemas.market import PriceBar


# =============================================================================
# ENUMS
# =============================================================================


class Signal(str, Enum):
    BUY = "buy"
    SELL = "sell"
    NEUTRAL = "neutral"


# =============================================================================
# INPUT: AnalyzeRequest
# =============================================================================


class AnalyzeRequest(BaseModel):
    """Caller-supplied price history, oldest bar first."""

    bars: list[PriceBar] = Field(..., min_length=1)


# =============================================================================
# OUTPUT: IndicatorReport
# =============================================================================


class SignalVote(BaseModel):
    """Tally of sub-indicator votes with the resolved majority signal."""

    buy: int = Field(..., ge=0)
    sell: int = Field(..., ge=0)
    neutral: int = Field(..., ge=0)
    signal: Signal

    @classmethod
    def from_counts(cls, buy: int, sell: int, neutral: int) -> "SignalVote":
        """Build a vote; buy or sell wins only when it strictly exceeds both other counts."""
        if buy > sell and buy > neutral:
            signal = Signal.BUY
        elif sell > buy and sell > neutral:
            signal = Signal.SELL
        else:
            signal = Signal.NEUTRAL
        return cls(buy=buy, sell=sell, neutral=neutral, signal=signal)

    @property
    def total(self) -> int:
        return self.buy + self.sell + self.neutral


class IndicatorReport(BaseModel):
    """
    Complete signal summary for one price history.
    Returned by: Indicator Service
    Consumed by: Frontend technical gauge
    """

    oscillators: SignalVote
    summary: SignalVote
    moving_averages: SignalVote = Field(..., alias="movingAverages")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "oscillators": {"buy": 1, "sell": 0, "neutral": 1, "signal": "neutral"},
                "summary": {"buy": 4, "sell": 0, "neutral": 1, "signal": "buy"},
                "movingAverages": {"buy": 3, "sell": 0, "neutral": 0, "signal": "buy"},
            }
        }
