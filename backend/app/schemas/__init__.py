"""
ChartSignal Schema Contracts

This module defines all JSON contracts between system components.
These are the authoritative interfaces - all modules must conform to these schemas.
"""

from app.schemas.market import (
    Interval,
    MarketDataRequest,
    PriceBar,
    PriceHistory,
)
from app.schemas.indicators import (
    AnalyzeRequest,
    IndicatorReport,
    Signal,
    SignalVote,
)
from app.schemas.chart import (
    ChartImage,
    ChartRequest,
)
from app.schemas.chat import (
    ChatMessage,
    ChatRequest,
    ChatResponse,
    ChatRole,
    CostEstimate,
    CostEstimateRequest,
    ImageAnalysisRequest,
    ModelInfo,
)

__all__ = [
    # Market
    "Interval",
    "MarketDataRequest",
    "PriceBar",
    "PriceHistory",
    # Indicators
    "AnalyzeRequest",
    "IndicatorReport",
    "Signal",
    "SignalVote",
    # Chart
    "ChartImage",
    "ChartRequest",
    # Chat
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "ChatRole",
    "CostEstimate",
    "CostEstimateRequest",
    "ImageAnalysisRequest",
    "ModelInfo",
]
