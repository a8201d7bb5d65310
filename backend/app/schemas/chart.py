"""
CONTRACT 3: Chart Image

Input: ChartRequest
Output: ChartImage (raw image bytes + content type)

TradingView-style chart snapshots rendered by chart-img.com.
"""

from dataclasses import dataclass
from pydantic import BaseModel, Field


class ChartRequest(BaseModel):
    """Chart snapshot parameters forwarded to the chart renderer."""

    symbol: str = Field(default="EURUSD", min_length=1)
    interval: str = Field(default="4h", min_length=1)
    theme: str = Field(default="dark", description="dark / light")
    height: int = Field(default=300, ge=100, le=2000)
    studies: list[str] = Field(default_factory=list, description="TradingView study names, e.g. 'RSI'")


@dataclass
class ChartImage:
    """Rendered chart returned by the renderer."""

    content: bytes
    content_type: str
