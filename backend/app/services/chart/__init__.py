"""
Chart Image Service

CONTRACT:
    Input:  ChartRequest
    Output: ChartImage

Server-side proxy to chart-img.com; keeps the API key out of the browser.
"""

from app.services.chart.service import (
    ChartImageService,
    close_chart_service,
    get_chart_service,
)

__all__ = [
    "ChartImageService",
    "close_chart_service",
    "get_chart_service",
]
