"""
API v1 Router

All API endpoints for the frontend.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import chart, chat, indicators

router = APIRouter()

# Include all endpoint routers
router.include_router(indicators.router, prefix="/technical-indicators", tags=["Technical Indicators"])
router.include_router(chart.router, prefix="/chart", tags=["Chart Images"])
router.include_router(chat.router, prefix="/chat", tags=["AI Chat"])
