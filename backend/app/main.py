"""
ChartSignal Backend - FastAPI Application

Main entry point for the backend API.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.api.v1 import router as api_v1_router
from app.services.chart import close_chart_service

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")
    if not settings.chart_img_api_key:
        logger.warning("CHART_IMG_API_KEY not set - chart proxy will return 500")
    if not settings.openrouter_api_key:
        logger.warning("OPENROUTER_API_KEY not set - chat endpoints will return 503")

    yield

    # Shutdown
    logger.info("Shutting down...")
    await close_chart_service()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    ChartSignal Market Analysis API

    ## Architecture
    - **Market Data**: Fetches price history from Yahoo Finance
    - **Indicator Engine**: RSI, MACD and SMA votes (pure Python/NumPy)
    - **Chart Proxy**: Chart snapshots from chart-img.com
    - **AI Chat**: Chart analysis and chat through OpenRouter

    ## Core Principles
    - Indicator signals are deterministic; no LLM involvement
    - API keys stay on the server
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_v1_router, prefix="/api/v1")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
    }


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "ChartSignal Backend API",
        "docs": "/docs",
        "health": "/health",
    }
