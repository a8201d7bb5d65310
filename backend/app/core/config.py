"""
Application Configuration

All settings loaded from environment variables.
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "ChartSignal Backend"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS (Frontend URLs)
    allowed_origins: list[str] = [
        "https://aimarketanalyzer.netlify.app",
        "http://localhost:5173",
        "http://localhost:8888",
    ]

    # Market data (Yahoo Finance)
    market_data_timeout: float = 30.0

    # Chart image API (chart-img.com)
    chart_img_api_key: Optional[str] = None
    chart_img_base_url: str = "https://api.chart-img.com/v1/tradingview/advanced-chart"
    chart_img_timeout: float = 20.0

    # LLM gateway (OpenRouter)
    openrouter_api_key: Optional[str] = None
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    openrouter_app_title: str = "AI Market Analyst"
    llm_default_model: str = "openai/gpt-4o-mini"
    llm_max_tokens: int = 4000
    llm_temperature: float = 0.7

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
