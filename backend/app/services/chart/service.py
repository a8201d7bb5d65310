"""
Chart Image Service

Proxies TradingView-style chart snapshots from chart-img.com so the
API key stays on the server.
"""

import asyncio
import logging
from typing import Optional

import aiohttp

from app.core.config import settings
from app.schemas.chart import ChartImage, ChartRequest
from app.services.base import BaseService, ConfigurationError, ExternalAPIError

logger = logging.getLogger(__name__)

# Upstream error bodies are truncated before being returned to clients
ERROR_BODY_LIMIT = 200
USER_AGENT = "AI Market Analyzer"


class ChartImageService(BaseService[ChartRequest, ChartImage]):
    """
    Chart Image Service.

    INPUT: ChartRequest (symbol, interval, theme, height, studies)
    OUTPUT: ChartImage (PNG bytes + content type)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self._api_key = api_key if api_key is not None else settings.chart_img_api_key
        self._base_url = base_url or settings.chart_img_base_url
        self._timeout = timeout if timeout is not None else settings.chart_img_timeout
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def name(self) -> str:
        return "ChartImageService"

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure we have an active HTTP session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._timeout),
                headers={
                    "Accept": "image/png,image/*",
                    "User-Agent": USER_AGENT,
                },
            )
        return self._session

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()

    def build_params(self, request: ChartRequest) -> dict:
        """Query parameters for the chart renderer."""
        params = {
            "symbol": request.symbol,
            "interval": request.interval,
            "theme": request.theme,
            "height": str(request.height),
            "key": self._api_key,
        }
        if request.studies:
            params["studies"] = ",".join(request.studies)
        return params

    async def execute(self, input_data: ChartRequest) -> ChartImage:
        """Fetch a chart image."""
        if not self._api_key:
            raise ConfigurationError(self.name, "API key not configured")

        session = await self._ensure_session()
        params = self.build_params(input_data)

        try:
            async with session.get(self._base_url, params=params) as response:
                content_type = response.headers.get("Content-Type", "")

                if response.status >= 400:
                    body = await response.text()
                    logger.error(
                        f"chart-img returned {response.status} for {input_data.symbol}: "
                        f"{body[:ERROR_BODY_LIMIT]}"
                    )
                    raise ExternalAPIError(
                        self.name,
                        "Chart API request failed",
                        {"status": response.status, "response": body[:ERROR_BODY_LIMIT]},
                        status_code=response.status,
                    )

                if "image" not in content_type:
                    body = await response.text()
                    logger.error(f"chart-img returned non-image content type {content_type!r}")
                    raise ExternalAPIError(
                        self.name,
                        f"Expected image/* but received {content_type or 'no content type'}",
                        {"response": body[:ERROR_BODY_LIMIT]},
                    )

                content = await response.read()
        except aiohttp.ClientError as e:
            logger.error(f"chart-img request failed for {input_data.symbol}: {e}")
            raise ExternalAPIError(self.name, f"Failed to fetch image: {e}") from e
        except asyncio.TimeoutError as e:
            logger.error(f"chart-img timed out for {input_data.symbol} after {self._timeout}s")
            raise ExternalAPIError(
                self.name,
                "Chart API request timed out",
                {"timeout": self._timeout},
                status_code=504,
            ) from e

        logger.info(
            f"Chart {input_data.symbol} ({input_data.interval}): "
            f"{len(content)} bytes, {content_type}"
        )
        return ChartImage(content=content, content_type=content_type)

    async def health_check(self) -> bool:
        """Healthy when an API key is configured."""
        return bool(self._api_key)


# Singleton instance
_service_instance: Optional[ChartImageService] = None


def get_chart_service() -> ChartImageService:
    """Get or create chart image service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = ChartImageService()
    return _service_instance


async def close_chart_service() -> None:
    """Close the shared chart service session, if one was opened."""
    if _service_instance is not None:
        await _service_instance.close()
