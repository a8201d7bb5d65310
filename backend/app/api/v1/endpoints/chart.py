"""
Chart Image API Endpoints

Server-side proxy for chart-img.com snapshots.
"""

import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from app.schemas.chart import ChartRequest
from app.services.base import ConfigurationError, ExternalAPIError
from app.services.chart import get_chart_service

logger = logging.getLogger(__name__)

router = APIRouter()

CACHE_CONTROL = "public, max-age=300"


@router.post(
    "",
    response_class=Response,
    responses={200: {"content": {"image/png": {}}, "description": "Chart image"}},
)
async def get_chart_image(request: ChartRequest):
    """
    Render a chart snapshot.

    Upstream HTTP errors are passed through with their status code;
    a non-image response from the renderer is a 502.
    """
    chart_service = get_chart_service()
    try:
        image = await chart_service.execute(request)
    except ConfigurationError as e:
        raise HTTPException(status_code=500, detail=e.message)
    except ExternalAPIError as e:
        raise HTTPException(
            status_code=e.status_code or 502,
            detail={"error": e.message, **e.details},
        )

    return Response(
        content=image.content,
        media_type=image.content_type or "image/png",
        headers={"Cache-Control": CACHE_CONTROL},
    )
