"""
Chat API Endpoints

Model catalog, credit cost estimates, chat and chart-image analysis.
"""

import logging

from fastapi import APIRouter, HTTPException

from app.core.config import settings
from app.schemas.chat import (
    ChatRequest,
    ChatResponse,
    CostEstimate,
    CostEstimateRequest,
    ImageAnalysisRequest,
    ModelInfo,
)
from app.services.base import ConfigurationError, ExternalAPIError
from app.services.llm import get_chat_service
from app.services.llm.models import AVAILABLE_MODELS, calculate_cost, estimate_cost

logger = logging.getLogger(__name__)

router = APIRouter()


def _raise_for_llm_error(e: Exception) -> None:
    if isinstance(e, ConfigurationError):
        raise HTTPException(status_code=503, detail=e.message)
    if isinstance(e, ExternalAPIError):
        raise HTTPException(status_code=502, detail=e.message)
    raise e


@router.get("/models", response_model=list[ModelInfo])
async def list_models():
    """Models available for analysis and chat."""
    return AVAILABLE_MODELS


@router.post("/cost", response_model=CostEstimate)
async def get_cost_estimate(request: CostEstimateRequest):
    """
    Credit cost of a model call.

    With explicit token counts the cost is exact; otherwise the typical
    analysis or chat token counts are used.
    """
    model_id = request.model_id or settings.llm_default_model

    if request.input_tokens is not None and request.output_tokens is not None:
        return CostEstimate(
            model=model_id,
            input_tokens=request.input_tokens,
            output_tokens=request.output_tokens,
            cost=calculate_cost(model_id, request.input_tokens, request.output_tokens),
        )

    return estimate_cost(model_id, is_analysis=request.is_analysis)


@router.post("/messages", response_model=ChatResponse)
async def send_chat_message(request: ChatRequest):
    """Send a chat message or conversation to the model."""
    chat_service = get_chat_service()
    try:
        return await chat_service.execute(request)
    except (ConfigurationError, ExternalAPIError) as e:
        _raise_for_llm_error(e)


@router.post("/analyze-image", response_model=ChatResponse)
async def analyze_chart_image(request: ImageAnalysisRequest):
    """Analyze a chart image (URL or base64 data URL)."""
    chat_service = get_chat_service()
    try:
        return await chat_service.analyze_image(request)
    except (ConfigurationError, ExternalAPIError) as e:
        _raise_for_llm_error(e)
