"""
LLM Chat Service

CONTRACT:
    Chat:
        Input:  ChatRequest
        Output: ChatResponse

    Chart analysis:
        Input:  ImageAnalysisRequest
        Output: ChatResponse

RESPONSIBILITIES:
    - Forward chat and chart-image analysis to models via OpenRouter
    - Add the analyst system prompts
    - Price each call in app credits (model catalog + base costs)

CRITICAL RULES:
    - LLM does NO indicator math - the Indicator Engine does
    - Missing API key disables LLM features; the rest of the API keeps working
"""

from app.services.llm.client import (
    LLMConfig,
    LLMResponse,
    OpenRouterClient,
    get_llm_client,
)
from app.services.llm.chat import ChatService, get_chat_service
from app.services.llm.models import (
    AVAILABLE_MODELS,
    calculate_cost,
    estimate_cost,
)

__all__ = [
    # Client
    "LLMConfig",
    "LLMResponse",
    "OpenRouterClient",
    "get_llm_client",
    # Services
    "ChatService",
    "get_chat_service",
    # Catalog
    "AVAILABLE_MODELS",
    "calculate_cost",
    "estimate_cost",
]
