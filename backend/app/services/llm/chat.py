"""
Chat Service

Chart-image analysis and follow-up chat through the LLM gateway.
The model interprets; indicator math stays in the Indicator Engine.
"""

import logging
from typing import Optional

from app.schemas.chat import (
    ChatRequest,
    ChatResponse,
    ChatRole,
    ImageAnalysisRequest,
)
from app.services.base import BaseService
from app.services.llm.client import LLMResponse, OpenRouterClient, get_llm_client
from app.services.llm.models import calculate_cost, estimate_cost
from app.services.llm.prompts import (
    CHART_ANALYSIS_DEFAULT_INSTRUCTION,
    CHART_ANALYSIS_SYSTEM_PROMPT,
    CHAT_SUMMARY_SYSTEM_PROMPT,
    CHAT_SYSTEM_PROMPT,
    format_chart_context,
)

logger = logging.getLogger(__name__)


def build_chat_messages(request: ChatRequest) -> list[dict]:
    """
    Messages to send for a chat request.

    A bare string gets the formatted-summary system prompt. A conversation
    gets the analyst system prompt unless it already carries one.
    """
    context = format_chart_context(request.chart_analysis)

    if isinstance(request.messages, str):
        system = CHAT_SUMMARY_SYSTEM_PROMPT.format(
            analysis_type=request.analysis_type,
            context=context,
        )
        return [
            {"role": ChatRole.SYSTEM.value, "content": system},
            {"role": ChatRole.USER.value, "content": request.messages},
        ]

    messages = [{"role": m.role.value, "content": m.content} for m in request.messages]
    if any(m["role"] == ChatRole.SYSTEM.value for m in messages):
        return messages

    system = CHAT_SYSTEM_PROMPT.format(context=context)
    return [{"role": ChatRole.SYSTEM.value, "content": system}, *messages]


def build_image_messages(request: ImageAnalysisRequest) -> list[dict]:
    """System prompt plus a multimodal user turn carrying the chart image."""
    return [
        {"role": ChatRole.SYSTEM.value, "content": CHART_ANALYSIS_SYSTEM_PROMPT},
        {
            "role": ChatRole.USER.value,
            "content": [
                {"type": "text", "text": request.prompt or CHART_ANALYSIS_DEFAULT_INSTRUCTION},
                {"type": "image_url", "image_url": {"url": request.image}},
            ],
        },
    ]


class ChatService(BaseService[ChatRequest, ChatResponse]):
    """
    Chat Service.

    INPUT: ChatRequest (conversation or single question, optional chart analysis)
    OUTPUT: ChatResponse (reply, usage, credit cost)
    """

    def __init__(self, client: Optional[OpenRouterClient] = None):
        self._client = client or get_llm_client()

    @property
    def name(self) -> str:
        return "ChatService"

    async def execute(self, input_data: ChatRequest) -> ChatResponse:
        """Send a chat turn."""
        messages = build_chat_messages(input_data)
        response = await self._client.generate(messages, model=input_data.model_id)
        return self._to_chat_response(response, is_analysis=False)

    async def analyze_image(self, request: ImageAnalysisRequest) -> ChatResponse:
        """Analyze a chart image."""
        messages = build_image_messages(request)
        response = await self._client.generate(messages, model=request.model_id)
        return self._to_chat_response(response, is_analysis=True)

    def _to_chat_response(self, response: LLMResponse, is_analysis: bool) -> ChatResponse:
        prompt_tokens = response.usage.get("prompt_tokens")
        completion_tokens = response.usage.get("completion_tokens")

        # Bill actual usage when the gateway reports it, else the estimate
        if prompt_tokens is not None and completion_tokens is not None:
            cost = calculate_cost(response.model, prompt_tokens, completion_tokens)
        else:
            cost = estimate_cost(response.model, is_analysis=is_analysis).cost

        logger.info(
            f"{'Analysis' if is_analysis else 'Chat'} reply from {response.model}: "
            f"{len(response.content)} chars, {cost} credits"
        )
        return ChatResponse(
            content=response.content,
            model=response.model,
            usage=response.usage,
            cost=cost,
        )

    async def health_check(self) -> bool:
        return await self._client.health_check()


# Singleton instance
_service_instance: Optional[ChatService] = None


def get_chat_service() -> ChatService:
    """Get or create chat service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = ChatService()
    return _service_instance
