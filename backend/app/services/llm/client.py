"""
LLM Client

OpenRouter gateway client. OpenRouter speaks the OpenAI chat-completions
protocol, so the OpenAI SDK is pointed at its base URL.
"""

from dataclasses import dataclass
from typing import Optional
import logging

import openai

from app.services.base import ConfigurationError, ExternalAPIError

logger = logging.getLogger(__name__)

SERVICE_NAME = "OpenRouterClient"


@dataclass
class LLMConfig:
    """Configuration for LLM client."""

    api_key: Optional[str]
    base_url: str = "https://openrouter.ai/api/v1"
    app_title: str = "AI Market Analyst"
    default_model: str = "openai/gpt-4o-mini"
    max_tokens: int = 4000
    temperature: float = 0.7


@dataclass
class LLMResponse:
    """Response from LLM."""

    content: str
    model: str
    usage: dict


class OpenRouterClient:
    """OpenRouter client implementation."""

    def __init__(self, config: LLMConfig):
        self.config = config
        self._client: Optional[openai.AsyncOpenAI] = None

    def _get_client(self) -> openai.AsyncOpenAI:
        """Lazy initialization of the OpenAI SDK client."""
        if not self.config.api_key:
            raise ConfigurationError(SERVICE_NAME, "OpenRouter API key is not configured")
        if self._client is None:
            self._client = openai.AsyncOpenAI(
                api_key=self.config.api_key,
                base_url=self.config.base_url,
                default_headers={"X-Title": self.config.app_title},
            )
        return self._client

    async def generate(
        self,
        messages: list[dict],
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> LLMResponse:
        """Send a chat-completions request and return the first choice."""
        client = self._get_client()
        model = model or self.config.default_model

        temp = temperature if temperature is not None else self.config.temperature
        tokens = max_tokens if max_tokens is not None else self.config.max_tokens

        logger.info(f"OpenRouter request: model={model}, messages={len(messages)}")

        try:
            response = await client.chat.completions.create(
                model=model,
                messages=messages,
                temperature=temp,
                max_tokens=tokens,
            )
        except openai.APIStatusError as e:
            logger.error(f"OpenRouter API error ({e.status_code}): {e.message}")
            raise ExternalAPIError(
                SERVICE_NAME,
                e.message,
                {"model": model},
                status_code=e.status_code,
            ) from e
        except openai.OpenAIError as e:
            logger.error(f"OpenRouter request failed: {e}")
            raise ExternalAPIError(SERVICE_NAME, str(e), {"model": model}) from e

        if not response.choices or response.choices[0].message.content is None:
            raise ExternalAPIError(SERVICE_NAME, "Empty response from model", {"model": model})

        usage = {}
        if response.usage is not None:
            usage = {
                "prompt_tokens": response.usage.prompt_tokens,
                "completion_tokens": response.usage.completion_tokens,
                "total_tokens": response.usage.total_tokens,
            }

        return LLMResponse(
            content=response.choices[0].message.content,
            model=response.model or model,
            usage=usage,
        )

    async def health_check(self) -> bool:
        """Check OpenRouter connectivity by listing models."""
        try:
            client = self._get_client()
            await client.models.list()
            return True
        except Exception as e:
            logger.error(f"OpenRouter health check failed: {e}")
            return False


# Singleton instance management
_llm_client: Optional[OpenRouterClient] = None


def get_llm_client() -> OpenRouterClient:
    """Get or create LLM client singleton."""
    global _llm_client
    if _llm_client is None:
        from app.core.config import settings

        config = LLMConfig(
            api_key=settings.openrouter_api_key,
            base_url=settings.openrouter_base_url,
            app_title=settings.openrouter_app_title,
            default_model=settings.llm_default_model,
            max_tokens=settings.llm_max_tokens,
            temperature=settings.llm_temperature,
        )
        _llm_client = OpenRouterClient(config)
    return _llm_client
