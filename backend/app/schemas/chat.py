"""
CONTRACT 4: Language-Model Chat

Input: ChatRequest / ImageAnalysisRequest
Output: ChatResponse

Chart analysis and follow-up chat through the OpenRouter gateway.
"""

from enum import Enum
from typing import Optional, Union
from pydantic import BaseModel, Field


class ChatRole(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    """Single chat turn."""

    role: ChatRole
    content: str


class ModelInfo(BaseModel):
    """Entry in the model catalog shown to users."""

    id: str
    name: str
    description: str
    premium: bool
    credit_cost: float = Field(..., alias="creditCost")
    beta: bool = False

    class Config:
        populate_by_name = True


# =============================================================================
# INPUT
# =============================================================================


class ChatRequest(BaseModel):
    """
    Chat message(s) to forward to the model.

    A plain string is treated as a single user question and gets the
    formatted-summary system prompt; a list is forwarded as a conversation.
    """

    model_id: Optional[str] = Field(default=None, alias="modelId")
    messages: Union[str, list[ChatMessage]]
    analysis_type: str = Field(default="Technical", alias="analysisType")
    chart_analysis: Optional[str] = Field(default=None, alias="chartAnalysis")

    class Config:
        populate_by_name = True


class ImageAnalysisRequest(BaseModel):
    """Chart image (URL or data URL) to analyze."""

    model_id: Optional[str] = Field(default=None, alias="modelId")
    image: str = Field(..., min_length=1, description="Image URL or base64 data URL")
    prompt: Optional[str] = None

    class Config:
        populate_by_name = True


class CostEstimateRequest(BaseModel):
    """Credit cost estimate for a model call."""

    model_id: Optional[str] = Field(default=None, alias="modelId")
    is_analysis: bool = Field(default=False, alias="isAnalysis")
    input_tokens: Optional[int] = Field(default=None, ge=0, alias="inputTokens")
    output_tokens: Optional[int] = Field(default=None, ge=0, alias="outputTokens")

    class Config:
        populate_by_name = True


# =============================================================================
# OUTPUT
# =============================================================================


class CostEstimate(BaseModel):
    model: str
    input_tokens: int = Field(..., alias="inputTokens")
    output_tokens: int = Field(..., alias="outputTokens")
    cost: int = Field(..., ge=0, description="App credits")

    class Config:
        populate_by_name = True


class ChatResponse(BaseModel):
    """Model reply with usage and the credits it costs."""

    content: str
    model: str
    usage: dict = Field(default_factory=dict)
    cost: int = Field(..., ge=0, description="App credits")
