"""
Model Catalog

Models offered to users and their per-call credit cost.
Costs are USD per 1,000 tokens; one USD buys TOKENS_PER_DOLLAR app credits.
"""

import math

from app.schemas.chat import CostEstimate, ModelInfo

TOKENS_PER_DOLLAR = 667
FALLBACK_COST_MODEL = "openai/gpt-4o-mini"

AVAILABLE_MODELS = [
    ModelInfo(
        id="openai/gpt-4o-2024-11-20",
        name="GPT-4o",
        description="Fast and efficient analysis",
        premium=True,
        credit_cost=1.25,
    ),
    ModelInfo(
        id="google/gemini-2.0-flash-001",
        name="Gemini 2.0 Flash",
        description="Rapid data processing capabilities",
        premium=True,
        credit_cost=0.5,
    ),
    ModelInfo(
        id="anthropic/claude-3.7-sonnet",
        name="Claude 3.7 Sonnet",
        description="Advanced reasoning and analysis",
        premium=True,
        credit_cost=1.5,
    ),
    ModelInfo(
        id="qwen/qwen2.5-vl-72b-instruct:free",
        name="Qwen 2.5 VL-72B",
        description="Advanced pattern recognition",
        premium=False,
        credit_cost=0.3,
    ),
    ModelInfo(
        id="google/gemini-2.0-pro-exp-02-05:free",
        name="Gemini 2.0 Pro",
        description="Comprehensive market insights",
        premium=False,
        credit_cost=0.3,
    ),
    ModelInfo(
        id="qwen/qwen-vl-plus:free",
        name="Qwen VL Plus",
        description="Enhanced visual and linguistic processing",
        premium=False,
        credit_cost=0.3,
    ),
    ModelInfo(
        id="deepseek/deepseek-chat:free",
        name="DeepSeek V3",
        description="Advanced reasoning and analysis",
        premium=False,
        credit_cost=0.3,
    ),
]

MODEL_BASE_COSTS = {
    "openai/gpt-4o-2024-11-20": {"input": 0.005, "output": 0.015},
    "openai/gpt-4o-mini": {"input": 0.005, "output": 0.015},
    "google/gemini-2.0-flash-001": {"input": 0.0025, "output": 0.0075},
    "anthropic/claude-3.7-sonnet": {"input": 0.008, "output": 0.024},
    "qwen/qwen2.5-vl-72b-instruct:free": {"input": 0.002, "output": 0.006},
    "google/gemini-2.0-pro-exp-02-05:free": {"input": 0.003, "output": 0.009},
    "qwen/qwen-vl-plus:free": {"input": 0.002, "output": 0.006},
    "deepseek/deepseek-chat:free": {"input": 0.002, "output": 0.006},
}

ESTIMATED_ANALYSIS_TOKENS = {"input": 1000, "output": 2000}
ESTIMATED_CHAT_TOKENS = {"input": 500, "output": 1000}


def get_model(model_id: str):
    """Catalog entry for a model id, or None."""
    return next((m for m in AVAILABLE_MODELS if m.id == model_id), None)


def get_model_costs(model_id: str) -> dict:
    """Base costs for a model; unknown models are priced as gpt-4o-mini."""
    return MODEL_BASE_COSTS.get(model_id, MODEL_BASE_COSTS[FALLBACK_COST_MODEL])


def calculate_cost(model_id: str, input_tokens: int, output_tokens: int) -> int:
    """App credits for a call, rounded up."""
    costs = get_model_costs(model_id)
    input_cost = (input_tokens / 1000) * costs["input"]
    output_cost = (output_tokens / 1000) * costs["output"]
    return math.ceil((input_cost + output_cost) * TOKENS_PER_DOLLAR)


def estimate_cost(model_id: str, is_analysis: bool = False) -> CostEstimate:
    """Credits for a typical analysis or chat call, from estimated token counts."""
    tokens = ESTIMATED_ANALYSIS_TOKENS if is_analysis else ESTIMATED_CHAT_TOKENS
    return CostEstimate(
        model=model_id,
        input_tokens=tokens["input"],
        output_tokens=tokens["output"],
        cost=calculate_cost(model_id, tokens["input"], tokens["output"]),
    )
