"""
Token estimation: approximate token counts for pricing a request before it is fulfilled.
Heuristic only (4 characters per token), not a tokenizer.
"""
from __future__ import annotations

import math
import re
from typing import Any

from pydantic import BaseModel

from app.core.config import settings

CHARS_PER_TOKEN = 4

MATH_OUTPUT_MULTIPLIER = 3
MATH_OUTPUT_CAP = 1000
DEFAULT_OUTPUT_MULTIPLIER = 2
DEFAULT_OUTPUT_CAP = 800

# Truncation keeps a natural break only if it is past this share of the limit
NATURAL_BREAK_MIN_RATIO = 0.8

_MATH_KEYWORDS = (
    "solve", "equation", "calculate", "derivative", "integral", "limit",
    "matrix", "algebra", "geometry", "calculus", "statistics", "probability",
)
_MATH_PATTERN = re.compile(r"\b(" + "|".join(_MATH_KEYWORDS) + r")\b", re.IGNORECASE)


class TokenLimits(BaseModel):
    """Free-tier limits and credit tiers ({dollars: tokens})."""

    free_input_limit: int
    free_output_limit: int
    free_daily_limit: int
    credit_tiers: dict[int, int]

    model_config = {"frozen": True}


def get_token_limits() -> TokenLimits:
    return TokenLimits(
        free_input_limit=settings.token_free_input_limit,
        free_output_limit=settings.token_free_output_limit,
        free_daily_limit=settings.token_free_daily_limit,
        credit_tiers=settings.credit_tiers_map,
    )


def count_tokens(text: str | None) -> int:
    """Approximate token count: ceil(len / 4). None counts as empty."""
    if text is None:
        return 0
    return math.ceil(len(text) / CHARS_PER_TOKEN)


def is_math_problem(text: str | None) -> bool:
    """True if the text mentions a quantitative task keyword (whole word, any case)."""
    if not text:
        return False
    return _MATH_PATTERN.search(text) is not None


def estimate_output_tokens(input_text: str | None) -> int:
    """
    Projected output size for a request.

    Math-like inputs get longer explanations: 3x input capped at 1000,
    everything else 2x input capped at 800.
    """
    input_tokens = count_tokens(input_text)
    if is_math_problem(input_text):
        return min(input_tokens * MATH_OUTPUT_MULTIPLIER, MATH_OUTPUT_CAP)
    return min(input_tokens * DEFAULT_OUTPUT_MULTIPLIER, DEFAULT_OUTPUT_CAP)


def truncate_response(response: Any, max_tokens: int) -> str:
    """
    Cap text at max_tokens * 4 characters.

    Cuts after the later of the last period or newline when that break is past
    80% of the limit; otherwise hard-cuts at the limit.
    """
    text = response if isinstance(response, str) else ""
    target_length = max(max_tokens, 0) * CHARS_PER_TOKEN

    if len(text) <= target_length:
        return text

    truncated = text[:target_length]
    break_point = max(truncated.rfind("."), truncated.rfind("\n"))
    if break_point > target_length * NATURAL_BREAK_MIN_RATIO:
        return truncated[: break_point + 1]
    return truncated
