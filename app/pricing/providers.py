"""
Static provider price table. Built once at import, exposed read-only.
Tiers: $5 / $10 / $25 / $50 / $100.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from app.pricing.models import LLMProvider, PricingTier


def _tiers(*pairs: tuple[int, int]) -> tuple[PricingTier, ...]:
    return tuple(PricingTier(price=price, words=words) for price, words in pairs)


_PROVIDERS = (
    LLMProvider(
        id="anthropic",
        name="ZHI 1 (Anthropic Claude)",
        pricing=_tiers(
            (5, 4_275_000),
            (10, 8_977_500),
            (25, 23_512_500),
            (50, 51_300_000),
            (100, 115_425_000),
        ),
        merits=(
            "Fast, cheap, widely compatible",
            "Good balance of creativity + accuracy",
            "Reliable at short/medium rewrites and commercial text",
        ),
        demerits=(
            "Struggles with very dense scholarly material (drops nuance)",
            'More "AI-detected" feel in raw outputs (less human signal)',
            "Occasionally hallucinates stylistic quirks",
        ),
        description="Fast and cost-effective with good balance for general academic use",
    ),
    LLMProvider(
        id="openai",
        name="ZHI 2 (OpenAI GPT)",
        pricing=_tiers(
            (5, 106_840),
            (10, 224_360),
            (25, 587_625),
            (50, 1_282_100),
            (100, 2_883_400),
        ),
        merits=(
            'Excellent on scholarly, philosophical, and "thinking-through" tasks',
            "Strong at staying consistent in long rewrites",
            'More "polished" tone, good for academic-sounding prose',
        ),
        demerits=(
            "By far the most expensive",
            "Sometimes cautious / verbose, especially when asked for edgy or non-academic rewrites",
            'Can "over-summarize" instead of fully transforming',
        ),
        description="Premium quality for complex academic and philosophical work",
    ),
    LLMProvider(
        id="deepseek",
        name="ZHI 3 (DeepSeek)",
        pricing=_tiers(
            (5, 702_000),
            (10, 1_474_200),
            (25, 3_861_000),
            (50, 8_424_000),
            (100, 18_954_000),
        ),
        merits=(
            "Cheapest by far",
            "Handles bulk text rewriting and simple transformations well",
            "Decent logical coherence, especially for structured rewriting",
        ),
        demerits=(
            "Noticeably slower than the others",
            "Less nuanced on subtle philosophy/literature than Anthropic",
            "Output can feel mechanical if pushed beyond bulk processing",
        ),
        description="Budget-friendly option ideal for bulk processing and simple tasks",
    ),
    LLMProvider(
        id="perplexity",
        name="ZHI 4 (Perplexity)",
        pricing=_tiers(
            (5, 6_410_255),
            (10, 13_461_530),
            (25, 35_256_400),
            (50, 76_923_050),
            (100, 173_176_900),
        ),
        merits=(
            "Very cheap for API calls (currently subsidized)",
            "Good for quick turnarounds, exploratory rewrites",
            "Sometimes surprisingly concise and pointed",
        ),
        demerits=(
            "Quality varies - can be shallow compared to Anthropic/OpenAI",
            "Weak on sustained long-form consistency",
            "Infrastructure less mature, risk of pricing changing abruptly",
        ),
        description="Highly cost-effective but with variable quality",
    ),
)

LLM_PROVIDERS: Mapping[str, LLMProvider] = MappingProxyType({p.id: p for p in _PROVIDERS})
