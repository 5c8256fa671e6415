"""
Credit cost from the provider price table. 1000 credits = $1.

Unknown provider or missing $100 tier resolves to zero cost: these numbers only
feed display estimates, never the access gate.
"""
from __future__ import annotations

import logging
import math
from fractions import Fraction
from typing import Mapping

from app.pricing.models import LLMProvider, PricingTier
from app.pricing.providers import LLM_PROVIDERS

logger = logging.getLogger(__name__)

# Largest tier gives the most granular per-word price
REFERENCE_TIER_PRICE = 100
CREDITS_PER_DOLLAR = 1000


def _reference_tier(provider_id: str, table: Mapping[str, LLMProvider]) -> PricingTier | None:
    provider = table.get(provider_id)
    if provider is None:
        logger.debug("pricing_unknown_provider: %s", provider_id)
        return None
    return provider.tier_for_price(REFERENCE_TIER_PRICE)


def get_cost_per_word(provider_id: str, table: Mapping[str, LLMProvider] = LLM_PROVIDERS) -> Fraction:
    """Dollars per word from the $100 tier; 0 if unknown."""
    tier = _reference_tier(provider_id, table)
    if tier is None:
        return Fraction(0)
    return Fraction(tier.price, tier.words)


def calculate_credit_cost(
    provider_id: str,
    word_count: int,
    table: Mapping[str, LLMProvider] = LLM_PROVIDERS,
) -> int:
    """Credits for `word_count` words: ceil(cost_per_word * words * 1000)."""
    cost_per_word = get_cost_per_word(provider_id, table)
    return math.ceil(cost_per_word * word_count * CREDITS_PER_DOLLAR)


def get_words_per_dollar(provider_id: str, table: Mapping[str, LLMProvider] = LLM_PROVIDERS) -> Fraction:
    tier = _reference_tier(provider_id, table)
    if tier is None:
        return Fraction(0)
    return Fraction(tier.words, tier.price)


def format_pricing_display(provider: LLMProvider, table: Mapping[str, LLMProvider] = LLM_PROVIDERS) -> str:
    """«1,154,250 words per $1» (up to 3 fraction digits)."""
    return f"{_format_number(get_words_per_dollar(provider.id, table))} words per $1"


def _format_number(value: Fraction) -> str:
    if value.denominator == 1:
        return f"{value.numerator:,}"
    text = f"{float(value):,.3f}".rstrip("0")
    return text.rstrip(".")
