"""
Provider price table and credit cost calculation (display estimates only).
"""
from app.pricing.calculator import (
    calculate_credit_cost,
    format_pricing_display,
    get_cost_per_word,
    get_words_per_dollar,
)
from app.pricing.models import LLMProvider, PricingTier
from app.pricing.providers import LLM_PROVIDERS

__all__ = [
    "LLMProvider",
    "LLM_PROVIDERS",
    "PricingTier",
    "calculate_credit_cost",
    "format_pricing_display",
    "get_cost_per_word",
    "get_words_per_dollar",
]
