"""
Pricing config: typed wrapper over app.core.config for the pricing catalogue.
"""
from __future__ import annotations

from app.core.config import settings


def get_default_provider() -> str:
    return getattr(settings, "pricing_default_provider", "anthropic")
