"""
DTO pricing: PricingTier (price in dollars -> words granted), LLMProvider (tiers + description).
"""
from __future__ import annotations

from pydantic import BaseModel, Field


class PricingTier(BaseModel):
    """One purchasable tier: pay `price` dollars, get `words` words."""

    price: int = Field(..., gt=0, description="Tier price in dollars")
    words: int = Field(..., gt=0, description="Words granted for the price")

    model_config = {"frozen": True}


class LLMProvider(BaseModel):
    """Provider entry of the price table: tiers ordered by price plus display metadata."""

    id: str
    name: str
    pricing: tuple[PricingTier, ...]
    merits: tuple[str, ...] = ()
    demerits: tuple[str, ...] = ()
    description: str = ""

    model_config = {"frozen": True}

    def tier_for_price(self, price: int) -> PricingTier | None:
        for tier in self.pricing:
            if tier.price == price:
                return tier
        return None
