"""
Pricing catalogue (read-only): providers, per-word credit estimates, free-tier limits.
"""
import logging

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel

from app.pricing.calculator import calculate_credit_cost, format_pricing_display
from app.pricing.config import get_default_provider
from app.pricing.models import LLMProvider
from app.pricing.providers import LLM_PROVIDERS
from app.utils.tokens import TokenLimits, get_token_limits

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pricing", tags=["pricing"])


class ProviderOut(BaseModel):
    provider: LLMProvider
    words_per_dollar: str


class PricingCatalogOut(BaseModel):
    default_provider: str
    providers: list[ProviderOut]
    token_limits: TokenLimits


class CreditEstimateOut(BaseModel):
    provider_id: str
    word_count: int
    credits: int


def _ordered_providers() -> list[LLMProvider]:
    default_id = get_default_provider()
    providers = list(LLM_PROVIDERS.values())
    return sorted(providers, key=lambda p: p.id != default_id)


@router.get("", response_model=PricingCatalogOut)
def get_catalog() -> PricingCatalogOut:
    return PricingCatalogOut(
        default_provider=get_default_provider(),
        providers=[
            ProviderOut(provider=p, words_per_dollar=format_pricing_display(p))
            for p in _ordered_providers()
        ],
        token_limits=get_token_limits(),
    )


@router.get("/{provider_id}/estimate", response_model=CreditEstimateOut)
def estimate_credits(provider_id: str, words: int = Query(..., ge=0)) -> CreditEstimateOut:
    if provider_id not in LLM_PROVIDERS:
        logger.info("pricing_unknown_provider: %s", provider_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Provider not found")
    return CreditEstimateOut(
        provider_id=provider_id,
        word_count=words,
        credits=calculate_credit_cost(provider_id, words),
    )
