"""
DTO paywall: UserRecord (from the user store), AccessRequest (input of decide_access),
AccessDecision (output). UserStore is the protocol of the external user store.
"""
from __future__ import annotations

import math
from typing import Any, Protocol

from pydantic import BaseModel, Field, field_validator, model_validator

from app.paywall.config import FULL_PERCENT, PREVIEW_PERCENT, TOKENS_PER_CREDIT


# ----- Запись пользователя из внешнего хранилища -----


class UserRecord(BaseModel):
    """Resolved user. credit_balance=None means the balance is absent (not zero)."""

    user_id: str
    credit_balance: int | None = None

    model_config = {"frozen": True}


class UserStore(Protocol):
    def get_user(self, user_id: str) -> UserRecord | None:
        """None if no record exists for the id."""
        ...


# ----- Вход для decide_access -----


class AccessRequest(BaseModel):
    """Single input contract for decide_access. Constructed per request, never persisted."""

    user_id: str | None = None
    user: UserRecord | None = None
    full_content: str = ""
    # Upstream estimate of tokens for this request; None = unreadable (indeterminate cost)
    estimated_tokens: int | None = None
    endpoint: str = "unknown"

    model_config = {"frozen": True}

    @field_validator("user_id", mode="before")
    @classmethod
    def _empty_user_id_is_absent(cls, v: Any) -> str | None:
        if v is None or v == "":
            return None
        return str(v)

    @field_validator("full_content", mode="before")
    @classmethod
    def _coerce_content(cls, v: Any) -> str:
        return v if isinstance(v, str) else ""

    @field_validator("estimated_tokens", mode="before")
    @classmethod
    def _parse_tokens(cls, v: Any) -> int | None:
        if v is None or isinstance(v, bool):
            return None
        try:
            tokens = v if isinstance(v, int) else math.ceil(float(v))
        except (TypeError, ValueError, OverflowError):
            return None
        return tokens if tokens >= 0 else None

    @property
    def credit_balance(self) -> int | None:
        return self.user.credit_balance if self.user is not None else None

    @property
    def estimated_cost(self) -> int | None:
        """Credits needed: ceil(estimated_tokens * 0.001). None when the estimate is unreadable."""
        if self.estimated_tokens is None:
            return None
        return -(-self.estimated_tokens // TOKENS_PER_CREDIT)


def resolve_request(
    store: UserStore,
    user_id: str | None,
    full_content: Any,
    estimated_tokens: Any,
    endpoint: str,
) -> AccessRequest:
    """Build an AccessRequest, resolving the user through the store when an id is present."""
    user = store.get_user(user_id) if user_id else None
    return AccessRequest(
        user_id=user_id,
        user=user,
        full_content=full_content,
        estimated_tokens=estimated_tokens,
        endpoint=endpoint,
    )


# ----- Решение доступа -----


class AccessDecision(BaseModel):
    """Result of decide_access: what to deliver and the response metadata."""

    granted: bool = Field(..., description="True = full content delivered")
    is_preview: bool = Field(..., description="True = truncated preview with lock message")
    delivered_content: str = Field(..., description="Content for the user (preview includes lock message)")
    preview_percent: int = Field(..., description="30 for preview, 100 for full")
    denial_reason: str = Field("", description="Empty when granted")
    lock_message: str = Field("", description="Appended notice; empty when granted")
    original_length: int = Field(0, description="Length of the full content in characters")
    response_metadata: dict[str, str] = Field(
        default_factory=dict,
        description="X-Preview / X-Preview-Percent / X-Access-Level / X-Lock-Reason",
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_invariants(self) -> AccessDecision:
        if self.granted == self.is_preview:
            raise ValueError("granted must be the negation of is_preview")
        if self.is_preview:
            if self.preview_percent != PREVIEW_PERCENT or not self.denial_reason:
                raise ValueError("preview requires preview_percent=30 and a denial reason")
        elif self.preview_percent != FULL_PERCENT or self.denial_reason or self.lock_message:
            raise ValueError("full access requires preview_percent=100 and no denial reason or lock message")
        return self

    @property
    def access_level(self) -> str:
        return "preview" if self.is_preview else "full"
