"""
Decision: decide_access(request) -> AccessDecision.
Fail-closed: missing identity, an indeterminate balance or an unreadable cost estimate
lead to preview before the numeric comparison is even attempted.
Guards are evaluated in order; first hit wins.
"""
from __future__ import annotations

import logging
from typing import Callable, NamedTuple

from app.paywall.audit import record_decision
from app.paywall.config import (
    ACCESS_FULL,
    ACCESS_PREVIEW,
    FULL_PERCENT,
    HEADER_ACCESS_LEVEL,
    HEADER_LOCK_REASON,
    HEADER_PREVIEW,
    HEADER_PREVIEW_PERCENT,
    LOCK_MESSAGE,
    PREVIEW_PERCENT,
    REASON_BALANCE_UNAVAILABLE,
    REASON_COST_UNAVAILABLE,
    REASON_INSUFFICIENT,
    REASON_NO_USER,
)
from app.paywall.models import AccessDecision, AccessRequest
from app.paywall.preview import build_preview
from app.utils.metrics import observe_decision

logger = logging.getLogger(__name__)


class _Guard(NamedTuple):
    code: str
    check: Callable[[AccessRequest], str | None]


def _no_identity(request: AccessRequest) -> str | None:
    if not request.user_id or request.user is None:
        return REASON_NO_USER
    return None


def _balance_unavailable(request: AccessRequest) -> str | None:
    if request.credit_balance is None:
        return REASON_BALANCE_UNAVAILABLE
    return None


def _cost_unavailable(request: AccessRequest) -> str | None:
    if request.estimated_cost is None:
        return REASON_COST_UNAVAILABLE
    return None


def _insufficient_credits(request: AccessRequest) -> str | None:
    balance = request.credit_balance
    cost = request.estimated_cost
    if balance < cost:
        return REASON_INSUFFICIENT.format(cost=cost, balance=balance)
    return None


# Order matters: earlier guards mask later ones
GUARDS: tuple[_Guard, ...] = (
    _Guard("unauthenticated", _no_identity),
    _Guard("balance_unavailable", _balance_unavailable),
    _Guard("cost_unavailable", _cost_unavailable),
    _Guard("insufficient_credits", _insufficient_credits),
)


def decide_access(request: AccessRequest) -> AccessDecision:
    """
    Решает, отдавать ли полный контент или превью.

    - нет user_id / записи пользователя -> превью, "No user authentication"
    - баланс отсутствует (None, не 0) -> превью, "Token balance unavailable"
    - оценка токенов нечитаема -> превью, "Estimated cost unavailable"
    - баланс < ceil(estimated_tokens * 0.001) -> превью, "Insufficient credits (...)"
    - иначе -> полный контент без изменений
    """
    for guard in GUARDS:
        reason = guard.check(request)
        if reason:
            return _deny(request, reason, guard.code)
    return _grant(request)


def _grant(request: AccessRequest) -> AccessDecision:
    decision = AccessDecision(
        granted=True,
        is_preview=False,
        delivered_content=request.full_content,
        preview_percent=FULL_PERCENT,
        denial_reason="",
        lock_message="",
        original_length=len(request.full_content),
        response_metadata={
            HEADER_PREVIEW: "false",
            HEADER_PREVIEW_PERCENT: str(FULL_PERCENT),
            HEADER_ACCESS_LEVEL: ACCESS_FULL,
        },
    )
    _audit(request, decision, reason_code=None)
    return decision


def _deny(request: AccessRequest, reason: str, reason_code: str) -> AccessDecision:
    preview = build_preview(request.full_content, PREVIEW_PERCENT)
    decision = AccessDecision(
        granted=False,
        is_preview=True,
        delivered_content=preview + LOCK_MESSAGE,
        preview_percent=PREVIEW_PERCENT,
        denial_reason=reason,
        lock_message=LOCK_MESSAGE,
        original_length=len(request.full_content),
        response_metadata={
            HEADER_PREVIEW: "true",
            HEADER_PREVIEW_PERCENT: str(PREVIEW_PERCENT),
            HEADER_ACCESS_LEVEL: ACCESS_PREVIEW,
            HEADER_LOCK_REASON: reason,
        },
    )
    _audit(request, decision, reason_code=reason_code)
    return decision


def _audit(request: AccessRequest, decision: AccessDecision, reason_code: str | None) -> None:
    authenticated = bool(request.user_id) and request.user is not None
    record_decision(
        authenticated=authenticated,
        user_id=request.user_id,
        endpoint=request.endpoint,
        is_preview=decision.is_preview,
        preview_percent=decision.preview_percent,
        original_content=request.full_content,
        delivered_content=decision.delivered_content,
        reason=decision.denial_reason,
        credit_balance=(request.credit_balance or 0) if authenticated else 0,
        estimated_cost=request.estimated_cost,
    )
    observe_decision(
        endpoint=request.endpoint,
        access_level=decision.access_level,
        delivered_bytes=len(decision.delivered_content.encode("utf-8")),
        reason_code=reason_code,
    )
