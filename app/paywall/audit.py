"""
Аудит решений paywall: record_decision вызывается для каждого решения (full и preview).
Append-only structured log record; safe to emit from concurrent requests.
"""
from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def _byte_length(text: str) -> int:
    return len(text.encode("utf-8"))


def record_decision(
    *,
    authenticated: bool,
    endpoint: str,
    is_preview: bool,
    preview_percent: int,
    original_content: str,
    delivered_content: str,
    reason: str,
    user_id: str | None = None,
    credit_balance: int = 0,
    estimated_cost: int | None = None,
) -> None:
    """
    Записать решение доступа для аудита.
    credit_balance is 0 when the requester is anonymous or the balance is absent.
    """
    logger.info(
        "paywall_decision",
        extra={
            "authenticated": authenticated,
            "user_id": user_id,
            "endpoint": endpoint,
            "is_preview": is_preview,
            "preview_percent": preview_percent,
            "original_bytes": _byte_length(original_content),
            "delivered_bytes": _byte_length(delivered_content),
            "reason": reason,
            "credit_balance": credit_balance,
            "estimated_cost": estimated_cost,
        },
    )
