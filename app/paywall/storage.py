"""
What to persist and what to show for a decision.
Storage never holds more than a denied user was shown, and never the lock message.
"""
from __future__ import annotations

from app.paywall.models import AccessDecision


def get_storage_content(decision: AccessDecision) -> str:
    """Preview body without the lock message for previews; full content otherwise."""
    if decision.is_preview:
        return decision.delivered_content.removesuffix(decision.lock_message).strip()
    return decision.delivered_content


def get_user_content(decision: AccessDecision) -> str:
    return decision.delivered_content
