"""
Preview truncation: cut full content down to ~30% at a natural text boundary.
Deterministic; the boundary constants are part of the contract (see app.paywall.config).
"""
from __future__ import annotations

from app.paywall.config import (
    NEAR_END_MARGIN,
    PREVIEW_PERCENT,
    SENTENCE_MIN_BEFORE_TARGET,
    SENTENCE_MIN_FROM_END,
    SENTENCE_SEARCH_AHEAD,
    SENTENCE_TERMINATORS,
    WORD_SEARCH_BACK,
)


def target_length(length: int, percent: int = PREVIEW_PERCENT) -> int:
    """ceil(length * percent / 100)"""
    return -(-length * percent // 100)


def find_cutoff(content: str, target: int) -> int:
    """
    Index to cut `content` at for a preview aiming at `target` characters.

    1. Latest '.', '?' or '!' at index <= target + 100; accepted only if it lies
       strictly between target - 100 and len - 50, cutting just after it.
    2. Otherwise the target itself.
    3. If the cutoff lands within 10 characters of the end, the last space at
       index <= target is used instead, when it lies after target - 50.
    """
    length = len(content)
    cutoff = target

    window_end = target + SENTENCE_SEARCH_AHEAD + 1
    natural_break = max(content.rfind(ch, 0, window_end) for ch in SENTENCE_TERMINATORS)
    if target - SENTENCE_MIN_BEFORE_TARGET < natural_break < length - SENTENCE_MIN_FROM_END:
        cutoff = natural_break + 1

    if cutoff >= length - NEAR_END_MARGIN:
        last_space = content.rfind(" ", 0, target + 1)
        if last_space != -1 and last_space > target - WORD_SEARCH_BACK:
            cutoff = last_space

    return cutoff


def build_preview(content: str, percent: int = PREVIEW_PERCENT) -> str:
    """Preview body (without lock message), trimmed."""
    cutoff = find_cutoff(content, target_length(len(content), percent))
    return content[:cutoff].strip()
