"""
Paywall constants. These form the response contract (headers, preview share, notice
text) and are intentionally not overridable from the environment.
"""
from __future__ import annotations

PREVIEW_PERCENT = 30
FULL_PERCENT = 100

# 1 credit per 1000 estimated tokens, rounded up
TOKENS_PER_CREDIT = 1000

# Sentence-boundary search around the target length
SENTENCE_SEARCH_AHEAD = 100
SENTENCE_MIN_BEFORE_TARGET = 100
SENTENCE_MIN_FROM_END = 50
# Cutoff this close to the end means the sentence search found nothing useful
NEAR_END_MARGIN = 10
WORD_SEARCH_BACK = 50

SENTENCE_TERMINATORS = (".", "?", "!")

LOCK_MESSAGE = (
    "\n\n🔒 **Complete solution available with credits.** "
    "Upgrade to see the full answer, detailed explanations, and step-by-step solutions."
)

HEADER_PREVIEW = "X-Preview"
HEADER_PREVIEW_PERCENT = "X-Preview-Percent"
HEADER_ACCESS_LEVEL = "X-Access-Level"
HEADER_LOCK_REASON = "X-Lock-Reason"

ACCESS_FULL = "full"
ACCESS_PREVIEW = "preview"

REASON_NO_USER = "No user authentication"
REASON_BALANCE_UNAVAILABLE = "Token balance unavailable"
REASON_COST_UNAVAILABLE = "Estimated cost unavailable"
REASON_INSUFFICIENT = "Insufficient credits (need {cost}, have {balance})"
