"""
Централизованный paywall: доступ по балансу кредитов, превью при отказе.
Decision (access) и truncation (preview) разделены; контракт через AccessRequest.
"""
from app.paywall.access import decide_access
from app.paywall.audit import record_decision
from app.paywall.models import (
    AccessDecision,
    AccessRequest,
    UserRecord,
    UserStore,
    resolve_request,
)
from app.paywall.preview import build_preview, find_cutoff
from app.paywall.storage import get_storage_content, get_user_content
from app.paywall.transport import (
    apply_paywall_headers,
    build_streaming_response,
    build_text_response,
)

__all__ = [
    "AccessDecision",
    "AccessRequest",
    "UserRecord",
    "UserStore",
    "apply_paywall_headers",
    "build_preview",
    "build_streaming_response",
    "build_text_response",
    "decide_access",
    "find_cutoff",
    "get_storage_content",
    "get_user_content",
    "record_decision",
    "resolve_request",
]
