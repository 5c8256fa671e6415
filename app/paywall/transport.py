"""
Response transport: attach the decision to HTTP responses.
Plain and streaming responses carry the same paywall headers.
"""
from __future__ import annotations

from typing import Iterator

from fastapi import Response
from fastapi.responses import PlainTextResponse, StreamingResponse

from app.paywall.models import AccessDecision
from app.paywall.storage import get_user_content

DEFAULT_CHUNK_SIZE = 256


def apply_paywall_headers(response: Response, decision: AccessDecision) -> Response:
    for name, value in decision.response_metadata.items():
        response.headers[name] = value
    return response


def build_text_response(decision: AccessDecision, status_code: int = 200) -> PlainTextResponse:
    return PlainTextResponse(
        content=get_user_content(decision),
        status_code=status_code,
        headers=dict(decision.response_metadata),
    )


def iter_content_chunks(decision: AccessDecision, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[str]:
    """Yield the user content in chunks; never more than the decision delivers."""
    content = get_user_content(decision)
    size = max(chunk_size, 1)
    for start in range(0, len(content), size):
        yield content[start:start + size]


def build_streaming_response(
    decision: AccessDecision,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    media_type: str = "text/plain; charset=utf-8",
) -> StreamingResponse:
    return StreamingResponse(
        iter_content_chunks(decision, chunk_size),
        media_type=media_type,
        headers=dict(decision.response_metadata),
    )
