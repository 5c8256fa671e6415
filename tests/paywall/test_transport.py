"""
Тесты транспорта: заголовки paywall на обычном и потоковом ответе.
"""
import unittest
from unittest.mock import patch

from fastapi import FastAPI, Response
from fastapi.testclient import TestClient

from app.paywall.access import decide_access
from app.paywall.models import AccessRequest, UserRecord
from app.paywall.transport import (
    apply_paywall_headers,
    build_streaming_response,
    build_text_response,
    iter_content_chunks,
)

CONTENT = "Step one. Step two. Step three. " * 40


def _preview_decision():
    with patch("app.paywall.access.observe_decision"):
        return decide_access(AccessRequest(full_content=CONTENT, estimated_tokens=10, endpoint="e"))


def _full_decision():
    with patch("app.paywall.access.observe_decision"):
        return decide_access(
            AccessRequest(
                user_id="u1",
                user=UserRecord(user_id="u1", credit_balance=1),
                full_content=CONTENT,
                estimated_tokens=10,
                endpoint="e",
            )
        )


class TestTransport(unittest.TestCase):
    def test_apply_headers(self):
        response = apply_paywall_headers(Response(), _preview_decision())
        self.assertEqual(response.headers["X-Preview"], "true")
        self.assertEqual(response.headers["X-Preview-Percent"], "30")
        self.assertEqual(response.headers["X-Access-Level"], "preview")
        self.assertEqual(response.headers["X-Lock-Reason"], "No user authentication")

    def test_text_response_full(self):
        decision = _full_decision()
        response = build_text_response(decision)
        self.assertEqual(response.body.decode("utf-8"), CONTENT)
        self.assertEqual(response.headers["X-Access-Level"], "full")
        self.assertNotIn("X-Lock-Reason", response.headers)

    def test_chunks_rebuild_user_content(self):
        decision = _preview_decision()
        chunks = list(iter_content_chunks(decision, chunk_size=50))
        self.assertTrue(all(len(c) <= 50 for c in chunks))
        self.assertEqual("".join(chunks), decision.delivered_content)

    def test_streaming_response_over_http(self):
        decision = _preview_decision()
        app = FastAPI()

        @app.get("/stream")
        def stream():
            return build_streaming_response(decision, chunk_size=64)

        with TestClient(app) as client:
            res = client.get("/stream")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.text, decision.delivered_content)
        self.assertEqual(res.headers["x-preview"], "true")
        self.assertEqual(res.headers["x-lock-reason"], "No user authentication")
