"""Tests for the HTTP surface: health, pricing catalogue, metrics."""
from fastapi.testclient import TestClient

from app.main import app

client = TestClient(app)


def test_health():
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


def test_ready():
    assert client.get("/ready").json() == {"status": "ready"}


def test_ready_fails_on_empty_price_table(monkeypatch):
    monkeypatch.setattr("app.api.routes.health.LLM_PROVIDERS", {})
    res = client.get("/ready")
    assert res.status_code == 503
    assert res.json()["status"] == "not_ready"


def test_pricing_catalog_default_first():
    res = client.get("/pricing")
    assert res.status_code == 200
    body = res.json()
    assert body["default_provider"] == body["providers"][0]["provider"]["id"]
    assert len(body["providers"]) == 4
    by_id = {p["provider"]["id"]: p for p in body["providers"]}
    assert by_id["anthropic"]["words_per_dollar"] == "1,154,250 words per $1"
    assert "free_output_limit" in body["token_limits"]


def test_pricing_estimate():
    res = client.get("/pricing/openai/estimate", params={"words": 1000})
    assert res.status_code == 200
    assert res.json() == {"provider_id": "openai", "word_count": 1000, "credits": 35}


def test_pricing_estimate_unknown_provider(caplog):
    with caplog.at_level("INFO", logger="app.api.routes.pricing"):
        assert client.get("/pricing/nope/estimate", params={"words": 10}).status_code == 404
    assert "pricing_unknown_provider: nope" in caplog.messages


def test_pricing_estimate_negative_words_rejected():
    assert client.get("/pricing/openai/estimate", params={"words": -1}).status_code == 422


def test_metrics_endpoint():
    res = client.get("/metrics")
    assert res.status_code == 200
    assert "paywall_decisions_total" in res.text
