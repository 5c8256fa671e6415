"""Tests for settings validation and the JSON log formatter."""
import json
import logging

import pytest
from pydantic import ValidationError

from app.core.config import Settings
from app.core.logging import JsonFormatter


def test_credit_tiers_sorted_by_price():
    s = Settings(token_credit_tiers='{"100": 600000, "1": 2000, "10": 30000}')
    assert list(s.credit_tiers_map.items()) == [(1, 2000), (10, 30000), (100, 600000)]


def test_credit_tiers_must_be_object():
    with pytest.raises(ValidationError):
        Settings(token_credit_tiers="[1, 2]")


def test_log_level_normalized():
    assert Settings(log_level=" debug ").log_level == "DEBUG"


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord("app.paywall.audit", logging.INFO, __file__, 1, "paywall_decision", None, None)
    record.endpoint = "/api/process-text"
    record.is_preview = True
    record.authenticated = False
    record.unrelated = "skip"
    payload = json.loads(JsonFormatter().format(record))
    assert payload["message"] == "paywall_decision"
    assert payload["endpoint"] == "/api/process-text"
    assert payload["is_preview"] is True
    assert payload["authenticated"] is False
    assert "unrelated" not in payload
