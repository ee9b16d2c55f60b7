from __future__ import annotations

import json

import pytest
import requests

from config.settings import get_settings
from models.enrichment_request import EnrichmentFlags, EnrichmentRequest
from services.errors import RemoteApiError
from services.proxycurl_client import ProxycurlClient
from utils.api_logger import log_call


def test_api_trace_writes_jsonl(tmp_path, monkeypatch):
    log_file = tmp_path / "api_calls.jsonl"
    monkeypatch.setenv("API_TRACE", "true")
    monkeypatch.setenv("API_LOG_PATH", str(log_file))
    monkeypatch.setenv("RUN_ID", "test-run-123")
    get_settings.cache_clear()

    log_call(
        caller="unit.test",
        provider="proxycurl",
        operation="GET /linkedin",
        duration_ms=42,
        status="ok",
        http_status=200,
        extras={"profile_field": "linkedin_profile_url"},
    )

    assert log_file.exists()
    lines = log_file.read_text(encoding="utf-8").strip().splitlines()
    assert len(lines) == 1
    rec = json.loads(lines[-1])
    assert rec["caller"] == "unit.test"
    assert rec["provider"] == "proxycurl"
    assert rec["operation"] == "GET /linkedin"
    assert rec["run_id"] == "test-run-123"
    assert rec["extras"]["profile_field"] == "linkedin_profile_url"


def test_api_trace_disabled_writes_nothing(tmp_path, monkeypatch):
    log_file = tmp_path / "api_calls.jsonl"
    monkeypatch.setenv("API_LOG_PATH", str(log_file))
    get_settings.cache_clear()
    log_call(caller="unit.test", provider="proxycurl", operation="GET /linkedin")
    assert not log_file.exists()


def test_client_trace_omits_api_key(tmp_path, monkeypatch, test_settings):
    log_file = tmp_path / "nested" / "api_calls.jsonl"
    monkeypatch.setenv("API_TRACE", "1")
    monkeypatch.setenv("API_LOG_PATH", str(log_file))
    get_settings.cache_clear()

    class DownSession:
        def get(self, url, **kwargs):
            raise requests.exceptions.ConnectionError("no route to host")

    client = ProxycurlClient(settings=test_settings, session=DownSession())
    with pytest.raises(RemoteApiError):
        client.get_person_profile(EnrichmentRequest(
            linkedin_profile_url="https://linkedin.com/in/alice",
            flags=EnrichmentFlags(skills="include"),
        ))

    raw = log_file.read_text(encoding="utf-8")
    assert "test-api-key" not in raw
    rec = json.loads(raw.strip().splitlines()[-1])
    assert rec["status"] == "error"
    assert "no route to host" in rec["error"]
    assert rec["extras"] == {"profile_field": "linkedin_profile_url", "flags": {"skills": "include"}}
