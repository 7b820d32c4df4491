from __future__ import annotations

import pytest

from postcode_nl.app.container import build_container
from postcode_nl.app.settings import get_settings

_ENV = (
    "POSTCODE_TECH_TOKEN",
    "POSTCODE_TECH_API_URL",
    "HTTP_TIMEOUT_SECONDS",
    "HTTP_USER_AGENT",
    "MCP_HOST",
    "MCP_PORT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in _ENV:
        monkeypatch.delenv(name, raising=False)


def test_missing_token(monkeypatch):
    with pytest.raises(RuntimeError, match="POSTCODE_TECH_TOKEN"):
        get_settings()


def test_defaults(monkeypatch):
    monkeypatch.setenv("POSTCODE_TECH_TOKEN", ' "abc-123" ')

    s = get_settings()

    assert s.postcode_tech_token == "abc-123"
    assert s.postcode_tech_api_url == "https://postcode.tech/api/v1/postcode"
    assert s.http_timeout_seconds == 10.0
    assert s.http_user_agent == "postcode-nl/0.1.0"
    assert s.mcp_host == "127.0.0.1"
    assert s.mcp_port == 3334


def test_overrides(monkeypatch):
    monkeypatch.setenv("POSTCODE_TECH_TOKEN", "abc")
    monkeypatch.setenv("POSTCODE_TECH_API_URL", "https://example.test/api")
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("MCP_PORT", "8080")

    s = get_settings()

    assert s.postcode_tech_api_url == "https://example.test/api"
    assert s.http_timeout_seconds == 2.5
    assert s.mcp_port == 8080


def test_build_container(monkeypatch):
    monkeypatch.setenv("POSTCODE_TECH_TOKEN", "abc")

    c = build_container()

    assert c.settings.postcode_tech_token == "abc"
    assert c.client is not None
