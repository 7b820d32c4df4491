"""Shared fixtures: a PostcodeClient wired to an in-memory httpx transport."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from postcode_nl.client import PostcodeClient

LIMIT_HEADERS = {
    "x-ratelimit-limit": "600",
    "x-ratelimit-remaining": "599",
    "x-api-limit": "10000",
    "x-api-remaining": "9876",
    "x-api-reset": "daily",
}


def api_response(
    status_code: int,
    body: Any = None,
    *,
    headers: dict[str, str] | None = None,
    text: str | None = None,
) -> httpx.Response:
    """Build a fake API response; usage headers default to LIMIT_HEADERS."""
    content = text if text is not None else (json.dumps(body) if body is not None else "")
    return httpx.Response(
        status_code,
        headers=LIMIT_HEADERS if headers is None else headers,
        content=content.encode("utf-8"),
    )


@pytest.fixture()
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture()
def requests_seen() -> list[httpx.Request]:
    return []


@pytest.fixture()
def make_client(requests_seen: list[httpx.Request]) -> Callable[..., PostcodeClient]:
    """Factory: make_client(handler) where handler(request) -> httpx.Response."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> PostcodeClient:
        def _record(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            return handler(request)

        return PostcodeClient("test-token", transport=httpx.MockTransport(_record))

    return _make
