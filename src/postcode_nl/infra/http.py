from __future__ import annotations

import logging
from typing import Any

import httpx

from postcode_nl.core.errors import NoApiResponse

log = logging.getLogger(__name__)


class HttpClient:
    def __init__(
        self,
        *,
        timeout_seconds: float | None,
        user_agent: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            timeout=timeout_seconds,
            headers={"User-Agent": user_agent},
            transport=transport,
        )

    async def get(self, url: str, *, params: dict[str, Any], bearer_token: str) -> httpx.Response:
        """
        GET with bearer authentication. The status code is not interpreted here.

        Raises NoApiResponse when no response was received (DNS, connect, timeout).
        """
        try:
            r = await self._client.get(
                url,
                params=params,
                headers={"Authorization": f"Bearer {bearer_token}"},
            )
        except httpx.RequestError as e:
            log.warning("HTTP error: %s", e)
            raise NoApiResponse(f"Error contacting API, {e}") from e

        log.debug("GET %s -> %s", url, r.status_code)
        return r

    async def aclose(self) -> None:
        await self._client.aclose()
