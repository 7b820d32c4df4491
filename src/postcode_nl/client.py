"""Async client for the Dutch postcode API at https://postcode.tech."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from postcode_nl.core.models import LookupResult
from postcode_nl.core.text import validate_house_number, validate_postcode
from postcode_nl.infra.http import HttpClient
from postcode_nl.infra.providers.postcode_tech import POSTCODE_TECH_API_URL, PostcodeTechProvider

if TYPE_CHECKING:
    from postcode_nl.app.settings import Settings

DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_USER_AGENT = "postcode-nl/0.1.0"


class PostcodeClient:
    """
    Resolves a postcode and house number into an address.

    Every lookup returns a LookupResult carrying the usage limits reported on
    that same exchange. A missing address (HTTP 404) is a LookupResult with
    `address=None`, not an error.

    The client may be shared between concurrent tasks.
    """

    def __init__(
        self,
        api_token: str,
        *,
        api_url: str = POSTCODE_TECH_API_URL,
        timeout_seconds: float | None = DEFAULT_TIMEOUT_SECONDS,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._http = HttpClient(timeout_seconds=timeout_seconds, user_agent=user_agent, transport=transport)
        self._provider = PostcodeTechProvider(http=self._http, api_token=api_token, api_url=api_url)

    @classmethod
    def from_settings(cls, settings: Settings) -> PostcodeClient:
        return cls(
            settings.postcode_tech_token,
            api_url=settings.postcode_tech_api_url,
            timeout_seconds=settings.http_timeout_seconds,
            user_agent=settings.http_user_agent,
        )

    async def get_address(self, postcode: str, house_number: int) -> LookupResult:
        """
        Find the street and city for a postcode and house number.

        Args:
            postcode: `1234AB` or `1234 AB`
            house_number: integer house number without postfix characters

        Returns:
            LookupResult whose address (if found) repeats the given postcode
            and house number.

        Raises:
            InvalidInput, NoApiResponse, TooManyRequests, InvalidApiResponse, OtherApiError
        """
        postcode = validate_postcode(postcode)
        house_number = validate_house_number(house_number)
        return await self._provider.get_address(postcode, house_number)

    async def get_extended_address(self, postcode: str, house_number: int) -> LookupResult:
        """Like get_address, adding municipality, province and coordinates."""
        postcode = validate_postcode(postcode)
        house_number = validate_house_number(house_number)
        return await self._provider.get_extended_address(postcode, house_number)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> PostcodeClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.aclose()
