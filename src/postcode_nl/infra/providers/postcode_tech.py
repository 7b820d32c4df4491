from __future__ import annotations

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError

from postcode_nl.core.errors import InvalidApiResponse, OtherApiError, TooManyRequests
from postcode_nl.core.models import Address, ApiLimits, Coordinates, ExtendedAddress, LookupResult
from postcode_nl.core.text import U32_MAX
from postcode_nl.infra.http import HttpClient

POSTCODE_TECH_API_URL = "https://postcode.tech/api/v1/postcode"


class SimpleResponse(BaseModel):
    """Body of the simple endpoint. Postcode and number are not echoed back."""

    model_config = ConfigDict(strict=True, frozen=True)

    street: str
    city: str

    def to_address(self, *, postcode: str, house_number: int) -> Address:
        return Address(
            street=self.street,
            house_number=house_number,
            postcode=postcode,
            city=self.city,
        )


class Geo(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True)

    lat: float
    lon: float


class FullResponse(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True)

    postcode: str
    number: int = Field(ge=0, le=U32_MAX)
    street: str
    city: str
    municipality: str
    province: str
    geo: Geo

    def to_extended_address(self) -> ExtendedAddress:
        return ExtendedAddress(
            street=self.street,
            house_number=self.number,
            postcode=self.postcode,
            city=self.city,
            municipality=self.municipality,
            province=self.province,
            coordinates=Coordinates(lat=self.geo.lat, lon=self.geo.lon),
        )


_NUMERIC_LIMIT_HEADERS = (
    ("ratelimit_limit", "x-ratelimit-limit"),
    ("ratelimit_remaining", "x-ratelimit-remaining"),
    ("api_limit", "x-api-limit"),
    ("api_remaining", "x-api-remaining"),
)
_RESET_HEADER = "x-api-reset"


def _raw_header(headers: httpx.Headers, name: str) -> bytes:
    for key, value in headers.raw:
        if key.decode("latin-1").lower() == name:
            return value
    raise InvalidApiResponse(f"API did not return API limits ({name})")


def _header_u32(headers: httpx.Headers, name: str) -> int:
    raw = _raw_header(headers, name)
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidApiResponse(f"Failed to parse API rate limit from header {name}") from e

    # one optional leading "+", then ASCII digits only
    digits = text[1:] if text.startswith("+") else text
    if not (digits.isascii() and digits.isdigit()) or int(digits) > U32_MAX:
        raise InvalidApiResponse(f"Failed to parse API rate limit from header {name}")
    return int(digits)


def parse_api_limits(headers: httpx.Headers) -> ApiLimits:
    """
    Build ApiLimits from the five usage headers sent with every response.

    Raises InvalidApiResponse when a header is absent or cannot be parsed.
    """
    values = {field: _header_u32(headers, name) for field, name in _NUMERIC_LIMIT_HEADERS}

    try:
        api_reset = _raw_header(headers, _RESET_HEADER).decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidApiResponse("Failed to parse API reset frequency from header") from e

    return ApiLimits(api_reset=api_reset, **values)


class PostcodeTechProvider:
    """postcode.tech lookups: one GET per call, no retries."""

    def __init__(self, *, http: HttpClient, api_token: str, api_url: str = POSTCODE_TECH_API_URL) -> None:
        self._http = http
        self._api_token = api_token
        self._simple_url = api_url.rstrip("/")
        self._full_url = f"{self._simple_url}/full"

    async def get_address(self, postcode: str, house_number: int) -> LookupResult:
        r = await self._call(self._simple_url, postcode, house_number)
        limits = parse_api_limits(r.headers)
        if r.status_code == httpx.codes.NOT_FOUND:
            return LookupResult(address=None, limits=limits)

        payload = _deserialize(SimpleResponse, r)
        return LookupResult(
            address=payload.to_address(postcode=postcode, house_number=house_number),
            limits=limits,
        )

    async def get_extended_address(self, postcode: str, house_number: int) -> LookupResult:
        r = await self._call(self._full_url, postcode, house_number)
        limits = parse_api_limits(r.headers)
        if r.status_code == httpx.codes.NOT_FOUND:
            return LookupResult(address=None, limits=limits)

        payload = _deserialize(FullResponse, r)
        return LookupResult(address=payload.to_extended_address(), limits=limits)

    async def _call(self, url: str, postcode: str, house_number: int) -> httpx.Response:
        r = await self._http.get(
            url,
            params={"postcode": postcode, "number": str(house_number)},
            bearer_token=self._api_token,
        )

        if r.status_code in (httpx.codes.OK, httpx.codes.NOT_FOUND):
            # 404 only means there is no such address
            return r
        if r.status_code == httpx.codes.TOO_MANY_REQUESTS:
            raise TooManyRequests()
        raise OtherApiError(r.status_code, r.text, r.reason_phrase)


def _deserialize(model: type[SimpleResponse] | type[FullResponse], r: httpx.Response):
    try:
        return model.model_validate_json(r.content)
    except PydanticValidationError as e:
        raise InvalidApiResponse(f"Failed to deserialize API response, {e}") from e
