from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lon: float

    def to_dict(self) -> dict[str, Any]:
        return {"lat": self.lat, "lon": self.lon}


@dataclass(frozen=True)
class Address:
    street: str
    house_number: int
    postcode: str
    city: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "street": self.street,
            "house_number": self.house_number,
            "postcode": self.postcode,
            "city": self.city,
        }


@dataclass(frozen=True)
class ExtendedAddress(Address):
    municipality: str
    province: str
    coordinates: Coordinates

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "municipality": self.municipality,
            "province": self.province,
            "coordinates": self.coordinates.to_dict(),
        }


@dataclass(frozen=True)
class ApiLimits:
    """Usage limits reported by the API on the exchange that produced a result."""

    ratelimit_limit: int
    ratelimit_remaining: int
    api_limit: int
    api_remaining: int
    api_reset: str  # free-form schedule, e.g. "daily"

    def to_dict(self) -> dict[str, Any]:
        return {
            "ratelimit_limit": self.ratelimit_limit,
            "ratelimit_remaining": self.ratelimit_remaining,
            "api_limit": self.api_limit,
            "api_remaining": self.api_remaining,
            "api_reset": self.api_reset,
        }


@dataclass(frozen=True)
class LookupResult:
    # None: no address exists for this postcode / house number combination
    address: Address | None
    limits: ApiLimits

    @property
    def found(self) -> bool:
        return self.address is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "found": self.found,
            "address": self.address.to_dict() if self.address else None,
            "limits": self.limits.to_dict(),
        }
