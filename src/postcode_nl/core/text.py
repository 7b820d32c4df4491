from __future__ import annotations

import re

from postcode_nl.core.errors import InvalidInput


_POSTCODE = re.compile(r"\d{4} ?[A-Za-z]{2}")
U32_MAX = 2**32 - 1


def validate_postcode(postcode: str) -> str:
    """
    Accept `1234AB` or `1234 AB` (one optional space, letters in any case).

    The accepted string is returned as-is; it is what the API receives and
    what simple lookups report back as the address postcode.
    """
    if not isinstance(postcode, str) or not _POSTCODE.fullmatch(postcode):
        raise InvalidInput(postcode)
    return postcode


def validate_house_number(house_number: int) -> int:
    # Only the unsigned 32-bit range is enforced; 0 is passed through to the API.
    if isinstance(house_number, bool) or not isinstance(house_number, int):
        raise InvalidInput(
            house_number,
            f"House numbers should be integers without postfix characters, input: {house_number!r}",
        )
    if not 0 <= house_number <= U32_MAX:
        raise InvalidInput(
            house_number,
            f"House numbers should be between 0 and {U32_MAX}, input: {house_number}",
        )
    return house_number
