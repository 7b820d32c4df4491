from __future__ import annotations

from typing import Any, Awaitable, Callable

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from postcode_nl.app.container import Container
from postcode_nl.core.errors import PostcodeError
from postcode_nl.core.models import LookupResult


async def _run_lookup(
    lookup: Callable[[str, int], Awaitable[LookupResult]],
    postcode: str,
    house_number: int,
) -> dict[str, Any]:
    try:
        result = await lookup(postcode, house_number)
    except PostcodeError as e:
        raise ToolError(e.message) from e
    return result.to_dict()


def register_postcode_tools(mcp: FastMCP, container: Container) -> None:
    client = container.client

    @mcp.tool(
        name="get_address",
        description=(
            "Look up the street and city of a Dutch address from its postcode "
            "(1234AB or 1234 AB) and house number. Returns found=false when the "
            "combination does not exist, plus the current API usage limits."
        ),
    )
    async def get_address(postcode: str, house_number: int) -> dict[str, Any]:
        return await _run_lookup(client.get_address, postcode, house_number)

    @mcp.tool(
        name="get_extended_address",
        description=(
            "Like get_address, but also returns municipality, province and "
            "latitude/longitude of the address."
        ),
    )
    async def get_extended_address(postcode: str, house_number: int) -> dict[str, Any]:
        return await _run_lookup(client.get_extended_address, postcode, house_number)
