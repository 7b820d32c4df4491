from __future__ import annotations

import logging

from fastmcp import FastMCP

from postcode_nl.app.container import build_container
from postcode_nl.app.logger import configure_logging
from postcode_nl.tools.postcode_tools import register_postcode_tools

configure_logging()
log = logging.getLogger(__name__)

mcp = FastMCP("postcode-nl")

try:
    _container = build_container()
    register_postcode_tools(mcp, _container)
    log.info("Postcode tools registered successfully")
except Exception as e:
    log.error("Failed to register postcode tools: %s", e, exc_info=True)
    raise


if __name__ == "__main__":
    mcp.run(
        transport="http",
        host=_container.settings.mcp_host,
        port=_container.settings.mcp_port,
        path="/mcp",
    )
