from __future__ import annotations

import logging
import os
import sys


def configure_logging(level: str | None = None) -> None:
    """Log to stderr; stdout is reserved for the MCP stdio transport."""
    level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
