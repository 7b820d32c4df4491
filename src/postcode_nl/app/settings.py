from __future__ import annotations

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    # postcode.tech
    postcode_tech_token: str
    postcode_tech_api_url: str

    # HTTP
    http_timeout_seconds: float
    http_user_agent: str

    # MCP server
    mcp_host: str
    mcp_port: int


def _clean(s: str | None) -> str:
    return (s or "").strip().strip('"').strip("'")


def _int(name: str, default: int) -> int:
    v = _clean(os.getenv(name, str(default)))
    return int(v)


def _float(name: str, default: float) -> float:
    v = _clean(os.getenv(name, str(default)))
    return float(v)


def get_settings() -> Settings:
    token = _clean(os.getenv("POSTCODE_TECH_TOKEN"))
    if not token:
        raise RuntimeError("Missing POSTCODE_TECH_TOKEN in environment (.env).")

    return Settings(
        postcode_tech_token=token,
        postcode_tech_api_url=_clean(
            os.getenv("POSTCODE_TECH_API_URL", "https://postcode.tech/api/v1/postcode")
        ),
        http_timeout_seconds=_float("HTTP_TIMEOUT_SECONDS", 10.0),
        http_user_agent=_clean(os.getenv("HTTP_USER_AGENT", "postcode-nl/0.1.0")),
        mcp_host=_clean(os.getenv("MCP_HOST", "127.0.0.1")),
        mcp_port=_int("MCP_PORT", 3334),
    )
