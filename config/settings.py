from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv


DEFAULT_BASE_URL = "https://nubela.co/proxycurl/api/v2"


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def _as_bool(value: Optional[str]) -> bool:
    if value is None:
        return False
    return value.strip().lower() in ("1", "true", "yes", "on")


def _as_optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or not value.strip():
        return None
    return float(value)


@dataclass(frozen=True)
class Settings:
    proxycurl_api_key: str | None
    proxycurl_base_url: str

    # None leaves the transport default in place
    http_timeout_seconds: float | None

    log_level: str
    run_env: str

    # MCP server identity/transport
    server_name: str = "mcp-server-proxycurl"
    server_version: str = "0.1.0"
    mcp_transport: str = "stdio"

    # Logging/tracing
    api_trace: bool = False
    api_log_path: str = "logs/api_calls.jsonl"

    def require_api_key(self) -> str:
        if not self.proxycurl_api_key:
            raise RuntimeError("PROXYCURL_API_KEY environment variable is required")
        return self.proxycurl_api_key


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    return Settings(
        proxycurl_api_key=os.getenv("PROXYCURL_API_KEY") or None,
        proxycurl_base_url=os.getenv("PROXYCURL_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        http_timeout_seconds=_as_optional_float(os.getenv("HTTP_TIMEOUT_SECONDS")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
        mcp_transport=os.getenv("MCP_TRANSPORT", "stdio"),
        api_trace=_as_bool(os.getenv("API_TRACE")),
        api_log_path=os.getenv("API_LOG_PATH", "logs/api_calls.jsonl"),
    )
