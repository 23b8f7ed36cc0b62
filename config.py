"""Runtime configuration loaded from the environment.

Values are read from ``.env`` (if present) and process environment variables.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv(dotenv_path=".env", encoding="utf-8")


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


def _csv(name: str, default: str) -> List[str]:
    return [v.strip() for v in os.getenv(name, default).split(",") if v.strip()]


@dataclass(frozen=True)
class Settings:
    """Server settings.

    Parameters
    ----------
    server_name, server_version:
        Identity advertised to MCP clients during initialization.
    browser_timeout_ms:
        Default Playwright timeout applied to every page action.
    tool_timeout_seconds:
        Upper bound for a whole browser tool invocation.
    """

    host: str = "0.0.0.0"
    port: int = 8787
    log_level: str = "INFO"
    server_name: str = "Authless Calculator"
    server_version: str = "1.0.0"
    browser_headless: bool = True
    browser_timeout_ms: int = 30000
    tool_timeout_seconds: float = 60.0
    json_response: bool = False
    stateless: bool = False
    cors_origins: List[str] = field(default_factory=list)
    allowed_hosts: List[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8787")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            server_name=os.getenv("SERVER_NAME", "Authless Calculator"),
            server_version=os.getenv("SERVER_VERSION", "1.0.0"),
            browser_headless=_flag("BROWSER_HEADLESS", "true"),
            browser_timeout_ms=int(os.getenv("BROWSER_TIMEOUT_MS", "30000")),
            tool_timeout_seconds=float(os.getenv("TOOL_TIMEOUT_SECONDS", "60")),
            json_response=_flag("MCP_JSON_RESPONSE", "false"),
            stateless=_flag("MCP_STATELESS", "false"),
            cors_origins=_csv("CORS_ALLOWED_ORIGINS", ""),
            allowed_hosts=_csv("ALLOWED_HOSTS", "*"),
        )
