# SPDX-License-Identifier: MIT
"""Configuration management for the Sora video MCP server.

This module handles:
- Logging setup
- Environment variable validation
- Download directory resolution
- OpenAI client initialization
"""

import logging
import os
import pathlib
import sys
from collections.abc import Mapping
from dataclasses import dataclass

from openai import AsyncOpenAI

from .errors import ConfigurationError

# ---------- Logging configuration ----------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stderr,  # Log to stderr to avoid interfering with stdio MCP transport
)
logger = logging.getLogger("sora-video-mcp")

SORA_API_BASE = "https://api.openai.com/v1"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3001


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, read once at startup."""

    api_key: str
    download_dir: pathlib.Path
    api_base: str = SORA_API_BASE
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT


def _default_download_dir() -> pathlib.Path:
    return pathlib.Path.home() / "Downloads"


def _parse_port(raw: str) -> int:
    try:
        port = int(raw.strip())
    except ValueError as e:
        raise ConfigurationError(f"PORT must be an integer, got {raw!r}") from e
    if not 0 < port < 65536:
        raise ConfigurationError(f"PORT out of range: {port}")
    return port


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from the process environment.

    Args:
        environ: Mapping to read instead of ``os.environ`` (used by tests)

    Returns:
        Immutable settings value

    Raises:
        ConfigurationError: If OPENAI_API_KEY is missing or PORT is malformed
    """
    env = os.environ if environ is None else environ

    api_key = (env.get("OPENAI_API_KEY") or "").strip()
    if not api_key:
        raise ConfigurationError("OPENAI_API_KEY environment variable is required")

    download_str = (env.get("DOWNLOAD_DIR") or "").strip()
    if download_str:
        download_dir = pathlib.Path(download_str).expanduser().resolve()
    else:
        download_dir = _default_download_dir()

    api_base = (env.get("OPENAI_BASE_URL") or "").strip().rstrip("/") or SORA_API_BASE
    host = (env.get("HOST") or "").strip() or DEFAULT_HOST
    port_str = env.get("PORT")
    port = _parse_port(port_str) if port_str and port_str.strip() else DEFAULT_PORT

    return Settings(api_key=api_key, download_dir=download_dir, api_base=api_base, host=host, port=port)


# ---------- OpenAI client (stateless) ----------
def get_client(settings: Settings) -> AsyncOpenAI:
    """Get an OpenAI async client for the configured credential.

    Retries are disabled: every tool call maps to exactly one request.
    """
    return AsyncOpenAI(api_key=settings.api_key, base_url=settings.api_base, max_retries=0)
