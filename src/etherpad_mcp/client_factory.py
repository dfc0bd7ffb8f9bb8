"""
Client factory for Etherpad MCP server.

Builds the process-wide EtherpadClient from environment settings and
formats SDK results for tool output.

Environment:
- ETHERPAD_BASE_URL: API URL (default: http://localhost:9001/api)
- ETHERPAD_API_KEY: API key, or
- ETHERPAD_API_KEY_FILE: path to Etherpad's APIKEY.txt
- ETHERPAD_API_VERSION: API version (default: 1.2.13)
- ETHERPAD_TIMEOUT: request timeout in seconds (default: 30, empty for none)
- ETHERPAD_RAISE_ERRORS: raise on non-zero codes (default: true)
"""

import json
import logging
import os
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Mapping, Optional

from etherpad_mcp.sdk.client import EtherpadClient, Response
from etherpad_mcp.sdk.errors import EtherpadError
from etherpad_mcp.sdk.types import CURRENT_VERSION, DEFAULT_BASE_URL, describe_code

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

_client: Optional[EtherpadClient] = None
_client_lock = threading.Lock()


@dataclass
class Settings:
    """Connection settings for the Etherpad instance."""
    base_url: str = DEFAULT_BASE_URL
    api_key: Optional[str] = None
    api_version: str = CURRENT_VERSION
    timeout: Optional[float] = DEFAULT_TIMEOUT
    raise_errors: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = None) -> "Settings":
        """
        Read settings from environment variables.

        Raises:
            ValueError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ

        api_key = env.get("ETHERPAD_API_KEY") or None
        key_file = env.get("ETHERPAD_API_KEY_FILE")
        if not api_key and key_file:
            api_key = Path(key_file).read_text().strip() or None

        return cls(
            base_url=env.get("ETHERPAD_BASE_URL") or DEFAULT_BASE_URL,
            api_key=api_key,
            api_version=env.get("ETHERPAD_API_VERSION") or CURRENT_VERSION,
            timeout=_parse_timeout(env.get("ETHERPAD_TIMEOUT")),
            raise_errors=_parse_bool("ETHERPAD_RAISE_ERRORS", env.get("ETHERPAD_RAISE_ERRORS"), True),
        )


def _parse_timeout(value: Optional[str]) -> Optional[float]:
    if value is None:
        return DEFAULT_TIMEOUT
    value = value.strip()
    if not value or value.lower() == "none":
        return None
    try:
        timeout = float(value)
    except ValueError:
        raise ValueError(f"ETHERPAD_TIMEOUT must be a number of seconds, got '{value}'")
    if timeout <= 0:
        raise ValueError("ETHERPAD_TIMEOUT must be positive")
    return timeout


def _parse_bool(name: str, value: Optional[str], default: bool) -> bool:
    if value is None or not value.strip():
        return default
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be true or false, got '{value}'")


def create_client(settings: Settings) -> EtherpadClient:
    """
    Create an EtherpadClient from settings.

    Raises:
        ValueError: If no API key is configured
    """
    if not settings.api_key:
        raise ValueError(
            "No Etherpad API key. Set ETHERPAD_API_KEY or ETHERPAD_API_KEY_FILE."
        )
    return EtherpadClient(
        api_key=settings.api_key,
        base_url=settings.base_url,
        api_version=settings.api_version,
        timeout=settings.timeout,
        raise_etherpad_errors=settings.raise_errors,
    )


def get_client() -> EtherpadClient:
    """
    Get the shared Etherpad client, creating it on first use.

    Usage in tools:
        @app.tool()
        async def list_all_pads() -> str:
            return call_and_format(sdk_pads.list_all_pads, get_client())

    Raises:
        ValueError: If the environment holds no usable configuration
    """
    global _client
    with _client_lock:
        if _client is None:
            settings = Settings.from_env()
            _client = create_client(settings)
            logger.info(
                "Etherpad client for %s (API %s)", settings.base_url, settings.api_version
            )
        return _client


def reset_client() -> None:
    """Close and forget the shared client (next get_client() rebuilds it)."""
    global _client
    with _client_lock:
        client, _client = _client, None
    if client is not None:
        client.close()


def format_response(response: Response) -> str:
    """Serialize a Response envelope as tool output."""
    return json.dumps(response.to_dict(), indent=2)


def handle_etherpad_error(error: EtherpadError) -> str:
    """
    Turn an application-level Etherpad error into tool output.

    Args:
        error: The raised EtherpadError

    Returns:
        JSON error message for the caller
    """
    logger.warning("Etherpad error: %s", error)
    return json.dumps({
        "error": error.message,
        "code": error.code,
        "status": describe_code(error.code),
    }, indent=2)


def call_and_format(fn: Callable[..., Response], client: EtherpadClient, *args: Any, **kwargs: Any) -> str:
    """Call an SDK function and format its Response or EtherpadError."""
    try:
        response = fn(client, *args, **kwargs)
    except EtherpadError as e:
        return handle_etherpad_error(e)
    return format_response(response)
