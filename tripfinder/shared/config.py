"""
Client configuration.

Centralizes the service base URL and request limits so the clients can be
tuned from the environment without modifying the call sites.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass
class ClientConfig:
    """
    Configuration for the discovery and detail clients.

    Attributes:
        base_url: Root URL of the discovery/detail service
        timeout_seconds: Per-request timeout. None waits indefinitely.
        max_results: Number of destinations kept from a discovery response
    """

    base_url: str = "http://localhost:5000"
    timeout_seconds: Optional[float] = None
    max_results: int = 5


# Default configuration instance
DEFAULT_CONFIG = ClientConfig()


def get_config(
    base_url: Optional[str] = None,
    timeout_seconds: Optional[float] = None,
    max_results: Optional[int] = None,
) -> ClientConfig:
    """
    Create a configuration with optional overrides.

    Args:
        base_url: Override for the service base URL
        timeout_seconds: Override for the request timeout
        max_results: Override for the discovery result limit

    Returns:
        ClientConfig with specified overrides applied
    """
    return ClientConfig(
        base_url=base_url or DEFAULT_CONFIG.base_url,
        timeout_seconds=timeout_seconds
        if timeout_seconds is not None
        else DEFAULT_CONFIG.timeout_seconds,
        max_results=max_results or DEFAULT_CONFIG.max_results,
    )


def _env_number(name: str, cast):
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return cast(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


def load_config() -> ClientConfig:
    """
    Build a configuration from the environment (and a .env file if present).

    Reads TRIPFINDER_BASE_URL, TRIPFINDER_TIMEOUT_SECONDS and
    TRIPFINDER_MAX_RESULTS. Unset variables keep their defaults.

    Raises:
        ValueError: If a numeric variable cannot be parsed.
    """
    load_dotenv()
    return get_config(
        base_url=os.environ.get("TRIPFINDER_BASE_URL") or None,
        timeout_seconds=_env_number("TRIPFINDER_TIMEOUT_SECONDS", float),
        max_results=_env_number("TRIPFINDER_MAX_RESULTS", int),
    )
