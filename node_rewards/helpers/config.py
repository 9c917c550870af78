"""Configuration management and environment variable utilities."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from node_rewards.helpers.constants import (
    CRYPTOCOMPARE_API_URL,
    STREAMR_API_URL,
    THEGRAPH_API_URL,
)


# Load environment variables from .env file
load_dotenv()


@dataclass(frozen=True)
class ApiEndpoints:
    """Base URLs of the upstream services."""

    streamr: str
    cryptocompare: str
    thegraph: str


def get_required_env(key: str) -> str:
    """Get a required environment variable.

    Args:
        key: Environment variable name

    Returns:
        Environment variable value

    Raises:
        ValueError: If the environment variable is not set

    Example:
        ```python
        from node_rewards.helpers.config import get_required_env

        addresses = get_required_env("NODE_ADDRESSES")
        ```
    """
    value = os.getenv(key)
    if not value:
        msg = f"{key} environment variable is not set"
        raise ValueError(msg)
    return value


def get_optional_env(key: str, default: str | None = None) -> str | None:
    """Get an optional environment variable with a default value.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value or default
    """
    return os.getenv(key, default)


def get_node_addresses(addresses: list[str] | None = None) -> list[str]:
    """Get the ordered list of node addresses from parameter or environment.

    Addresses given explicitly win over ``NODE_ADDRESSES``, which holds a
    comma separated list. Order is preserved and blank entries are skipped.

    Args:
        addresses: Optional addresses to use directly

    Returns:
        Node addresses in configured order

    Raises:
        ValueError: If no address is provided and NODE_ADDRESSES is not set

    Example:
        ```python
        from node_rewards.helpers.config import get_node_addresses

        # NODE_ADDRESSES="0xabc...,0xdef..."
        addresses = get_node_addresses()
        ```
    """
    if addresses:
        raw = addresses
    else:
        raw = get_required_env("NODE_ADDRESSES").split(",")

    cleaned = [address.strip() for address in raw if address.strip()]
    if not cleaned:
        msg = "At least one node address must be configured"
        raise ValueError(msg)

    return cleaned


def get_api_endpoints() -> ApiEndpoints:
    """Get upstream API base URLs, overridable through the environment.

    Returns:
        ApiEndpoints with trailing slashes removed
    """
    return ApiEndpoints(
        streamr=(get_optional_env("STREAMR_API_URL") or STREAMR_API_URL).rstrip("/"),
        cryptocompare=(
            get_optional_env("CRYPTOCOMPARE_API_URL") or CRYPTOCOMPARE_API_URL
        ).rstrip("/"),
        thegraph=(get_optional_env("THEGRAPH_API_URL") or THEGRAPH_API_URL).rstrip(
            "/"
        ),
    )


def get_log_level(log_level: str | None = None) -> str:
    """Get the log level name from parameter or ``LOG_LEVEL``, defaulting to INFO."""
    if log_level:
        return log_level.upper()
    return (get_optional_env("LOG_LEVEL") or "INFO").upper()


__all__ = [
    "ApiEndpoints",
    "get_api_endpoints",
    "get_log_level",
    "get_node_addresses",
    "get_optional_env",
    "get_required_env",
]
