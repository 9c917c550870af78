"""HTTP client utilities and helpers."""

from decimal import Decimal
from typing import Any, TypeAlias

import httpx

from node_rewards.helpers.constants import (
    DEFAULT_TIMEOUT,
    MAX_CONNECTIONS,
    MAX_KEEPALIVE_CONNECTIONS,
)
from node_rewards.helpers.logging import get_logger


logger = get_logger(__name__)

# Type for JSON responses (object or array)
JsonResponse: TypeAlias = dict[str, Any] | list[Any]


class UpstreamError(RuntimeError):
    """An upstream API could not be reached or returned an unusable response."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Request to {url} failed: {reason}")


def create_http_client(
    timeout: float = DEFAULT_TIMEOUT, **kwargs: Any
) -> httpx.AsyncClient:
    """Create a configured httpx AsyncClient.

    Args:
        timeout: Default timeout in seconds (default: DEFAULT_TIMEOUT)
        **kwargs: Additional httpx.AsyncClient kwargs

    Returns:
        Configured AsyncClient instance

    Example:
        ```python
        from node_rewards.helpers.http import create_http_client

        async with create_http_client(timeout=60.0) as client:
            response = await client.get("https://example.com")
        ```
    """
    kwargs.setdefault(
        "limits",
        httpx.Limits(
            max_keepalive_connections=MAX_KEEPALIVE_CONNECTIONS,
            max_connections=MAX_CONNECTIONS,
        ),
    )
    kwargs.setdefault("headers", {"Content-Type": "application/json"})
    return httpx.AsyncClient(timeout=timeout, **kwargs)


def _decode(response: httpx.Response, url: str) -> JsonResponse:
    # Floats are parsed as Decimal so token amounts stay exact
    try:
        data = response.json(parse_float=Decimal)
    except ValueError as e:
        logger.warning("Invalid JSON from %s: %s", url, e)
        raise UpstreamError(url, "response is not valid JSON") from e

    if not isinstance(data, dict | list):
        raise UpstreamError(url, f"unexpected JSON payload {data!r}")
    return data


async def fetch_json(
    client: httpx.AsyncClient,
    url: str,
    *,
    params: dict[str, Any] | None = None,
    timeout: float | None = None,
) -> JsonResponse:
    """Fetch JSON data from a URL.

    Args:
        client: HTTP client instance
        url: URL to fetch
        params: Optional query string parameters
        timeout: Optional timeout override

    Returns:
        Parsed JSON data

    Raises:
        UpstreamError: On transport errors, non-2xx status or invalid JSON

    Example:
        ```python
        async with create_http_client() as client:
            data = await fetch_json(client, "https://api.example.com/data")
        ```
    """
    logger.debug("GET %s", url)
    try:
        response = await client.get(
            url, params=params, timeout=timeout or httpx.USE_CLIENT_DEFAULT
        )
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.warning("HTTP error fetching %s: %s", url, e.response.status_code)
        raise UpstreamError(url, f"HTTP {e.response.status_code}") from e
    except httpx.HTTPError as e:
        logger.warning("HTTP error fetching %s: %s", url, e)
        raise UpstreamError(url, str(e) or type(e).__name__) from e

    return _decode(response, url)


async def post_json(
    client: httpx.AsyncClient,
    url: str,
    data: dict[str, Any],
    *,
    timeout: float | None = None,
) -> JsonResponse:
    """Post JSON data to a URL and return JSON response.

    Args:
        client: HTTP client instance
        url: URL to post to
        data: JSON data to post
        timeout: Optional timeout override

    Returns:
        Parsed JSON response

    Raises:
        UpstreamError: On transport errors, non-2xx status or invalid JSON
    """
    logger.debug("POST %s", url)
    try:
        response = await client.post(
            url, json=data, timeout=timeout or httpx.USE_CLIENT_DEFAULT
        )
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.warning("HTTP error posting to %s: %s", url, e.response.status_code)
        raise UpstreamError(url, f"HTTP {e.response.status_code}") from e
    except httpx.HTTPError as e:
        logger.warning("HTTP error posting to %s: %s", url, e)
        raise UpstreamError(url, str(e) or type(e).__name__) from e

    return _decode(response, url)


__all__ = [
    "JsonResponse",
    "UpstreamError",
    "create_http_client",
    "fetch_json",
    "post_json",
]
