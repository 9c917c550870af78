"""Pytest configuration and shared fixtures."""

from decimal import Decimal

import pytest

from typing import TYPE_CHECKING, Any

from node_rewards.data.nodes.queries import (
    BALANCES_QUERY,
    TRANSFERS_QUERY,
    balances_variables,
    transfers_variables,
)
from node_rewards.helpers.config import ApiEndpoints
from tests.factories import CRYPTOCOMPARE_URL, STREAMR_URL, SUBGRAPH_URL, THEGRAPH_URL


if TYPE_CHECKING:
    from collections.abc import Callable

    from pytest_httpx import HTTPXMock


@pytest.fixture
def endpoints() -> ApiEndpoints:
    """Upstream base URLs pointing at mocked hosts."""
    return ApiEndpoints(
        streamr=STREAMR_URL,
        cryptocompare=CRYPTOCOMPARE_URL,
        thegraph=THEGRAPH_URL,
    )


@pytest.fixture
def mock_node_responses(
    httpx_mock: "HTTPXMock",
) -> "Callable[..., None]":
    """Register the four upstream responses for one node address.

    Returns:
        Callable taking the address and optional payload overrides
    """

    def register(
        address: str,
        *,
        rewards: dict[str, Any] | None = None,
        stats: dict[str, Any] | None = None,
        transfers: list[dict[str, Any]] | None = None,
        balances: list[dict[str, Any]] | None = None,
    ) -> None:
        httpx_mock.add_response(
            url=f"{STREAMR_URL}/datarewards/{address}",
            json=rewards if rewards is not None else {"DATA": 100},
        )
        httpx_mock.add_response(
            url=f"{STREAMR_URL}/stats/{address}",
            json=stats if stats is not None else {"claimedRewardCodes": []},
        )
        httpx_mock.add_response(
            url=SUBGRAPH_URL,
            method="POST",
            match_json={
                "query": TRANSFERS_QUERY,
                "variables": transfers_variables(address),
            },
            json={"data": {"erc20Transfers": transfers or []}},
        )
        httpx_mock.add_response(
            url=SUBGRAPH_URL,
            method="POST",
            match_json={
                "query": BALANCES_QUERY,
                "variables": balances_variables(address),
            },
            json={
                "data": {
                    "erc20Balances": (
                        balances if balances is not None else [{"value": "1000"}]
                    )
                }
            },
        )

    return register


@pytest.fixture
def tolerance() -> Decimal:
    """Tolerance for comparing non-terminating Decimal divisions."""
    return Decimal("0.0001")
