"""Per-node reward, claim, transfer and balance fetcher."""

import asyncio
from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal

import httpx

from node_rewards.data.nodes.models import (
    BalancesData,
    DataRewardsResponse,
    Erc20Transfer,
    MissingInputError,
    NodeStatsResponse,
    RawNodeRecord,
    TransfersData,
)
from node_rewards.data.nodes.queries import (
    BALANCES_QUERY,
    TRANSFERS_QUERY,
    balances_variables,
    transfers_variables,
)
from node_rewards.helpers.config import ApiEndpoints
from node_rewards.helpers.constants import DATA_ON_POLYGON_SUBGRAPH
from node_rewards.helpers.graph import GraphClient
from node_rewards.helpers.http import fetch_json
from node_rewards.helpers.logging import get_logger
from node_rewards.report.formatting import mask_address


logger = get_logger(__name__)


class NodeDataFetcher:
    """Fetches raw records for node addresses from the Streamr API and the subgraph."""

    def __init__(self, client: httpx.AsyncClient, endpoints: ApiEndpoints) -> None:
        """Initialize the node data fetcher.

        Args:
            client: Shared HTTP client.
            endpoints: Upstream API base URLs.
        """
        self.client = client
        self.endpoints = endpoints
        self.graph = GraphClient(f"{endpoints.thegraph}{DATA_ON_POLYGON_SUBGRAPH}")

    async def get_accumulated_rewards(self, address: str) -> Decimal:
        """Get the total rewards credited to a node."""
        data = await fetch_json(
            self.client, f"{self.endpoints.streamr}/datarewards/{address}"
        )
        return DataRewardsResponse.model_validate(data).data

    async def get_claim_times(self, address: str) -> list[datetime]:
        """Get the node's claim times in the order the API returns them."""
        url = f"{self.endpoints.streamr}/stats/{address}"
        data = await fetch_json(self.client, url)
        codes = NodeStatsResponse.model_validate(data).claimed_reward_codes or []
        return [code.claim_time for code in codes]

    async def get_transfers(self, address: str) -> list[Erc20Transfer]:
        """Get reward payouts received by the node."""
        data = await self.graph.query(
            self.client, TRANSFERS_QUERY, transfers_variables(address)
        )
        return TransfersData.model_validate(data).erc20_transfers

    async def get_stake(self, address: str) -> Decimal:
        """Get the node's current token balance.

        Raises:
            MissingInputError: If the subgraph has no balance for the address.
        """
        data = await self.graph.query(
            self.client, BALANCES_QUERY, balances_variables(address)
        )
        balances = BalancesData.model_validate(data).erc20_balances
        if not balances:
            msg = f"No balance entry for {mask_address(address)}"
            raise MissingInputError(msg)
        return balances[0].value

    async def fetch_raw_record(self, address: str) -> RawNodeRecord:
        """Fetch rewards, claims, transfers and balance for one address.

        The four reads are independent and run concurrently; the record is
        only built once all of them have completed.

        Args:
            address: Node address.

        Returns:
            RawNodeRecord for the address.

        Raises:
            ValueError: If the address is empty.
        """
        if not address:
            msg = "Node address is not defined"
            raise ValueError(msg)

        logger.info(
            "Getting rewards, balances and transactions for %s", mask_address(address)
        )
        accumulated_rewards, claim_times, transfers, stake = await asyncio.gather(
            self.get_accumulated_rewards(address),
            self.get_claim_times(address),
            self.get_transfers(address),
            self.get_stake(address),
        )
        logger.debug(
            "%s: %d claims, %d transfers",
            mask_address(address),
            len(claim_times),
            len(transfers),
        )

        return RawNodeRecord(
            address=address,
            accumulated_rewards=accumulated_rewards,
            claim_times=tuple(claim_times),
            transfers=tuple(transfers),
            stake=stake,
        )

    async def fetch_all(self, addresses: Sequence[str]) -> list[RawNodeRecord]:
        """Fetch raw records for all addresses concurrently.

        Results follow the order of ``addresses`` regardless of which fetch
        completes first. Any failure aborts the whole batch.
        """
        return list(
            await asyncio.gather(
                *(self.fetch_raw_record(address) for address in addresses)
            )
        )
