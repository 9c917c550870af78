"""Models for per-node upstream responses."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class MissingInputError(ValueError):
    """A required entry is absent from an upstream response."""


class DataRewardsResponse(BaseModel):
    """Streamr accumulated rewards for one node."""

    data: Decimal = Field(..., description="Accumulated DATA rewards", alias="DATA")

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ClaimedRewardCode(BaseModel):
    """A single reward code claimed by a node."""

    claim_time: datetime = Field(..., description="Claim time", alias="claimTime")

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class NodeStatsResponse(BaseModel):
    """Streamr per-node statistics, of which only the claim history is used."""

    claimed_reward_codes: list[ClaimedRewardCode] | None = Field(
        default=None,
        description="Claimed reward codes, oldest first",
        alias="claimedRewardCodes",
    )

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class TokenBalance(BaseModel):
    """ERC-20 balance entity."""

    value: Decimal


class Erc20Transfer(BaseModel):
    """ERC-20 transfer entity from the data-on-polygon subgraph."""

    timestamp: int = Field(..., description="Unix timestamp in seconds")
    value: Decimal = Field(..., description="Transferred DATA amount")
    to_balance: TokenBalance = Field(
        ..., description="Receiver balance after the transfer", alias="toBalance"
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class TransfersData(BaseModel):
    """``data`` of the transfers query."""

    erc20_transfers: list[Erc20Transfer] = Field(..., alias="erc20Transfers")

    model_config = ConfigDict(populate_by_name=True)


class BalancesData(BaseModel):
    """``data`` of the balances query."""

    erc20_balances: list[TokenBalance] = Field(..., alias="erc20Balances")

    model_config = ConfigDict(populate_by_name=True)


class RawNodeRecord(BaseModel):
    """Everything fetched for one node address."""

    address: str
    accumulated_rewards: Decimal
    claim_times: tuple[datetime, ...] = ()
    transfers: tuple[Erc20Transfer, ...] = ()
    stake: Decimal

    model_config = ConfigDict(frozen=True)


__all__ = [
    "BalancesData",
    "ClaimedRewardCode",
    "DataRewardsResponse",
    "Erc20Transfer",
    "MissingInputError",
    "NodeStatsResponse",
    "RawNodeRecord",
    "TokenBalance",
    "TransfersData",
]
