"""Models for derived per-node and portfolio statistics."""

from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field


class Transaction(BaseModel):
    """A reward payout received by a node."""

    date: datetime
    value: Decimal
    balance: Decimal

    model_config = ConfigDict(frozen=True)


class NodeStats(BaseModel):
    """Derived statistics for one node.

    ``first_claim_date`` and ``last_claim_date`` are None when the node never
    claimed. ``pending_rewards`` is negative when upstream reports less
    accumulated than paid out.
    """

    address: str
    first_claim_date: datetime | None
    last_claim_date: datetime | None
    stake: Decimal
    transactions: tuple[Transaction, ...]
    paid_rewards: Decimal
    accumulated_rewards: Decimal
    pending_rewards: Decimal

    model_config = ConfigDict(frozen=True)


class MonthlyReward(BaseModel):
    """Rewards paid out during one calendar month."""

    month: str
    value: Decimal

    model_config = ConfigDict(frozen=True)


class PortfolioStats(BaseModel):
    """Totals over all nodes of a run."""

    total_stake: Decimal
    total_paid_rewards: Decimal
    total_pending_rewards: Decimal
    total_accumulated_rewards: Decimal
    monthly_totals: tuple[MonthlyReward, ...]
    roi: Decimal = Field(allow_inf_nan=True)

    model_config = ConfigDict(frozen=True)

    @property
    def monthly_rewards(self) -> Mapping[str, Decimal]:
        """Read-only ``YYYY-MM`` to paid rewards mapping, in first-seen order."""
        return MappingProxyType(
            {item.month: item.value for item in self.monthly_totals}
        )


class EstimatedRewards(BaseModel):
    """Projected rewards for the current total stake."""

    yearly_apr: Decimal
    monthly_apr: Decimal
    yearly_apy: Decimal
    monthly_apy: Decimal

    model_config = ConfigDict(frozen=True)


__all__ = [
    "EstimatedRewards",
    "MonthlyReward",
    "NodeStats",
    "PortfolioStats",
    "Transaction",
]
