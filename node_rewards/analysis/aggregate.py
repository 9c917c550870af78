"""Derive per-node and portfolio reward statistics from raw node records.

Everything here is pure: no I/O, no shared state. Claim times are taken in
the order the upstream API returns them, which is chronological; they are
not re-sorted.
"""

from collections.abc import Iterable, Mapping, Sequence
from decimal import Context, Decimal, localcontext
from functools import reduce
from itertools import chain
from types import MappingProxyType

from node_rewards.analysis.models import (
    EstimatedRewards,
    MonthlyReward,
    NodeStats,
    PortfolioStats,
    Transaction,
)
from node_rewards.data.nodes.models import Erc20Transfer, RawNodeRecord
from node_rewards.data.rates.models import InterestRates
from node_rewards.helpers.constants import MONTHS_PER_YEAR
from node_rewards.helpers.parsers import month_key, parse_unix_timestamp, to_decimal

ZERO = Decimal(0)
HUNDRED = Decimal(100)

# Division by zero yields +-Infinity and 0/0 yields NaN instead of raising
UNTRAPPED = Context(traps=[])


def to_transaction(transfer: Erc20Transfer) -> Transaction:
    """Convert a subgraph transfer into a Transaction."""
    return Transaction(
        date=parse_unix_timestamp(transfer.timestamp),
        value=to_decimal(transfer.value),
        balance=to_decimal(transfer.to_balance.value),
    )


def derive_node_stats(record: RawNodeRecord) -> NodeStats:
    """Derive claim dates, paid and pending rewards for one node.

    Args:
        record: Raw data fetched for the node.

    Returns:
        NodeStats with ``pending_rewards = accumulated_rewards - paid_rewards``,
        not clamped at zero.
    """
    first_claim_date = record.claim_times[0] if record.claim_times else None
    last_claim_date = record.claim_times[-1] if record.claim_times else None

    transactions = tuple(to_transaction(transfer) for transfer in record.transfers)
    paid_rewards = sum((tx.value for tx in transactions), ZERO)

    return NodeStats(
        address=record.address,
        first_claim_date=first_claim_date,
        last_claim_date=last_claim_date,
        stake=record.stake,
        transactions=transactions,
        paid_rewards=paid_rewards,
        accumulated_rewards=record.accumulated_rewards,
        pending_rewards=record.accumulated_rewards - paid_rewards,
    )


def _add_to_month(
    totals: Mapping[str, Decimal], tx: Transaction
) -> Mapping[str, Decimal]:
    key = month_key(tx.date)
    return {**totals, key: totals.get(key, ZERO) + tx.value}


def group_monthly_rewards(
    transactions: Iterable[Transaction],
) -> Mapping[str, Decimal]:
    """Sum transaction values per ``YYYY-MM`` month of the transaction date.

    Keys appear in the order their month is first seen.
    """
    return MappingProxyType(reduce(_add_to_month, transactions, {}))


def calculate_roi(
    accumulated_rewards: Decimal, stake: Decimal, paid_rewards: Decimal
) -> Decimal:
    """Return ``100 * accumulated / (stake - paid)``.

    A zero denominator gives Infinity (or NaN for 0/0) and a negative one a
    sign-flipped result; neither is treated as an error.
    """
    with localcontext(UNTRAPPED):
        return HUNDRED * accumulated_rewards / (stake - paid_rewards)


def derive_statistics(nodes: Sequence[NodeStats]) -> PortfolioStats:
    """Fold per-node statistics into portfolio totals and monthly rewards."""
    total_stake = sum((node.stake for node in nodes), ZERO)
    total_paid_rewards = sum((node.paid_rewards for node in nodes), ZERO)
    total_pending_rewards = sum((node.pending_rewards for node in nodes), ZERO)
    total_accumulated_rewards = sum((node.accumulated_rewards for node in nodes), ZERO)

    monthly = group_monthly_rewards(
        chain.from_iterable(node.transactions for node in nodes)
    )

    return PortfolioStats(
        total_stake=total_stake,
        total_paid_rewards=total_paid_rewards,
        total_pending_rewards=total_pending_rewards,
        total_accumulated_rewards=total_accumulated_rewards,
        monthly_totals=tuple(
            MonthlyReward(month=month, value=value) for month, value in monthly.items()
        ),
        roi=calculate_roi(total_accumulated_rewards, total_stake, total_paid_rewards),
    )


def estimate_rewards(total_stake: Decimal, rates: InterestRates) -> EstimatedRewards:
    """Project yearly and monthly rewards for ``total_stake`` at the given rates."""
    yearly_apr = total_stake / HUNDRED * rates.apr
    yearly_apy = total_stake / HUNDRED * rates.apy
    return EstimatedRewards(
        yearly_apr=yearly_apr,
        monthly_apr=yearly_apr / MONTHS_PER_YEAR,
        yearly_apy=yearly_apy,
        monthly_apy=yearly_apy / MONTHS_PER_YEAR,
    )
