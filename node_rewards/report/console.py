"""Console report of node and portfolio reward statistics."""

from collections.abc import Sequence
from decimal import Decimal

from rich.console import Console

from node_rewards.analysis.models import EstimatedRewards, NodeStats, PortfolioStats
from node_rewards.data.rates.models import InterestRates
from node_rewards.helpers.constants import PRICE_DIGITS, TOKEN_SYMBOL
from node_rewards.report.formatting import (
    format_amount,
    format_claim_date,
    format_value,
    mask_address,
)

RULE = "-" * 56


def _section(title: str) -> list[str]:
    return [RULE, f" {title}", RULE]


def render_node_section(nodes: Sequence[NodeStats], eur_rate: Decimal) -> list[str]:
    """Render one block per node, numbered in configured order."""
    lines = _section("Node statistics")
    for index, node in enumerate(nodes, start=1):
        lines.extend([
            f"Node {index}: {mask_address(node.address)}",
            f"  First claim on: {format_claim_date(node.first_claim_date)}",
            f"  Last claim on: {format_claim_date(node.last_claim_date)}",
            f"  Current stake: {format_value(node.stake, eur_rate)}",
            f"  Rewards paid: {format_value(node.paid_rewards, eur_rate)}",
            f"  Rewards pending: {format_value(node.pending_rewards, eur_rate)}",
            f"  Rewards total: {format_value(node.accumulated_rewards, eur_rate)}",
            "",
        ])
    return lines


def render_totals_section(portfolio: PortfolioStats, eur_rate: Decimal) -> list[str]:
    """Render monthly payouts, totals and ROI."""
    lines = _section("Total rewards")
    lines.append("Rewards per month (by month of payment):")
    lines.extend(
        f"    {month}: {format_value(value, eur_rate)}"
        for month, value in portfolio.monthly_rewards.items()
    )
    lines.extend([
        "",
        f"Paid rewards: {format_value(portfolio.total_paid_rewards, eur_rate)}",
        f"Pending rewards: {format_value(portfolio.total_pending_rewards, eur_rate)}",
        f"Total rewards: {format_value(portfolio.total_accumulated_rewards, eur_rate)}",
        f"Total stake: {format_value(portfolio.total_stake, eur_rate)}",
        "",
        "Current ROI (assuming nothing has been withdrawn): "
        f"{format_amount(portfolio.roi)}%",
    ])
    return lines


def render_estimates_section(
    rates: InterestRates, estimates: EstimatedRewards, eur_rate: Decimal
) -> list[str]:
    """Render projected rewards based on APR and APY."""
    lines = _section("Estimated rewards")
    lines.extend([
        f"Rewards based on APR ({rates.apr}%, no compounding):",
        f"    Monthly: {format_value(estimates.monthly_apr, eur_rate)}",
        f"    Yearly: {format_value(estimates.yearly_apr, eur_rate)}",
        f"Rewards based on APY ({rates.apy}%, compounding):",
        f"    Monthly: {format_value(estimates.monthly_apy, eur_rate)}",
        f"    Yearly: {format_value(estimates.yearly_apy, eur_rate)}",
    ])
    return lines


def render_report(
    nodes: Sequence[NodeStats],
    portfolio: PortfolioStats,
    rates: InterestRates,
    estimates: EstimatedRewards,
    eur_rate: Decimal,
) -> list[str]:
    """Render the full report as lines of plain text.

    Args:
        nodes: Per-node statistics in configured order
        portfolio: Totals over all nodes
        rates: Current APR and APY
        estimates: Projected rewards for the total stake
        eur_rate: Price of one token in EUR

    Returns:
        Report lines without trailing newlines
    """
    return [
        *render_node_section(nodes, eur_rate),
        *render_totals_section(portfolio, eur_rate),
        *render_estimates_section(rates, estimates, eur_rate),
        RULE,
        f"EUR values are based on {TOKEN_SYMBOL} price of "
        f"{format_amount(eur_rate, PRICE_DIGITS)} €",
        RULE,
    ]


def print_report(console: Console, lines: Sequence[str]) -> None:
    """Print report lines verbatim, without rich markup or highlighting."""
    for line in lines:
        console.print(line, markup=False, highlight=False)
