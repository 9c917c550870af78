"""Fetch node rewards data and print the rewards report."""

import sys
from argparse import ArgumentParser, Namespace
from asyncio import gather, run
from collections.abc import Sequence

from rich.console import Console

from node_rewards.analysis.aggregate import (
    derive_node_stats,
    derive_statistics,
    estimate_rewards,
)
from node_rewards.data.nodes.client import NodeDataFetcher
from node_rewards.data.rates.client import RateProvider
from node_rewards.helpers.config import (
    ApiEndpoints,
    get_api_endpoints,
    get_log_level,
    get_node_addresses,
)
from node_rewards.helpers.http import create_http_client
from node_rewards.helpers.logging import get_logger, set_log_level
from node_rewards.report.console import print_report, render_report


def parse_args(argv: Sequence[str] | None = None) -> Namespace:
    """Parse command line arguments."""
    parser = ArgumentParser(
        prog="node-rewards",
        description="Report rewards, stake and ROI for a set of Streamr nodes.",
    )
    parser.add_argument(
        "--address",
        dest="addresses",
        action="append",
        metavar="ADDRESS",
        help="Node address; repeat for several nodes (default: NODE_ADDRESSES)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level (default: LOG_LEVEL or INFO)",
    )
    parser.add_argument("--color", action="store_true", help="Colorize log output")
    return parser.parse_args(argv)


async def generate_report(
    addresses: Sequence[str], endpoints: ApiEndpoints
) -> list[str]:
    """Fetch everything for ``addresses``, aggregate and render the report.

    Rates and node records are fetched concurrently; aggregation starts only
    once all of them are available.
    """
    async with create_http_client() as client:
        rate_provider = RateProvider(client, endpoints)
        fetcher = NodeDataFetcher(client, endpoints)
        eur_rate, interest_rates, records = await gather(
            rate_provider.get_data_to_eur_rate(),
            rate_provider.get_interest_rates(),
            fetcher.fetch_all(addresses),
        )

    nodes = [derive_node_stats(record) for record in records]
    portfolio = derive_statistics(nodes)
    estimates = estimate_rewards(portfolio.total_stake, interest_rates)

    return render_report(nodes, portfolio, interest_rates, estimates, eur_rate)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the report and return the process exit code."""
    args = parse_args(argv)
    log_level = get_log_level(args.log_level)
    logger = get_logger("node_rewards.cli", log_level=log_level, log_color=args.color)
    set_log_level(log_level)

    try:
        addresses = get_node_addresses(args.addresses)
        lines = run(generate_report(addresses, get_api_endpoints()))
    except Exception as e:
        logger.error("Report generation failed: %s", e)
        logger.debug("Traceback", exc_info=True)
        return 1

    print_report(Console(), lines)
    return 0


if __name__ == "__main__":
    sys.exit(main())
