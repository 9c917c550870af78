"""GraphQL documents for the data-on-polygon subgraph."""

from node_rewards.helpers.constants import (
    REWARD_DISTRIBUTOR_ADDRESS,
    TRANSFERS_SINCE_TIMESTAMP,
)

BALANCES_QUERY = """
query Balances($account: String!) {
  erc20Balances(where: { account: $account }) {
    value
  }
}
"""

TRANSFERS_QUERY = """
query Transfers($from: String!, $to: String!, $since: BigInt!) {
  erc20Transfers(
    where: { from: $from, to: $to, timestamp_gt: $since }
    orderBy: timestamp
    orderDirection: asc
  ) {
    timestamp
    value
    toBalance {
      value
    }
  }
}
"""


def balances_variables(address: str) -> dict[str, str]:
    """Variables selecting the balance of ``address``."""
    return {"account": address.lower()}


def transfers_variables(
    address: str,
    distributor: str = REWARD_DISTRIBUTOR_ADDRESS,
    since: int = TRANSFERS_SINCE_TIMESTAMP,
) -> dict[str, str]:
    """Variables selecting reward payouts from ``distributor`` to ``address``.

    Addresses are lowercased since the subgraph stores them that way.
    """
    return {
        "from": distributor.lower(),
        "to": address.lower(),
        "since": str(since),
    }
