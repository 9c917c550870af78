"""Common configuration constants used across the application."""

# API Endpoints
STREAMR_API_URL = "https://brubeck1.streamr.network:3013"
"""Streamr network statistics API (rewards, claims, APR/APY)"""

CRYPTOCOMPARE_API_URL = "https://min-api.cryptocompare.com"
"""CryptoCompare price API"""

THEGRAPH_API_URL = "https://api.thegraph.com"
"""The Graph hosted service"""

DATA_ON_POLYGON_SUBGRAPH = "/subgraphs/name/streamr-dev/data-on-polygon"
"""Subgraph indexing DATA token transfers and balances on Polygon"""

# HTTP and Network Constants
DEFAULT_TIMEOUT = 30.0
"""Default HTTP request timeout in seconds"""

MAX_KEEPALIVE_CONNECTIONS = 5
"""Maximum number of keepalive connections in pool"""

MAX_CONNECTIONS = 10
"""Maximum total number of connections"""

# Token and Reward Constants
TOKEN_SYMBOL = "DATA"
"""Symbol of the staked and rewarded token"""

QUOTE_CURRENCY = "EUR"
"""Fiat currency used for value conversions"""

REWARD_DISTRIBUTOR_ADDRESS = "0x3979f7d6b5c5bfa4bcd441b4f35bfa0731ccfaef"
"""Address paying out node rewards"""

TRANSFERS_SINCE_TIMESTAMP = 1646065752
"""Only transfers after this Unix timestamp count as reward payouts"""

MONTHS_PER_YEAR = 12

# Display Constants
MASK_PREFIX = "0x******"
"""Prefix shown in place of the hidden part of an address"""

MASK_VISIBLE_CHARS = 10
"""Number of trailing address characters left visible"""

AMOUNT_DIGITS = 2
"""Decimal places for token and fiat amounts"""

PRICE_DIGITS = 4
"""Decimal places for the token unit price"""

NO_CLAIMS_TEXT = "<no claimed rewards yet>"
"""Shown instead of a claim date for nodes that never claimed"""


__all__ = [
    "AMOUNT_DIGITS",
    "CRYPTOCOMPARE_API_URL",
    "DATA_ON_POLYGON_SUBGRAPH",
    "DEFAULT_TIMEOUT",
    "MASK_PREFIX",
    "MASK_VISIBLE_CHARS",
    "MAX_CONNECTIONS",
    "MAX_KEEPALIVE_CONNECTIONS",
    "MONTHS_PER_YEAR",
    "NO_CLAIMS_TEXT",
    "PRICE_DIGITS",
    "QUOTE_CURRENCY",
    "REWARD_DISTRIBUTOR_ADDRESS",
    "STREAMR_API_URL",
    "THEGRAPH_API_URL",
    "TOKEN_SYMBOL",
    "TRANSFERS_SINCE_TIMESTAMP",
]
