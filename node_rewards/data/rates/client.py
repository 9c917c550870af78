"""Price and interest rate provider."""

from decimal import Decimal

import httpx

from node_rewards.data.rates.models import ApyResponse, InterestRates, PriceResponse
from node_rewards.helpers.config import ApiEndpoints
from node_rewards.helpers.constants import QUOTE_CURRENCY, TOKEN_SYMBOL
from node_rewards.helpers.http import fetch_json
from node_rewards.helpers.logging import get_logger


logger = get_logger(__name__)


class RateProvider:
    """Fetches the token price and the network's current interest rates."""

    def __init__(self, client: httpx.AsyncClient, endpoints: ApiEndpoints) -> None:
        """Initialize the rate provider.

        Args:
            client: Shared HTTP client.
            endpoints: Upstream API base URLs.
        """
        self.client = client
        self.endpoints = endpoints

    async def get_data_to_eur_rate(self) -> Decimal:
        """Get the current price of one DATA token in EUR.

        Raises:
            UpstreamError: If the price API cannot be queried.
            pydantic.ValidationError: If the response has no EUR price.
        """
        logger.info("Getting %s to %s rate", TOKEN_SYMBOL, QUOTE_CURRENCY)
        data = await fetch_json(
            self.client,
            f"{self.endpoints.cryptocompare}/data/price",
            params={"fsym": TOKEN_SYMBOL, "tsyms": QUOTE_CURRENCY},
        )
        return PriceResponse.model_validate(data).eur

    async def get_interest_rates(self) -> InterestRates:
        """Get the network's 24h average APR and APY.

        Raises:
            UpstreamError: If the network API cannot be queried.
            pydantic.ValidationError: If the response lacks either rate.
        """
        logger.info("Getting interest rates (averages for past 24h)")
        data = await fetch_json(self.client, f"{self.endpoints.streamr}/apy")
        response = ApyResponse.model_validate(data)
        return InterestRates(apr=response.apr, apy=response.apy)
