"""Models for price and interest rate responses."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class PriceResponse(BaseModel):
    """CryptoCompare single-symbol price response."""

    eur: Decimal = Field(..., description="Price of one DATA in EUR", alias="EUR")

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ApyResponse(BaseModel):
    """Streamr network 24h interest rate response."""

    apr: Decimal = Field(..., description="24h average APR in percent", alias="24h-APR")
    apy: Decimal = Field(..., description="24h average APY in percent", alias="24h-APY")

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class InterestRates(BaseModel):
    """Annualized interest rates in percent."""

    apr: Decimal
    apy: Decimal

    model_config = ConfigDict(frozen=True)


__all__ = [
    "ApyResponse",
    "InterestRates",
    "PriceResponse",
]
