"""Pydantic model for banks and other account servicing institutions."""

from pydantic import Field

from ..serialization import ApiModel


class Institution(ApiModel):
    """An institution that end users can link accounts from.

    Attributes:
        id: Nordigen identifier, e.g. ``SANDBOXFINANCE_SFIN0000``.
        transaction_total_days: How many days of history the institution provides.
            The API sends this as a string; it is coerced to int.
        countries: ISO 3166 codes of the countries the institution serves.
    """

    id: str
    name: str
    bic: str | None = None
    transaction_total_days: int | None = Field(default=None, alias="transaction_total_days")
    countries: list[str] = Field(default_factory=list)
    logo: str | None = None
