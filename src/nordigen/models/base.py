"""Envelope models shared by several Nordigen endpoints."""

from decimal import Decimal
from typing import Generic, TypeVar

from ..serialization import ApiModel

ItemType = TypeVar("ItemType")


class PaginatedList(ApiModel, Generic[ItemType]):
    """One page of a cursor-paginated listing.

    Attributes:
        count: Total number of items across all pages (informational).
        next: URI of the next page, or None on the last page. Only its path and
            query are followed, on the API host.
        previous: URI of the previous page. Not used when walking pages.
        results: Items on this page. None is treated as the end of the listing.
    """

    count: int | None = None
    next: str | None = None
    previous: str | None = None
    results: list[ItemType] | None = None


class AmountValue(ApiModel):
    """A monetary amount with its ISO 4217 currency code."""

    amount: Decimal
    currency: str
