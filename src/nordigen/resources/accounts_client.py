"""Client for the Nordigen accounts endpoints.

Accounts are read-only: metadata, balances, details and transactions of an
account linked through a requisition.
"""

from datetime import date
from uuid import UUID

from ..constants import ACCOUNTS
from ..log_config import logger
from ..models.accounts import (
    Account,
    AccountDetails,
    AccountDetailsResponse,
    Balance,
    BalancesResponse,
    Transactions,
    TransactionsResponse,
)
from .base_client import BaseResourceClient, GettableMixin


class AccountsClient(GettableMixin, BaseResourceClient):
    """Client for ``accounts/{id}/`` and its sub-resources.

    ``get`` returns the account metadata; the other methods unwrap the
    envelope each sub-resource is returned in.
    """

    _entity_path: str = ACCOUNTS
    _entity_model: type[Account] = Account

    async def get_balances(self, account_id: str | UUID) -> list[Balance]:
        """Retrieve the balances of an account."""
        response = await self._api_client.get(
            f"{self._item_path(account_id)}balances/", BalancesResponse
        )
        return response.balances if response else []

    async def get_details(self, account_id: str | UUID) -> AccountDetails | None:
        """Retrieve the details of an account, such as owner name and currency."""
        response = await self._api_client.get(
            f"{self._item_path(account_id)}details/", AccountDetailsResponse
        )
        return response.account if response else None

    async def get_transactions(
        self,
        account_id: str | UUID,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> Transactions:
        """Retrieve booked and pending transactions of an account.

        Args:
            account_id: The account to query.
            date_from: Optional first booking date to include.
            date_to: Optional last booking date to include.
        """
        params: dict[str, str] = {}
        if date_from is not None:
            params["date_from"] = date_from.isoformat()
        if date_to is not None:
            params["date_to"] = date_to.isoformat()

        logger.info(f"Fetching transactions of account {account_id} with {params}")
        response = await self._api_client.get(
            f"{self._item_path(account_id)}transactions/",
            TransactionsResponse,
            params=params or None,
        )
        return response.transactions if response else Transactions()
