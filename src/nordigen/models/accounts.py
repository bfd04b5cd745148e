"""Pydantic models for accounts, balances, details and transactions.

Account metadata uses Nordigen's snake_case names, while balances, details
and transactions follow the Berlin Group camelCase schema.
"""

from datetime import date
from enum import Enum
from uuid import UUID

from pydantic import Field

from ..serialization import ApiModel, ZonedDateTime
from .base import AmountValue


class AccountStatus(str, Enum):
    """Processing status of an account."""

    DISCOVERED = "DISCOVERED"
    ERROR = "ERROR"
    EXPIRED = "EXPIRED"
    PROCESSING = "PROCESSING"
    READY = "READY"
    SUSPENDED = "SUSPENDED"


class BalanceType(str, Enum):
    """Type of a reported balance."""

    CLOSING_BOOKED = "closingBooked"
    EXPECTED = "expected"
    FORWARD_AVAILABLE = "forwardAvailable"
    INTERIM_AVAILABLE = "interimAvailable"
    INTERIM_BOOKED = "interimBooked"
    NON_INVOICED = "nonInvoiced"
    OPENING_BOOKED = "openingBooked"
    INFORMATION = "information"


class Account(ApiModel):
    """Account metadata returned by ``accounts/{id}/``."""

    id: UUID
    created: ZonedDateTime
    last_accessed: ZonedDateTime | None = Field(default=None, alias="last_accessed")
    iban: str | None = None
    institution_id: str = Field(alias="institution_id")
    status: AccountStatus
    owner_name: str | None = Field(default=None, alias="owner_name")


class AccountDetails(ApiModel):
    resource_id: str | None = None
    iban: str | None = None
    bban: str | None = None
    bic: str | None = None
    currency: str | None = None
    owner_name: str | None = None
    name: str | None = None
    display_name: str | None = None
    product: str | None = None
    cash_account_type: str | None = None
    status: str | None = None
    usage: str | None = None
    details: str | None = None


class Balance(ApiModel):
    balance_amount: AmountValue
    balance_type: BalanceType
    credit_limit_included: bool | None = None
    last_change_date_time: ZonedDateTime | None = None
    reference_date: date | None = None
    last_committed_transaction: str | None = None


class AccountReference(ApiModel):
    iban: str | None = None
    bban: str | None = None
    currency: str | None = None


class Transaction(ApiModel):
    """A single booked or pending transaction."""

    transaction_id: str | None = None
    internal_transaction_id: str | None = None
    entry_reference: str | None = None
    booking_date: date | None = None
    value_date: date | None = None
    booking_date_time: ZonedDateTime | None = None
    value_date_time: ZonedDateTime | None = None
    transaction_amount: AmountValue
    creditor_name: str | None = None
    creditor_account: AccountReference | None = None
    debtor_name: str | None = None
    debtor_account: AccountReference | None = None
    remittance_information_unstructured: str | None = None
    remittance_information_unstructured_array: list[str] | None = None
    bank_transaction_code: str | None = None
    proprietary_bank_transaction_code: str | None = None
    additional_information: str | None = None


class Transactions(ApiModel):
    """Booked and pending transactions of an account."""

    booked: list[Transaction] = Field(default_factory=list)
    pending: list[Transaction] = Field(default_factory=list)


class BalancesResponse(ApiModel):
    balances: list[Balance] = Field(default_factory=list)


class AccountDetailsResponse(ApiModel):
    account: AccountDetails


class TransactionsResponse(ApiModel):
    transactions: Transactions
