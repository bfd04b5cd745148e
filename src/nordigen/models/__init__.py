"""Pydantic models for Nordigen API payloads."""

from .accounts import (
    Account,
    AccountDetails,
    AccountReference,
    AccountStatus,
    Balance,
    BalanceType,
    Transaction,
    Transactions,
)
from .agreements import (
    EndUserAgreement,
    EndUserAgreementAcceptance,
    EndUserAgreementCreation,
)
from .base import AmountValue, PaginatedList
from .institutions import Institution
from .requisitions import Requisition, RequisitionCreation, RequisitionStatus
from .tokens import AccessToken, Credentials, Token, TokenRefresh

__all__ = [
    "AccessToken",
    "Account",
    "AccountDetails",
    "AccountReference",
    "AccountStatus",
    "AmountValue",
    "Balance",
    "BalanceType",
    "Credentials",
    "EndUserAgreement",
    "EndUserAgreementAcceptance",
    "EndUserAgreementCreation",
    "Institution",
    "PaginatedList",
    "Requisition",
    "RequisitionCreation",
    "RequisitionStatus",
    "Token",
    "TokenRefresh",
    "Transaction",
    "Transactions",
]
