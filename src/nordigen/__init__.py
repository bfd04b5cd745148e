"""nordigen: An asynchronous Python client for the Nordigen open banking API."""

__version__ = "0.1.0"

from .client import NordigenClient
from .config import NordigenSettings, get_settings
from .exceptions import ConfigurationError, NordigenError, RequestFailedError
from .http_client import NordigenHttpClient
from .log_config import configure_logging
from .models import (
    AccessToken,
    Account,
    AccountDetails,
    AccountStatus,
    AmountValue,
    Balance,
    BalanceType,
    Credentials,
    EndUserAgreement,
    EndUserAgreementAcceptance,
    EndUserAgreementCreation,
    Institution,
    PaginatedList,
    Requisition,
    RequisitionCreation,
    RequisitionStatus,
    Token,
    Transaction,
    Transactions,
)
from .serialization import SerializationProfile

__all__ = [
    "__version__",
    # Clients
    "NordigenClient",
    "NordigenHttpClient",
    "NordigenSettings",
    "SerializationProfile",
    "configure_logging",
    "get_settings",
    # Exceptions
    "ConfigurationError",
    "NordigenError",
    "RequestFailedError",
    # Models
    "AccessToken",
    "Account",
    "AccountDetails",
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
    "Transaction",
    "Transactions",
]
