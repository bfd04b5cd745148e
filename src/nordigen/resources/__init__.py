# nordigen/resources/__init__.py
"""Exposes the resource client classes."""

from .accounts_client import AccountsClient
from .agreements_client import AgreementsClient
from .base_client import BaseResourceClient
from .institutions_client import InstitutionsClient
from .requisitions_client import RequisitionsClient

__all__ = [
    "AccountsClient",
    "AgreementsClient",
    "BaseResourceClient",
    "InstitutionsClient",
    "RequisitionsClient",
]
