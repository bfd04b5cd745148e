"""Pydantic models for requisitions, the links between end users and institutions."""

from enum import Enum
from uuid import UUID

from pydantic import Field

from ..serialization import ApiModel, ZonedDateTime


class RequisitionStatus(str, Enum):
    """Stage of the account linking flow, as the API's short codes."""

    CREATED = "CR"
    GIVING_CONSENT = "GC"
    UNDERGOING_AUTHENTICATION = "UA"
    REJECTED = "RJ"
    SELECTING_ACCOUNTS = "SA"
    GRANTING_ACCESS = "GA"
    LINKED = "LN"
    EXPIRED = "EX"


class Requisition(ApiModel):
    id: UUID
    created: ZonedDateTime | None = None
    redirect: str | None = None
    status: RequisitionStatus
    institution_id: str = Field(alias="institution_id")
    agreement: UUID | None = None
    reference: str | None = None
    accounts: list[UUID] = Field(default_factory=list)
    user_language: str | None = Field(default=None, alias="user_language")
    link: str | None = None
    account_selection: bool | None = Field(default=None, alias="account_selection")
    redirect_immediate: bool | None = Field(default=None, alias="redirect_immediate")


class RequisitionCreation(ApiModel):
    """Request body for creating a requisition.

    Attributes:
        redirect: URL the end user is sent back to after authenticating.
        agreement: Optional end user agreement; the institution's default terms
            apply when omitted.
        reference: Caller-chosen unique reference.
    """

    redirect: str
    institution_id: str = Field(alias="institution_id")
    agreement: UUID | None = None
    reference: str | None = None
    user_language: str | None = Field(default=None, alias="user_language")
    account_selection: bool | None = Field(default=None, alias="account_selection")
    redirect_immediate: bool | None = Field(default=None, alias="redirect_immediate")
