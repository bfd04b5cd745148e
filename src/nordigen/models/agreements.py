"""Pydantic models for end user agreements."""

from uuid import UUID

from pydantic import Field

from ..serialization import ApiModel, ZonedDateTime

DEFAULT_ACCESS_SCOPE = ("balances", "details", "transactions")


class EndUserAgreement(ApiModel):
    """Terms under which account data of an institution may be accessed."""

    id: UUID
    created: ZonedDateTime
    institution_id: str = Field(alias="institution_id")
    max_historical_days: int = Field(alias="max_historical_days")
    access_valid_for_days: int = Field(alias="access_valid_for_days")
    access_scope: list[str] = Field(default_factory=list, alias="access_scope")
    accepted: ZonedDateTime | None = None


class EndUserAgreementCreation(ApiModel):
    """Request body for creating an end user agreement."""

    institution_id: str = Field(alias="institution_id")
    max_historical_days: int = Field(default=90, alias="max_historical_days")
    access_valid_for_days: int = Field(default=90, alias="access_valid_for_days")
    access_scope: list[str] = Field(
        default_factory=lambda: list(DEFAULT_ACCESS_SCOPE), alias="access_scope"
    )


class EndUserAgreementAcceptance(ApiModel):
    """Request body for accepting an end user agreement on behalf of a user."""

    user_agent: str = Field(alias="user_agent")
    ip_address: str = Field(alias="ip_address")
