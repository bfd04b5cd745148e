"""Models for the token endpoints."""

from pydantic import ConfigDict, Field

from ..serialization import ApiModel


class Credentials(ApiModel):
    """Secret ID and key pair used to obtain access tokens.

    Serialized as ``{"secretId": ..., "secretKey": ...}``.
    """

    model_config = ConfigDict(frozen=True)

    secret_id: str
    secret_key: str


class Token(ApiModel):
    """Access and refresh token pair returned by ``token/new/``.

    Expiry values are in seconds and are not tracked by the client.
    """

    access: str
    access_expires: int | None = Field(default=None, alias="access_expires")
    refresh: str | None = None
    refresh_expires: int | None = Field(default=None, alias="refresh_expires")


class TokenRefresh(ApiModel):
    """Request body for ``token/refresh/``."""

    refresh: str


class AccessToken(ApiModel):
    """A renewed access token returned by ``token/refresh/``."""

    access: str
    access_expires: int | None = Field(default=None, alias="access_expires")
