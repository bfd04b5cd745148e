# tests/conftest.py
import pytest

from nordigen.config import NordigenSettings
from nordigen.http_client import NordigenHttpClient
from nordigen.models.tokens import Credentials

BASE_URL = "https://ob.nordigen.com/api/v2/"
TOKEN_URL = f"{BASE_URL}token/new/"


@pytest.fixture
def settings() -> NordigenSettings:
    """Settings pointing at the production base URL, with test credentials."""
    return NordigenSettings(
        base_url=BASE_URL,
        secret_id="abc",
        secret_key="xyz",
        timezone="UTC",
    )


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(secret_id="abc", secret_key="xyz")


@pytest.fixture
def http_client(settings, credentials) -> NordigenHttpClient:
    """A NordigenHttpClient using its own default httpx.AsyncClient."""
    return NordigenHttpClient(settings, credentials)


@pytest.fixture
def add_token_response(httpx_mock):
    """Registers a successful response from the token endpoint."""

    def _add(access: str = "tok123") -> None:
        httpx_mock.add_response(
            method="POST",
            url=TOKEN_URL,
            json={
                "access": access,
                "access_expires": 86400,
                "refresh": "refresh-token",
                "refresh_expires": 2592000,
            },
        )

    return _add


def token_requests(httpx_mock) -> list:
    """Returns the requests sent to the token endpoint."""
    return [r for r in httpx_mock.get_requests() if str(r.url) == TOKEN_URL]
