from unittest.mock import AsyncMock

import pytest

from nordigen.models.institutions import Institution
from nordigen.resources import InstitutionsClient


@pytest.fixture
def mock_api_client():
    client = AsyncMock()
    client.get = AsyncMock()
    return client


@pytest.fixture
def institutions_client(mock_api_client) -> InstitutionsClient:
    return InstitutionsClient(api_client=mock_api_client)


@pytest.mark.asyncio
async def test_get_by_country(institutions_client, mock_api_client):
    institution = Institution(id="SANDBOXFINANCE_SFIN0000", name="Sandbox Finance")
    mock_api_client.get.return_value = [institution]

    result = await institutions_client.get_by_country("lv")

    mock_api_client.get.assert_awaited_once_with(
        "institutions/", list[Institution], params={"country": "lv"}
    )
    assert result == [institution]


@pytest.mark.asyncio
async def test_get_by_country_empty_body(institutions_client, mock_api_client):
    mock_api_client.get.return_value = None

    assert await institutions_client.get_by_country("lv") == []


@pytest.mark.asyncio
async def test_get_institution(institutions_client, mock_api_client):
    institution = Institution(id="SANDBOXFINANCE_SFIN0000", name="Sandbox Finance")
    mock_api_client.get.return_value = institution

    result = await institutions_client.get("SANDBOXFINANCE_SFIN0000")

    mock_api_client.get.assert_awaited_once_with(
        "institutions/SANDBOXFINANCE_SFIN0000/", Institution
    )
    assert result is institution


def test_transaction_total_days_is_coerced_from_string():
    institution = Institution.model_validate(
        {"id": "X", "name": "Y", "transaction_total_days": "730", "countries": ["LV"]}
    )
    assert institution.transaction_total_days == 730
