"""Client for the Nordigen institutions endpoint."""

from ..constants import INSTITUTIONS
from ..log_config import logger
from ..models.institutions import Institution
from .base_client import BaseResourceClient, GettableMixin


class InstitutionsClient(GettableMixin, BaseResourceClient):
    _entity_path: str = INSTITUTIONS
    _entity_model: type[Institution] = Institution

    async def get_by_country(self, country: str) -> list[Institution]:
        """List the institutions available in a country.

        Args:
            country: ISO 3166 two-letter country code, e.g. ``"lv"``.
        """
        logger.info(f"Fetching institutions for country: {country}")
        institutions = await self._api_client.get(
            self._entity_path, list[Institution], params={"country": country}
        )
        return institutions or []
