"""Client for the Nordigen end user agreements endpoint."""

from uuid import UUID

from ..constants import AGREEMENTS
from ..log_config import logger
from ..models.agreements import EndUserAgreement, EndUserAgreementAcceptance
from .base_client import (
    BaseResourceClient,
    CreatableMixin,
    DeletableMixin,
    GettableMixin,
    IterableMixin,
)


class AgreementsClient(
    GettableMixin, IterableMixin, CreatableMixin, DeletableMixin, BaseResourceClient
):
    """Client for ``agreements/enduser/``.

    Provides `get`, `iterate`, `create` and `delete` through the mixins and
    adds `accept` for accepting an agreement on behalf of an end user.
    """

    _entity_path: str = AGREEMENTS
    _entity_model: type[EndUserAgreement] = EndUserAgreement

    async def accept(
        self, agreement_id: str | UUID, acceptance: EndUserAgreementAcceptance
    ) -> EndUserAgreement | None:
        """Accept an end user agreement.

        Args:
            agreement_id: The agreement to accept.
            acceptance: User agent and IP address of the accepting end user.

        Raises:
            RequestFailedError: If the API rejects the acceptance.
        """
        logger.info(f"Accepting end user agreement {agreement_id}")
        return await self._api_client.put(
            f"{self._item_path(agreement_id)}accept/", acceptance, EndUserAgreement
        )
