"""Base class and reusable mixins for Nordigen resource clients.

Nordigen resources follow one URL scheme: a collection path such as
``requisitions/`` and item paths such as ``requisitions/{id}/``. The mixins
map the common operations onto the request pipeline for any resource that
declares its path and model:

- ``GettableMixin``: ``get(id)``
- ``IterableMixin``: ``iterate()`` over the paginated collection
- ``CreatableMixin``: ``create(body)``
- ``DeletableMixin``: ``delete(id)``
"""

import asyncio
from collections.abc import AsyncIterator
from typing import TYPE_CHECKING, Any, Protocol
from uuid import UUID

from ..log_config import logger

if TYPE_CHECKING:
    from ..http_client import NordigenHttpClient


class ResourceClientProtocol(Protocol):
    """Attributes the mixins expect from the class they are mixed into."""

    _api_client: "NordigenHttpClient"
    _entity_path: str
    _entity_model: type[Any]

    def _item_path(self, entity_id: str | UUID) -> str: ...


class BaseResourceClient:
    """Base class for all resource clients.

    Attributes:
        _api_client: The `NordigenHttpClient` used for making requests.
        _entity_path: Collection path of the resource, with a trailing slash.
            Must be defined by concrete subclasses.
        _entity_model: Pydantic model for a single entity.
    """

    _entity_path: str = ""
    _entity_model: type[Any]

    def __init__(self, api_client: "NordigenHttpClient"):
        """Initialize the base resource client.

        Args:
            api_client: The request pipeline to delegate to.
        """
        self._api_client = api_client
        logger.debug(f"{self.__class__.__name__} initialized for path: {self._entity_path}")

    def _item_path(self, entity_id: str | UUID) -> str:
        return f"{self._entity_path}{entity_id}/"


class GettableMixin:
    async def get(self: ResourceClientProtocol, entity_id: str | UUID) -> Any:
        """Retrieve a single entity by its ID.

        Returns:
            The entity parsed into ``_entity_model``, or None for an empty response.
        """
        logger.info(f"Fetching {self._entity_model.__name__} with ID: {entity_id}")
        return await self._api_client.get(self._item_path(entity_id), self._entity_model)


class IterableMixin:
    def iterate(
        self: ResourceClientProtocol, cancellation: asyncio.Event | None = None
    ) -> AsyncIterator[Any]:
        """Iterate through all entities, following the API's page links.

        Args:
            cancellation: Optional event that stops iteration before the next
                page is fetched.

        Yields:
            Entities parsed into ``_entity_model``.
        """
        logger.info(f"Iterating {self._entity_path}")
        return self._api_client.paginate(
            self._entity_path, self._entity_model, cancellation=cancellation
        )


class CreatableMixin:
    async def create(self: ResourceClientProtocol, body: Any) -> Any:
        """Create an entity from its creation payload.

        Raises:
            RequestFailedError: If the API rejects the request.
        """
        logger.info(f"Creating {self._entity_model.__name__} at {self._entity_path}")
        return await self._api_client.post(self._entity_path, body, self._entity_model)


class DeletableMixin:
    async def delete(self: ResourceClientProtocol, entity_id: str | UUID) -> None:
        """Delete an entity by its ID.

        Raises:
            RequestFailedError: If the API rejects the request.
        """
        logger.info(f"Deleting {self._entity_model.__name__} with ID: {entity_id}")
        await self._api_client.delete(self._item_path(entity_id))
