"""Client for the Nordigen requisitions endpoint."""

from ..constants import REQUISITIONS
from ..models.requisitions import Requisition
from .base_client import (
    BaseResourceClient,
    CreatableMixin,
    DeletableMixin,
    GettableMixin,
    IterableMixin,
)


class RequisitionsClient(
    GettableMixin, IterableMixin, CreatableMixin, DeletableMixin, BaseResourceClient
):
    """Client for ``requisitions/``.

    A requisition links an end user to an institution; once it reaches
    ``RequisitionStatus.LINKED`` its ``accounts`` can be read through
    `AccountsClient`.
    """

    _entity_path: str = REQUISITIONS
    _entity_model: type[Requisition] = Requisition
