import httpx

from .config import NordigenSettings, get_settings, resolve_zone
from .exceptions import ConfigurationError
from .http_client import NordigenHttpClient
from .log_config import logger
from .models.tokens import Credentials
from .resources import (
    AccountsClient,
    AgreementsClient,
    InstitutionsClient,
    RequisitionsClient,
)
from .serialization import SerializationProfile


class NordigenClient(NordigenHttpClient):
    """Asynchronous client for the Nordigen open banking API.

    Resource clients for the API's resources are available as properties.
    The first request obtains an access token with the configured secret ID
    and key; the token is then used for every later request of this instance.

    Typical usage:
    ```python
    async with NordigenClient(secret_id="...", secret_key="...") as client:
        async for requisition in client.requisitions.iterate():
            for account_id in requisition.accounts:
                balances = await client.accounts.get_balances(account_id)
    ```

    Attributes:
        accounts (AccountsClient): Client for account endpoints.
        agreements (AgreementsClient): Client for end user agreement endpoints.
        institutions (InstitutionsClient): Client for institution endpoints.
        requisitions (RequisitionsClient): Client for requisition endpoints.
        tokens (TokenClient): Client for the token endpoints.
    """

    def __init__(
        self,
        settings: NordigenSettings | None = None,
        *,
        secret_id: str | None = None,
        secret_key: str | None = None,
        base_url: str | None = None,
        timezone: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initializes the NordigenClient.

        Credentials passed directly take precedence over those in `settings`,
        which are loaded from ``NORDIGEN_*`` environment variables or .env files.

        Args:
            settings: An optional `NordigenSettings` instance. If `None`, global
                settings are loaded via `nordigen.config.get_settings()`.
            secret_id: Secret ID, overriding `settings.secret_id`.
            secret_key: Secret key, overriding `settings.secret_key`.
            base_url: Base URL of the API, overriding `settings.base_url`.
            timezone: IANA time zone name, overriding `settings.timezone`.
            http_client: Optional pre-configured httpx.AsyncClient.

        Raises:
            ConfigurationError: If no secret ID or secret key is available, or
                the time zone is unknown.
        """
        resolved_settings = settings or get_settings()

        _secret_id = secret_id or resolved_settings.secret_id
        _secret_key = secret_key or resolved_settings.secret_key
        if not (_secret_id and _secret_key):
            raise ConfigurationError(
                "NordigenClient requires 'secret_id' and 'secret_key'."
            )
        if secret_id and secret_key:
            logger.info("Secret ID and key were directly passed as parameters.")
        else:
            logger.info("Secret ID and key were loaded from settings or environment variables.")

        zone = resolve_zone(timezone) if timezone else resolved_settings.zone()

        super().__init__(
            resolved_settings,
            Credentials(secret_id=_secret_id, secret_key=_secret_key),
            base_url=base_url,
            http_client=http_client,
            serialization=SerializationProfile(timezone=zone),
        )

        self._accounts = AccountsClient(api_client=self)
        self._agreements = AgreementsClient(api_client=self)
        self._institutions = InstitutionsClient(api_client=self)
        self._requisitions = RequisitionsClient(api_client=self)

        logger.debug("NordigenClient initialized successfully.")

    @property
    def accounts(self) -> AccountsClient:
        """Provides access to the AccountsClient for account APIs."""
        return self._accounts

    @property
    def agreements(self) -> AgreementsClient:
        """Provides access to the AgreementsClient for end user agreement APIs."""
        return self._agreements

    @property
    def institutions(self) -> InstitutionsClient:
        """Provides access to the InstitutionsClient for institution APIs."""
        return self._institutions

    @property
    def requisitions(self) -> RequisitionsClient:
        """Provides access to the RequisitionsClient for requisition APIs."""
        return self._requisitions
