"""Authenticated request pipeline for the Nordigen API.

This module provides :class:`NordigenHttpClient`, the single place where
requests are authenticated, bodies are encoded and decoded, cursor pagination
is followed and non-success responses are interpreted. Resource clients only
supply URL templates and call one of its primitives:

- :meth:`NordigenHttpClient.get` and :meth:`NordigenHttpClient.paginate`
- :meth:`NordigenHttpClient.post` and :meth:`NordigenHttpClient.put`
- :meth:`NordigenHttpClient.delete`

Requests are made once. There are no retries and no caching; every failure
reaches the caller of the primitive that hit it.
"""

import asyncio
import ssl
from collections.abc import AsyncIterator, Mapping
from typing import Any, Self, TypeVar

import certifi
import httpx

from .auth import JSON_HEADERS, TokenClient
from .config import NordigenSettings
from .exceptions import ConfigurationError, RequestFailedError
from .log_config import logger
from .models.base import PaginatedList
from .models.tokens import Credentials
from .serialization import SerializationProfile

T = TypeVar("T")

AUTHORIZATION = "Authorization"


class NordigenHttpClient:
    """Asynchronous HTTP client that applies the Nordigen authentication and codec rules.

    A bearer token is obtained lazily before the first request and attached to
    the shared httpx.AsyncClient, where it stays for the lifetime of this
    instance. The token is neither tracked for expiry nor renewed.

    Attributes:
        _settings: Configuration settings for the client.
        _credentials: Secret ID and key used to obtain the token.
        _base_url: The base URL for API requests.
        _serialization: Codec applied to every request and response body.
        _http_client: The underlying httpx.AsyncClient for making requests.
        _should_close_client: Flag indicating if this instance owns the _http_client.
        _token_client: Client for the token endpoints, sharing _http_client.
        _auth_lock: Lock making token acquisition happen once per instance.
    """

    def __init__(
        self,
        settings: NordigenSettings,
        credentials: Credentials,
        *,
        base_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        serialization: SerializationProfile | None = None,
    ):
        """Initialize the NordigenHttpClient.

        Args:
            settings: Configuration settings for the client behavior.
            credentials: Secret ID and key used to obtain an access token.
            base_url: Optional override of ``settings.base_url``.
            http_client: Optional pre-configured httpx.AsyncClient instance. It is
                not closed by this client and must carry the API base URL as its
                own `base_url`.
            serialization: Optional serialization profile. Defaults to one bound
                to the time zone from settings.

        Raises:
            ConfigurationError: If both `base_url` and `http_client` are given,
                or the injected client has no base URL.
        """
        if http_client is not None:
            if base_url is not None:
                raise ConfigurationError(
                    "Pass 'base_url' either directly or on the injected http_client, not both."
                )
            if not str(http_client.base_url):
                raise ConfigurationError("The injected http_client must have a base_url.")
            base_url = str(http_client.base_url)

        self._settings = settings
        self._credentials = credentials
        self._base_url: str = (base_url or settings.base_url).rstrip("/") + "/"
        self._serialization = serialization or SerializationProfile(
            timezone=settings.zone()
        )

        self._should_close_client = http_client is None
        self._http_client = http_client or self._create_default_http_client()
        self._token_client = TokenClient(self._http_client, self._serialization)
        self._auth_lock = asyncio.Lock()

        logger.debug(f"NordigenHttpClient initialized for {self._base_url}")

    def _create_default_http_client(self) -> httpx.AsyncClient:
        """Create a default httpx.AsyncClient with configured settings.

        Returns:
            httpx.AsyncClient: Configured HTTP client with SSL verification,
                timeout settings, and user agent header.
        """
        try:
            ssl_context = ssl.create_default_context(cafile=certifi.where())
            verify_ssl: ssl.SSLContext | bool = ssl_context
            logger.debug("Using certifi SSL context.")
        except OSError:
            verify_ssl = True
            logger.warning(
                "certifi bundle could not be loaded. Using default SSL verification."
            )

        return httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._settings.request_timeout,
            verify=verify_ssl,
            headers={"User-Agent": self._settings.user_agent},
        )

    @property
    def serialization(self) -> SerializationProfile:
        """The serialization profile shared by all requests of this client."""
        return self._serialization

    @property
    def tokens(self) -> TokenClient:
        """Client for the token endpoints."""
        return self._token_client

    async def _ensure_authenticated(self) -> httpx.AsyncClient:
        """Return the HTTP client, obtaining and attaching a token on first use."""
        if AUTHORIZATION in self._http_client.headers:
            return self._http_client

        async with self._auth_lock:
            # Concurrent first requests wait here for the token fetched by the first one.
            if AUTHORIZATION not in self._http_client.headers:
                token = await self._token_client.new(self._credentials)
                self._http_client.headers[AUTHORIZATION] = f"Bearer {token.access}"
                logger.debug("Bearer token attached to the shared HTTP client.")

        return self._http_client

    def _request_failed(self, response: httpx.Response) -> RequestFailedError:
        logger.error(
            f"{response.request.method} {response.url} failed with status "
            f"{response.status_code}: {response.text}"
        )
        return RequestFailedError(response.status_code, response.text, response=response)

    async def get(
        self,
        uri: str,
        result_type: type[T],
        *,
        params: Mapping[str, Any] | None = None,
    ) -> T | None:
        """Fetch a single resource.

        Args:
            uri: Path relative to the base URL, or an absolute URL.
            result_type: Type to decode the response body into.
            params: Optional query parameters.

        Returns:
            The decoded body, or None if the body is empty or JSON null.

        Raises:
            httpx.HTTPStatusError: If the response has a non-success status.
            httpx.RequestError: For transport failures.
            pydantic.ValidationError: If the body does not match ``result_type``.
        """
        client = await self._ensure_authenticated()
        logger.debug(f"Sending request: GET {uri}")
        response = await client.get(uri, params=params)
        logger.debug(f"Received response: {response.status_code} for {response.url}")
        logger.trace(f"Response headers: {dict(response.headers)}")
        response.raise_for_status()
        return self._serialization.load(response.content, result_type)

    async def paginate(
        self,
        uri: str,
        item_type: type[T],
        *,
        params: Mapping[str, Any] | None = None,
        cancellation: asyncio.Event | None = None,
    ) -> AsyncIterator[T]:
        """Iterate over all items of a paginated listing.

        Pages are fetched one at a time as the iterator is consumed, following
        each page's ``next`` URI. Abandoning the iterator stops further fetches.

        Args:
            uri: Path or URL of the first page.
            item_type: Type of the items in each page's ``results``.
            params: Optional query parameters for the first page. Later pages
                carry their own query in ``next``.
            cancellation: Optional event checked before each page is fetched.
                Once set, iteration ends without an error.

        Yields:
            Items from each page, in page order.

        Raises:
            Whatever :meth:`get` raises for a page.
        """
        page_type = PaginatedList[item_type]  # type: ignore[valid-type]
        next_uri: str | None = uri
        page_params = params
        while next_uri is not None:
            if cancellation is not None and cancellation.is_set():
                logger.debug(f"Pagination of {uri} cancelled before fetching {next_uri}")
                return

            page = await self.get(next_uri, page_type, params=page_params)
            if page is None or page.results is None:
                logger.debug(f"Page at {next_uri} has no results, stopping iteration.")
                return

            for item in page.results:
                yield item

            next_uri = self._resolve_next(page.next) if page.next else None
            page_params = None

    def _resolve_next(self, next_link: str) -> str:
        """Keep only the path and query of a next link and place them on the API host.

        Links that name another scheme or host, such as an internal proxy address,
        are never followed with the bearer token.
        """
        path_and_query = httpx.URL(next_link).raw_path.decode("ascii")
        return str(self._http_client.base_url.join(path_and_query))

    async def post(self, uri: str, body: Any, result_type: type[T]) -> T | None:
        """Create a resource.

        Args:
            uri: Path relative to the base URL, or an absolute URL.
            body: Request body, serialized with the serialization profile.
            result_type: Type to decode a successful response body into.

        Returns:
            The decoded body, or None if the response has no content.

        Raises:
            RequestFailedError: If the response has a non-success status.
        """
        return await self._submit("POST", uri, body, result_type)

    async def put(self, uri: str, body: Any, result_type: type[T]) -> T | None:
        """Replace or update a resource. See :meth:`post`."""
        return await self._submit("PUT", uri, body, result_type)

    async def _submit(
        self, method: str, uri: str, body: Any, result_type: type[T]
    ) -> T | None:
        client = await self._ensure_authenticated()
        logger.debug(f"Sending request: {method} {uri}")
        response = await client.request(
            method,
            uri,
            content=self._serialization.dump(body),
            headers=JSON_HEADERS,
        )
        logger.debug(f"Received response: {response.status_code} for {response.url}")
        logger.trace(f"Response headers: {dict(response.headers)}")
        if not response.is_success:
            raise self._request_failed(response)
        return self._serialization.load(response.content, result_type)

    async def delete(self, uri: str) -> None:
        """Delete a resource.

        Raises:
            RequestFailedError: If the response has a non-success status.
        """
        client = await self._ensure_authenticated()
        logger.debug(f"Sending request: DELETE {uri}")
        response = await client.delete(uri)
        logger.debug(f"Received response: {response.status_code} for {response.url}")
        if not response.is_success:
            raise self._request_failed(response)

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._should_close_client and not self._http_client.is_closed:
            await self._http_client.aclose()
            logger.info(f"NordigenHttpClient internal HTTP client closed. Client ID: {id(self)}.")

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        await self.aclose()
