"""Token acquisition and renewal against the Nordigen token endpoints.

:class:`TokenClient` only talks to the token endpoints. Deciding when a token
is needed and attaching it to requests is done by
:class:`nordigen.http_client.NordigenHttpClient`.

Failures are not translated: a non-success status raises
``httpx.HTTPStatusError`` and a malformed body raises
``pydantic.ValidationError``, leaving the status code as the only way to tell
bad credentials from an unavailable service.
"""

import httpx

from .constants import TOKEN_NEW, TOKEN_REFRESH
from .log_config import logger
from .models.tokens import AccessToken, Credentials, Token, TokenRefresh
from .serialization import SerializationProfile

JSON_HEADERS = {"Content-Type": "application/json"}


class TokenClient:
    """Obtains access tokens with a secret ID and key pair.

    Attributes:
        _http_client: The httpx.AsyncClient shared with the request pipeline.
        _serialization: The serialization profile for token payloads.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        serialization: SerializationProfile | None = None,
    ):
        self._http_client = http_client
        self._serialization = serialization or SerializationProfile()
        logger.debug("TokenClient initialized.")

    async def _post(self, path: str, body: object) -> httpx.Response:
        response = await self._http_client.post(
            path,
            content=self._serialization.dump(body),
            headers=JSON_HEADERS,
        )
        logger.debug(f"Received token response: {response.status_code} for {response.url}")
        response.raise_for_status()
        return response

    async def new(self, credentials: Credentials) -> Token:
        """Requests a new access and refresh token pair.

        Args:
            credentials: The secret ID and key to authenticate with.

        Returns:
            The issued token.

        Raises:
            httpx.HTTPStatusError: If the token endpoint rejects the request.
            pydantic.ValidationError: If the response is not a valid token.
            ValueError: If the response body is empty.
        """
        logger.info(f"Requesting new access token from {TOKEN_NEW}")
        response = await self._post(TOKEN_NEW, credentials)
        token = self._serialization.load(response.content, Token)
        if token is None:
            raise ValueError("Token endpoint returned an empty body.")
        logger.info("Obtained new access token.")
        return token

    async def refresh(self, refresh_token: str) -> AccessToken:
        """Exchanges a refresh token for a new access token.

        Args:
            refresh_token: The ``refresh`` value of a previously issued token.

        Returns:
            The renewed access token.

        Raises:
            httpx.HTTPStatusError: If the token endpoint rejects the request.
            pydantic.ValidationError: If the response is not a valid token.
            ValueError: If the response body is empty.
        """
        logger.info("Refreshing access token.")
        response = await self._post(TOKEN_REFRESH, TokenRefresh(refresh=refresh_token))
        access_token = self._serialization.load(response.content, AccessToken)
        if access_token is None:
            raise ValueError("Token endpoint returned an empty body.")
        return access_token
