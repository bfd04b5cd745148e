"""Custom exception classes for the nordigen library.

Only failures the library interprets itself get a class here. Transport
problems (``httpx.HTTPError`` and friends, including non-success GET and
token responses) and decoding problems (``pydantic.ValidationError``) are
surfaced to the caller unchanged.
"""

import httpx


class NordigenError(Exception):
    """Base exception class for all nordigen errors."""

    def __init__(
        self,
        message: str,
        *,
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
    ):
        """Initializes the base exception.

        Args:
            message: The error message.
            response: Optional httpx.Response object associated with the error.
            request: Optional httpx.Request object associated with the error.
        """
        super().__init__(message)
        self.message = message
        self.response = response
        self.request = request

    def __str__(self) -> str:
        if self.response is not None:
            url_info = self.response.request.url if self.response.has_request else "N/A"
            return (
                f"{self.message} (Status: {self.response.status_code}, URL: {url_info})"
            )
        if isinstance(self.request, httpx.Request):
            return f"{self.message} (URL: {self.request.url})"
        return self.message


class ConfigurationError(NordigenError):
    """Represents an error in the library's configuration."""

    def __init__(self, message: str):
        super().__init__(message, response=None)


class RequestFailedError(NordigenError):
    """Raised when a POST, PUT or DELETE request gets a non-success status.

    The response body is kept as raw text, since error bodies from the API
    do not follow the schema of the expected success payload.

    Attributes:
        status_code: The HTTP status code of the response.
        content: The full response body as text.
    """

    def __init__(
        self,
        status_code: int,
        content: str,
        *,
        response: httpx.Response | None = None,
    ):
        super().__init__(content, response=response)
        self.status_code = status_code
        self.content = content

    def __str__(self) -> str:
        return f"Request failed with status {self.status_code}: {self.content}"
