# nordigen/constants.py
"""Constants for the Nordigen API: base URL, user agent and endpoint paths.

Paths are relative to the versioned base URL and keep the trailing slash the
API requires.
"""

NORDIGEN_API_BASE_URL = "https://ob.nordigen.com/api/v2/"
DEFAULT_USER_AGENT = "nordigen-python/0.1.0"
DEFAULT_TIMEZONE = "UTC"

TOKEN_NEW = "token/new/"
TOKEN_REFRESH = "token/refresh/"

ACCOUNTS = "accounts/"
AGREEMENTS = "agreements/enduser/"
INSTITUTIONS = "institutions/"
REQUISITIONS = "requisitions/"
