"""Python client for the MediVault API."""

from medivault.client.cache import QueryCache, make_key
from medivault.client.api_client import (
    ApiError,
    UnauthorizedError,
    LoginRedirect,
    MediVaultClient,
    DOCUMENTS_STALE_TIME,
)

__all__ = [
    "QueryCache",
    "make_key",
    "ApiError",
    "UnauthorizedError",
    "LoginRedirect",
    "MediVaultClient",
    "DOCUMENTS_STALE_TIME",
]
