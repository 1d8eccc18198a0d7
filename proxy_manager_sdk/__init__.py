"""Proxy Manager SDK for Python.

This SDK provides an async client for the Nginx Proxy Manager API.

Public API:
    ProxyManagerClient - User-facing client, one attribute per resource
    MemoryTokenStore - Default in-memory bearer token stack
    exceptions - ApiError and friends

Internal (system-level, not for direct use):
    _internal.dispatch - Request dispatch and response normalization
"""

from proxy_manager_sdk._version import __version__
from proxy_manager_sdk.client import ProxyManagerClient, get_client
from proxy_manager_sdk.exceptions import ApiError, ProxyManagerError
from proxy_manager_sdk.models import FormData, PaginatedResult, Pagination, Token
from proxy_manager_sdk.token_store import MemoryTokenStore, TokenStore

__all__ = [
    "__version__",
    "ApiError",
    "FormData",
    "MemoryTokenStore",
    "PaginatedResult",
    "Pagination",
    "ProxyManagerClient",
    "ProxyManagerError",
    "Token",
    "TokenStore",
    "get_client",
]
