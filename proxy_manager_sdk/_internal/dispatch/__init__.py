"""Request dispatch for the Proxy Manager API.

WARNING: This is a system-level module used by the resource clients.
Use ProxyManagerClient from application code.
"""

from proxy_manager_sdk._internal.dispatch.client import RequestDispatcher
from proxy_manager_sdk._internal.dispatch.models import (
    API_ROOT,
    ContentType,
    FormData,
    PaginatedResult,
    Pagination,
    RequestOptions,
)

__all__ = [
    "API_ROOT",
    "RequestDispatcher",
    "ContentType",
    "FormData",
    "PaginatedResult",
    "Pagination",
    "RequestOptions",
]
