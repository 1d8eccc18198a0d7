"""Public models for the Proxy Manager SDK."""

from proxy_manager_sdk._internal.dispatch.models import (
    ContentType,
    FormData,
    PaginatedResult,
    Pagination,
    RequestOptions,
)
from proxy_manager_sdk.models.token import Token

__all__ = [
    "ContentType",
    "FormData",
    "PaginatedResult",
    "Pagination",
    "RequestOptions",
    "Token",
]
