"""Pydantic models for request dispatch.

These models match the wire contract of the Proxy Manager API (/api/*).
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Constants
# =============================================================================

API_ROOT = "/api/"
DEFAULT_TIMEOUT_MS = 15000

HEADER_DATASET_TOTAL = "X-Dataset-Total"
HEADER_DATASET_OFFSET = "X-Dataset-Offset"
HEADER_DATASET_LIMIT = "X-Dataset-Limit"

# =============================================================================
# Request Models
# =============================================================================


class ContentType(str, Enum):
    """Content type policy for a request body."""

    JSON = "application/json; charset=UTF-8"
    MULTIPART = "multipart/form-data"


class RequestOptions(BaseModel):
    """Per-call request configuration.

    Fields:
        content_type: Body encoding (default: JSON)
        process_data: Serialize structured bodies (True) or pass them through raw
            (False, required for multipart uploads)
        timeout_ms: Milliseconds before the call is abandoned (default: the
            dispatcher timeout, 15000 unless configured otherwise)
    """

    content_type: ContentType = ContentType.JSON
    process_data: bool = True
    timeout_ms: int | None = Field(default=None, gt=0)

    model_config = ConfigDict(frozen=True)


class FormData:
    """Multipart form body: plain fields plus files.

    Example:
        form = FormData()
        form.add_file("certificate", "cert.pem", pem_bytes)
        form.add_file("certificate_key", "key.pem", key_bytes)
    """

    def __init__(self) -> None:
        self._fields: dict[str, str] = {}
        self._files: dict[str, tuple[str, bytes, str]] = {}

    def add_field(self, name: str, value: str) -> "FormData":
        self._fields[name] = value
        return self

    def add_file(
        self,
        name: str,
        filename: str,
        content: bytes | str,
        content_type: str = "application/octet-stream",
    ) -> "FormData":
        if isinstance(content, str):
            content = content.encode("utf-8")
        self._files[name] = (filename, content, content_type)
        return self

    @property
    def fields(self) -> dict[str, str]:
        return dict(self._fields)

    @property
    def files(self) -> dict[str, tuple[str, bytes, str]]:
        return dict(self._files)

    def __repr__(self) -> str:
        return f"FormData(fields={sorted(self._fields)}, files={sorted(self._files)})"


# =============================================================================
# Response Models
# =============================================================================


class Pagination(BaseModel):
    """Server-side pagination metadata read from the X-Dataset-* headers.

    A value is None when its header is absent or not a base-10 integer.
    """

    total: int | None = None
    offset: int | None = None
    limit: int | None = None


class PaginatedResult(BaseModel):
    """List response wrapped with its pagination metadata."""

    data: Any
    pagination: Pagination
