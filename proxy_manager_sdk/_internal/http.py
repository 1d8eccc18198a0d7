"""Shared HTTP client configuration."""

import httpx

from proxy_manager_sdk._version import __version__

DEFAULT_TIMEOUT_MS = 15000


def create_http_client(
    *,
    base_url: str,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
) -> httpx.AsyncClient:
    """Create configured async HTTP client.

    The client keeps a cookie jar, so session cookies set by the backend are
    sent back on every later request. Redirects are followed.

    Args:
        base_url: Base URL of the Proxy Manager instance (without the /api root).
        timeout_ms: Default request timeout in milliseconds.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=timeout_ms / 1000,
        base_url=base_url,
        headers={"User-Agent": f"proxy-manager-sdk/{__version__}"},
        follow_redirects=True,
    )
