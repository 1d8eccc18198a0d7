"""User-facing client for the Proxy Manager API.

Example usage:
    from proxy_manager_sdk import ProxyManagerClient

    async with ProxyManagerClient(base_url="http://npm.local:81") as client:
        await client.tokens.login("admin@example.com", "changeme", wipe=True)

        hosts = await client.nginx.proxy_hosts.get_all(expand=["owner", "certificate"])
        await client.nginx.proxy_hosts.update({"id": 5, "forward_port": 8080})
"""

import os

import httpx

from proxy_manager_sdk._internal.dispatch import PaginatedResult, RequestDispatcher
from proxy_manager_sdk._internal.http import DEFAULT_TIMEOUT_MS, create_http_client
from proxy_manager_sdk.exceptions import ProxyManagerConfigError
from proxy_manager_sdk.resources import (
    AccessLists,
    AuditLog,
    Nginx,
    Reports,
    Tokens,
    Users,
)
from proxy_manager_sdk.token_store import MemoryTokenStore, TokenStore


class ProxyManagerClient:
    """Async client exposing one attribute per backend resource.

    All resource groups share a single RequestDispatcher, and through it one
    connection pool and one token store.
    """

    def __init__(
        self,
        *,
        base_url: str,
        token_store: TokenStore | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        debug: bool = False,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Base URL of the Proxy Manager instance, without the /api root.
            token_store: Store for bearer tokens. Defaults to an in-memory stack.
            timeout_ms: Default request timeout in milliseconds.
            debug: Enable debug logging to stderr.
            http_client: Pre-configured async client. The caller keeps ownership.
        """
        if not base_url:
            raise ProxyManagerConfigError("base_url is required")

        self._base_url = base_url
        self._timeout_ms = timeout_ms
        self._debug = debug
        self._owns_http_client = http_client is None
        self._http = http_client or create_http_client(base_url=base_url, timeout_ms=timeout_ms)
        self._token_store = token_store if token_store is not None else MemoryTokenStore()
        self._dispatcher = RequestDispatcher(
            http_client=self._http,
            token_store=self._token_store,
            timeout_ms=timeout_ms,
            debug=debug,
        )

        self.tokens = Tokens(self._dispatcher)
        self.users = Users(self._dispatcher)
        self.nginx = Nginx(self._dispatcher)
        self.access_lists = AccessLists(self._dispatcher)
        self.audit_log = AuditLog(self._dispatcher)
        self.reports = Reports(self._dispatcher)

    @classmethod
    def from_env(cls, token_store: TokenStore | None = None) -> "ProxyManagerClient":
        """Create a client from environment variables.

        Required environment variables:
            PROXY_MANAGER_URL: Base URL of the Proxy Manager instance.

        Optional environment variables:
            PROXY_MANAGER_TIMEOUT_MS: Default request timeout in milliseconds.
            PROXY_MANAGER_DEBUG: Set to "1" to enable debug logging.

        Raises:
            ProxyManagerConfigError: PROXY_MANAGER_URL is not set.
            ValueError: PROXY_MANAGER_TIMEOUT_MS is not an integer.
        """
        base_url = os.environ.get("PROXY_MANAGER_URL")
        if not base_url:
            raise ProxyManagerConfigError("PROXY_MANAGER_URL is not set")

        debug = os.environ.get("PROXY_MANAGER_DEBUG", "") == "1"
        timeout_ms = int(os.environ.get("PROXY_MANAGER_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))

        return cls(
            base_url=base_url,
            token_store=token_store,
            timeout_ms=timeout_ms,
            debug=debug,
        )

    @property
    def token_store(self) -> TokenStore:
        return self._token_store

    @property
    def dispatcher(self) -> RequestDispatcher:
        return self._dispatcher

    async def status(self) -> PaginatedResult | httpx.Response:
        """Fetch the backend status document from /api/."""
        return await self._dispatcher.dispatch("GET", "")

    async def aclose(self) -> None:
        """Close the HTTP connection pool if this client created it."""
        if self._owns_http_client:
            await self._http.aclose()

    async def __aenter__(self) -> "ProxyManagerClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


def get_client() -> ProxyManagerClient:
    """Get a client configured from environment variables.

    Returns:
        A configured ProxyManagerClient instance.
    """
    return ProxyManagerClient.from_env()
