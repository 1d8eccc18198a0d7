"""Shared fixtures."""

import httpx
import pytest

from proxy_manager_sdk._internal.dispatch import RequestDispatcher
from proxy_manager_sdk.token_store import MemoryTokenStore

BASE_URL = "http://npm.test"


@pytest.fixture
def token_store() -> MemoryTokenStore:
    return MemoryTokenStore()


@pytest.fixture
def http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(base_url=BASE_URL)


@pytest.fixture
def dispatcher(http_client: httpx.AsyncClient, token_store: MemoryTokenStore) -> RequestDispatcher:
    return RequestDispatcher(http_client=http_client, token_store=token_store)
