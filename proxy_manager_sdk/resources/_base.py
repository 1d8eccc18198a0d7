"""Shared path building and CRUD operations for resource clients."""

from collections.abc import Mapping, Sequence
from typing import Any, ClassVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from proxy_manager_sdk._internal.dispatch import PaginatedResult, RequestDispatcher
from proxy_manager_sdk.exceptions import ProxyManagerValidationError

# Characters left alone by JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"

ResourceId = int | str
DispatchResult = PaginatedResult | httpx.Response


def make_expansion_string(expand: Sequence[str]) -> str:
    """Percent-encode each relation name and join them with commas."""
    if isinstance(expand, str):
        expand = [expand]
    return ",".join(quote(str(item), safe=_URI_COMPONENT_SAFE) for item in expand)


def build_list_path(
    path: str,
    expand: Sequence[str] | None = None,
    query: str | None = None,
) -> str:
    """Append `expand=` and `query=` parameters to a list path.

    The query filter is passed through as given.

    Example:
        build_list_path("users", ["owner", "certificate"], "foo=bar")
        # "users?expand=owner,certificate&query=foo=bar"
    """
    params: list[str] = []
    if expand:
        params.append("expand=" + make_expansion_string(expand))
    if isinstance(query, str):
        params.append("query=" + query)
    return path + ("?" + "&".join(params) if params else "")


class Resource:
    """Base for a group of operations rooted at one API path."""

    path: ClassVar[str] = ""

    def __init__(self, dispatcher: RequestDispatcher) -> None:
        self._dispatcher = dispatcher

    def _item_path(self, resource_id: ResourceId, *parts: str) -> str:
        return "/".join([self.path, str(resource_id), *parts])


class ListResource(Resource):
    """Resource with a list endpoint."""

    async def get_all(
        self,
        expand: Sequence[str] | None = None,
        query: str | None = None,
    ) -> DispatchResult:
        """List items, optionally expanding relations and filtering by `query`."""
        return await self._dispatcher.dispatch("GET", build_list_path(self.path, expand, query))


class CrudResource(ListResource):
    """Resource supporting list, read, create, update and delete."""

    async def get_by_id(
        self,
        resource_id: ResourceId,
        expand: Sequence[str] | None = None,
    ) -> DispatchResult:
        path = self._item_path(resource_id)
        if expand:
            path += "?expand=" + make_expansion_string(expand)
        return await self._dispatcher.dispatch("GET", path)

    async def create(self, data: Mapping[str, Any] | BaseModel) -> DispatchResult:
        return await self._dispatcher.dispatch("POST", self.path, _as_dict(data))

    async def update(self, data: Mapping[str, Any] | BaseModel) -> DispatchResult:
        """Update an item, taking its id out of `data`.

        The id goes into the path and is left out of the request body. The
        caller's mapping is not modified.

        Raises:
            ProxyManagerValidationError: `data` has no `id`.
        """
        body = _as_dict(data)
        resource_id = body.pop("id", None)
        if resource_id is None:
            raise ProxyManagerValidationError(f"update of {self.path} requires an 'id' field")
        return await self._dispatcher.dispatch("PUT", self._item_path(resource_id), body)

    async def delete(self, resource_id: ResourceId) -> DispatchResult:
        return await self._dispatcher.dispatch("DELETE", self._item_path(resource_id))


def _as_dict(data: Mapping[str, Any] | BaseModel) -> dict[str, Any]:
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json")
    return dict(data)
