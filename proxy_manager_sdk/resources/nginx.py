"""Nginx host and stream resources."""

import httpx

from proxy_manager_sdk._internal.dispatch import FormData, PaginatedResult, RequestDispatcher
from proxy_manager_sdk.resources._base import CrudResource, ResourceId

CERTIFICATES = "certificates"


class ProxyHosts(CrudResource):
    """Operations on /api/nginx/proxy-hosts."""

    path = "nginx/proxy-hosts"

    async def set_certs(self, host_id: ResourceId, form: FormData) -> str:
        """Upload certificate files through the raw upload path.

        Returns:
            The plain response text.
        """
        return await self._dispatcher.upload_raw(self._item_path(host_id, CERTIFICATES), form)


class RedirectionHosts(CrudResource):
    """Operations on /api/nginx/redirection-hosts."""

    path = "nginx/redirection-hosts"

    async def set_certs(
        self, host_id: ResourceId, form: FormData
    ) -> PaginatedResult | httpx.Response:
        return await self._dispatcher.upload(self._item_path(host_id, CERTIFICATES), form)


class Streams(CrudResource):
    """Operations on /api/nginx/streams."""

    path = "nginx/streams"


class DeadHosts(CrudResource):
    """Operations on /api/nginx/dead-hosts (404 hosts)."""

    path = "nginx/dead-hosts"

    async def set_certs(
        self, host_id: ResourceId, form: FormData
    ) -> PaginatedResult | httpx.Response:
        return await self._dispatcher.upload(self._item_path(host_id, CERTIFICATES), form)


class Nginx:
    """Groups the nginx resources under one attribute."""

    def __init__(self, dispatcher: RequestDispatcher) -> None:
        self.proxy_hosts = ProxyHosts(dispatcher)
        self.redirection_hosts = RedirectionHosts(dispatcher)
        self.streams = Streams(dispatcher)
        self.dead_hosts = DeadHosts(dispatcher)
