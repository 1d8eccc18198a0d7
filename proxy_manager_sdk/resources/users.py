"""Users resource."""

from collections.abc import Mapping
from typing import Any

from proxy_manager_sdk.resources._base import CrudResource, DispatchResult, ResourceId


class Users(CrudResource):
    """Operations on /api/users."""

    path = "users"

    async def set_password(self, user_id: ResourceId, auth: Mapping[str, Any]) -> DispatchResult:
        """Change a user's password.

        Args:
            user_id: The user to update.
            auth: Auth payload, e.g. {"type": "password", "current": ..., "secret": ...}.
        """
        return await self._dispatcher.dispatch("PUT", self._item_path(user_id, "auth"), dict(auth))

    async def set_permissions(self, user_id: ResourceId, perms: Mapping[str, Any]) -> DispatchResult:
        return await self._dispatcher.dispatch(
            "PUT", self._item_path(user_id, "permissions"), dict(perms)
        )

    async def login_as(self, user_id: ResourceId) -> DispatchResult:
        """Request a token that impersonates the given user."""
        return await self._dispatcher.dispatch("POST", self._item_path(user_id, "login"))
