"""Access lists resource."""

from proxy_manager_sdk.resources._base import CrudResource


class AccessLists(CrudResource):
    """Operations on /api/access-lists."""

    path = "access-lists"
