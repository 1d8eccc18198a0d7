"""Audit log resource."""

from proxy_manager_sdk.resources._base import ListResource


class AuditLog(ListResource):
    """Read-only access to /api/audit-log."""

    path = "audit-log"
