"""Resource clients, one group of operations per backend resource."""

from proxy_manager_sdk.resources._base import build_list_path, make_expansion_string
from proxy_manager_sdk.resources.access_lists import AccessLists
from proxy_manager_sdk.resources.audit_log import AuditLog
from proxy_manager_sdk.resources.nginx import DeadHosts, Nginx, ProxyHosts, RedirectionHosts, Streams
from proxy_manager_sdk.resources.reports import Reports
from proxy_manager_sdk.resources.tokens import Tokens
from proxy_manager_sdk.resources.users import Users

__all__ = [
    "AccessLists",
    "AuditLog",
    "DeadHosts",
    "Nginx",
    "ProxyHosts",
    "RedirectionHosts",
    "Reports",
    "Streams",
    "Tokens",
    "Users",
    "build_list_path",
    "make_expansion_string",
]
