"""Internal modules for Proxy Manager SDK.

WARNING: This package contains system-level modules used by the resource
clients. These are not intended for direct use in application code.

Modules:
    dispatch - Request dispatch and response normalization
    http - Shared HTTP client configuration
"""
