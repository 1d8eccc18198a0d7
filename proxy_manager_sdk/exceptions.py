"""Public exceptions for the Proxy Manager SDK."""


class ProxyManagerError(Exception):
    """Base exception for all Proxy Manager SDK errors."""


class ApiError(ProxyManagerError):
    """Normalized error for a failed API call.

    Every failure of a request, whether the network gave up or the backend
    answered with an error envelope, reaches the caller as an ApiError.

    Attributes:
        message: Human-readable error text.
        debug: Raw response body text (empty when no response was received).
        code: HTTP-like status code.
    """

    def __init__(self, message: str, debug: str = "", code: int = 400) -> None:
        super().__init__(message)
        self.message = message
        self.debug = debug
        self.code = code


class TransportError(ApiError):
    """Network failure, timeout, or HTTP error without a JSON error envelope."""


class ApplicationError(ApiError):
    """Backend returned a `{"error": {"message": ..., "code": ...}}` envelope."""


class AuthFlowError(ApiError):
    """Login or refresh succeeded on the wire but returned no token."""

    def __init__(self, message: str = "No token returned", debug: str = "", code: int = 401) -> None:
        super().__init__(message, debug=debug, code=code)


class UploadError(ApiError):
    """Dedicated raw upload answered with a status other than 200/201."""


class ProxyManagerConfigError(ProxyManagerError):
    """Configuration error (missing env vars, invalid config)."""


class ProxyManagerValidationError(ProxyManagerError):
    """Validation error for request arguments."""
