"""Request dispatcher: the single chokepoint for every Proxy Manager API call."""

import json
import sys
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import BaseModel

from proxy_manager_sdk._internal.dispatch.models import (
    API_ROOT,
    DEFAULT_TIMEOUT_MS,
    HEADER_DATASET_LIMIT,
    HEADER_DATASET_OFFSET,
    HEADER_DATASET_TOTAL,
    ContentType,
    FormData,
    PaginatedResult,
    Pagination,
    RequestOptions,
)
from proxy_manager_sdk._internal.dispatch.redaction import redact_payload
from proxy_manager_sdk.exceptions import (
    ApiError,
    ApplicationError,
    ProxyManagerValidationError,
    TransportError,
    UploadError,
)
from proxy_manager_sdk.token_store import TokenStore

DEFAULT_ERROR_CODE = 400
DEFAULT_ENVELOPE_CODE = 500
UPLOAD_OK_STATUSES = (200, 201)

Body = dict[str, Any] | list[Any] | BaseModel | FormData | str | bytes | None


class RequestDispatcher:
    """Builds, sends and normalizes a single HTTP request per call.

    Every request carries `Authorization: Bearer <token>` read from the token
    store at call time (`Bearer null` when the store is empty). Successful list
    responses announcing `X-Dataset-Total` are wrapped into a PaginatedResult;
    every other success returns the httpx.Response unchanged. Every failure is
    raised as an ApiError subclass; nothing is retried.
    """

    def __init__(
        self,
        *,
        http_client: httpx.AsyncClient,
        token_store: TokenStore,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        debug: bool = False,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            http_client: Shared async client, configured with the instance base URL.
            token_store: Store the current bearer token is read from.
            timeout_ms: Timeout for calls whose options do not set one.
            debug: Enable debug logging to stderr.
        """
        self._http = http_client
        self._token_store = token_store
        self._timeout_ms = timeout_ms
        self._debug = debug

    @property
    def token_store(self) -> TokenStore:
        return self._token_store

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[proxy-manager-sdk] {message}", file=sys.stderr)

    def _authorization(self) -> str:
        token = self._token_store.get_current_token()
        return f"Bearer {token.t if token else 'null'}"

    async def dispatch(
        self,
        verb: str,
        path: str,
        body: Body = None,
        options: RequestOptions | None = None,
    ) -> PaginatedResult | httpx.Response:
        """Send one request to `/api/<path>` and normalize the outcome.

        Args:
            verb: HTTP method (GET, POST, PUT, DELETE).
            path: Resource-relative path without a leading slash; may carry a query string.
            body: Structured value, FormData, or pre-encoded str/bytes. A structured
                value is sent as JSON text under the default options. With a multipart
                content type its keys become multipart fields, and with
                `process_data=False` they are sent as url-encoded form fields.
            options: Per-call configuration. Defaults to JSON with the dispatcher timeout.

        Returns:
            PaginatedResult when the response carries X-Dataset-Total,
            otherwise the raw httpx.Response. A non-empty success body must be JSON.

        Raises:
            ApplicationError: The backend answered with an error envelope.
            TransportError: Network failure, timeout, an HTTP error without envelope,
                or a success body that is not JSON ("parsererror").
            ProxyManagerValidationError: A list body was given with form encoding.
        """
        options = options or RequestOptions()
        method = verb.upper()
        url = API_ROOT + path
        timeout_ms = options.timeout_ms or self._timeout_ms

        headers = {"Authorization": self._authorization()}
        payload = self._encode_body(body, options)
        # httpx writes its own boundary or form-urlencoded header
        if "files" not in payload and "data" not in payload:
            headers["Content-Type"] = options.content_type.value

        self._log_debug(f"{method} {url} body={self._describe_body(body)}")

        try:
            response = await self._http.request(
                method,
                url,
                headers=headers,
                timeout=timeout_ms / 1000,
                **payload,
            )
        except httpx.TimeoutException as e:
            self._log_debug(f"{method} {url} timed out")
            raise TransportError("timeout", code=DEFAULT_ERROR_CODE) from e
        except httpx.HTTPError as e:
            self._log_debug(f"{method} {url} failed: {e}")
            raise TransportError(str(e) or type(e).__name__, code=DEFAULT_ERROR_CODE) from e

        self._log_debug(f"{method} {url} -> {response.status_code}")

        if not response.is_success:
            raise self._error_from_response(response)

        return self._normalize_success(response)

    async def upload(self, path: str, form: FormData) -> PaginatedResult | httpx.Response:
        """Upload a multipart form through the regular dispatch path."""
        return await self.dispatch(
            "POST",
            path,
            form,
            RequestOptions(content_type=ContentType.MULTIPART, process_data=False),
        )

    async def upload_raw(self, path: str, form: FormData) -> str:
        """Upload a multipart form and return the plain response text.

        Bypasses content negotiation and response header parsing entirely:
        only the bearer header is attached, and anything other than a 200/201
        answer is an UploadError carrying the status code.

        Raises:
            UploadError: The server answered with a status other than 200/201.
            TransportError: The request never got an answer.
        """
        url = API_ROOT + path
        self._log_debug(f"POST {url} (raw upload) body={form!r}")

        try:
            response = await self._http.post(
                url,
                files=_multipart_parts(form),
                headers={"Authorization": self._authorization()},
            )
        except httpx.TimeoutException as e:
            raise TransportError("timeout", code=DEFAULT_ERROR_CODE) from e
        except httpx.HTTPError as e:
            raise TransportError(str(e) or type(e).__name__, code=DEFAULT_ERROR_CODE) from e

        if response.status_code not in UPLOAD_OK_STATUSES:
            self._log_debug(f"Upload failed with status {response.status_code}")
            raise UploadError(
                f"Upload failed: {response.status_code}",
                debug=response.text,
                code=response.status_code,
            )
        return response.text

    def _encode_body(self, body: Body, options: RequestOptions) -> dict[str, Any]:
        """Turn the body into httpx request keyword arguments."""
        if body is None:
            return {}
        if isinstance(body, FormData):
            return {"files": _multipart_parts(body)}
        if isinstance(body, (str, bytes)):
            return {"content": body}
        if isinstance(body, BaseModel):
            body = body.model_dump(mode="json")
        if options.content_type is ContentType.JSON and options.process_data:
            # Same text JSON.stringify produces
            return {"content": json.dumps(body, separators=(",", ":"), ensure_ascii=False)}
        if not isinstance(body, Mapping):
            raise ProxyManagerValidationError(
                f"Cannot send {type(body).__name__} body as {options.content_type.value} "
                f"(process_data={options.process_data})"
            )
        fields = {str(name): _form_value(value) for name, value in body.items()}
        if options.content_type is ContentType.MULTIPART:
            return {"files": {name: (None, value) for name, value in fields.items()}}
        return {"data": fields}

    def _describe_body(self, body: Body) -> str:
        if isinstance(body, BaseModel):
            body = body.model_dump(mode="json")
        if isinstance(body, (dict, list)):
            return json.dumps(redact_payload(body), default=str)
        if isinstance(body, (str, bytes)):
            return f"<{len(body)} bytes>"
        return repr(body)

    def _normalize_success(self, response: httpx.Response) -> PaginatedResult | httpx.Response:
        total = response.headers.get(HEADER_DATASET_TOTAL)
        if total is None and (response.status_code == 204 or not response.content.strip()):
            return response

        try:
            data = response.json()
        except ValueError as e:
            self._log_debug(f"Undecodable {response.status_code} body")
            raise TransportError("parsererror", debug=response.text, code=DEFAULT_ERROR_CODE) from e

        if total is None:
            return response

        return PaginatedResult(
            data=data,
            pagination=Pagination(
                total=_parse_int(total),
                offset=_parse_int(response.headers.get(HEADER_DATASET_OFFSET)),
                limit=_parse_int(response.headers.get(HEADER_DATASET_LIMIT)),
            ),
        )

    def _error_from_response(self, response: httpx.Response) -> ApiError:
        debug = response.text
        try:
            body = response.json()
        except ValueError:
            body = None

        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict) and error.get("message") is not None:
            self._log_debug(f"API error: {error['message']}")
            return ApplicationError(
                str(error["message"]),
                debug=debug,
                code=_parse_int(error.get("code")) or DEFAULT_ENVELOPE_CODE,
            )

        message = response.reason_phrase or f"HTTP {response.status_code}"
        return TransportError(message, debug=debug, code=DEFAULT_ERROR_CODE)


def _multipart_parts(form: FormData) -> dict[str, Any]:
    """Build the httpx `files=` mapping, so plain fields also go out as multipart."""
    parts: dict[str, Any] = {name: (None, value) for name, value in form.fields.items()}
    parts.update(form.files)
    return parts


def _form_value(value: Any) -> str:
    """Render one form field the way a browser stringifies it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return str(value)


def _parse_int(value: Any) -> int | None:
    """Parse a base-10 integer, returning None for missing or malformed values."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(str(value).strip(), 10)
    except ValueError:
        return None
