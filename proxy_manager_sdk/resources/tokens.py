"""Tokens resource: login and token refresh.

These are the only operations that write to the token store.
"""

from typing import Any

from proxy_manager_sdk._internal.dispatch import PaginatedResult
from proxy_manager_sdk.exceptions import AuthFlowError
from proxy_manager_sdk.resources._base import DispatchResult, Resource


class Tokens(Resource):
    """Operations on /api/tokens."""

    path = "tokens"

    async def login(self, identity: str, secret: str, wipe: bool = False) -> str:
        """Exchange credentials for a token and store it.

        Args:
            identity: Login identity (email).
            secret: Password.
            wipe: Clear every stored token before adding the new one.

        Returns:
            The new token text.

        Raises:
            AuthFlowError: The response carried no token. The store is cleared.
            ApiError: The request itself failed.
        """
        result = await self._dispatcher.dispatch(
            "POST", self.path, {"identity": identity, "secret": secret}
        )
        store = self._dispatcher.token_store
        token = _token_from(result)
        if not token:
            store.clear_all_tokens()
            raise AuthFlowError(debug=_text_of(result))

        if wipe:
            store.clear_all_tokens()
        store.add_token(token)
        return token

    async def refresh(self) -> str:
        """Refresh the current session token in place.

        Raises:
            AuthFlowError: The response carried no token. The store is cleared.
            ApiError: The request itself failed.
        """
        result = await self._dispatcher.dispatch("GET", self.path)
        store = self._dispatcher.token_store
        token = _token_from(result)
        if not token:
            store.clear_all_tokens()
            raise AuthFlowError(debug=_text_of(result))

        store.set_current_token(token)
        return token


def _token_from(result: DispatchResult) -> str | None:
    body: Any
    if isinstance(result, PaginatedResult):
        body = result.data
    else:
        try:
            body = result.json()
        except ValueError:
            body = None
    token = body.get("token") if isinstance(body, dict) else None
    return token if isinstance(token, str) else None


def _text_of(result: DispatchResult) -> str:
    if isinstance(result, PaginatedResult):
        return result.model_dump_json()
    return result.text
