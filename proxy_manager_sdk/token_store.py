"""Token storage used by the dispatcher and the Tokens resource.

The dispatcher only ever reads the current token; writes happen exclusively in
the login and refresh operations.
"""

from typing import Protocol, runtime_checkable

from proxy_manager_sdk.models.token import Token


@runtime_checkable
class TokenStore(Protocol):
    """Interface of a bearer token store."""

    def get_current_token(self) -> Token | None: ...

    def set_current_token(self, token: str) -> None: ...

    def add_token(self, token: str, name: str | None = None) -> None: ...

    def clear_all_tokens(self) -> None: ...


class MemoryTokenStore:
    """Stack of tokens kept in memory.

    The topmost token is the current one. Pushing a second token (e.g. when an
    admin logs in as another user) keeps the original underneath so it can be
    restored with `drop_current_token()`.
    """

    def __init__(self, tokens: list[Token] | None = None) -> None:
        self._tokens: list[Token] = list(tokens or [])

    def get_current_token(self) -> Token | None:
        return self._tokens[-1] if self._tokens else None

    def set_current_token(self, token: str) -> None:
        """Replace the text of the topmost token, keeping its name."""
        if not self._tokens:
            self._tokens.append(Token(t=token))
            return
        self._tokens[-1] = self._tokens[-1].model_copy(update={"t": token})

    def add_token(self, token: str, name: str | None = None) -> None:
        self._tokens.append(Token(t=token, n=name))

    def clear_all_tokens(self) -> None:
        self._tokens.clear()

    def drop_current_token(self) -> Token | None:
        """Pop the topmost token, returning it (None when empty)."""
        return self._tokens.pop() if self._tokens else None

    def has_token(self) -> bool:
        return bool(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)
