"""Bearer token model."""

from pydantic import BaseModel


class Token(BaseModel):
    """Bearer token held by a token store.

    Fields:
        t: The token text sent as `Authorization: Bearer <t>`
        n: Optional display name (e.g. the impersonated user's name)
    """

    t: str
    n: str | None = None
