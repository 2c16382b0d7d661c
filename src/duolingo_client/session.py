"""Login session state held by DuolingoClient."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


def build_authorization_headers(token: str) -> dict[str, str]:
    """Build the headers authenticating a request as the logged-in user.

    Args:
        token: JWT returned by the login endpoint

    Returns:
        Headers dict with the bearer Authorization header
    """
    return {"Authorization": f"Bearer {token}"}


class Session(BaseModel):
    """Credentials of the logged-in user.

    Frozen, and ``headers`` is rebuilt from the token on every read, so
    holders of a reference cannot alter the client's state. A new login
    builds a new Session.
    """

    username: str
    user_id: int
    token: str = Field(repr=False)

    model_config = ConfigDict(frozen=True)

    @property
    def headers(self) -> dict[str, str]:
        """A fresh copy of the headers authenticating this session."""
        return build_authorization_headers(self.token)

    @classmethod
    def from_login(cls, username: str, user_id: int, token: str) -> Session:
        return cls(username=username, user_id=user_id, token=token)
