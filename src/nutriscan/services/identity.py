"""Caller identity resolution."""

from typing import Protocol
from uuid import UUID


class IdentityResolver(Protocol):
    """Resolve an access token to the id of the calling user."""

    def resolve(self, token: str) -> UUID | None:
        """Return the user id for a valid token, or None."""
