"""Supabase Auth implementation of caller identity resolution."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import AuthError, Client

from nutriscan.services.identity import IdentityResolver

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseIdentityResolver(IdentityResolver):
    """Validate access tokens against Supabase Auth."""

    client: Client

    def resolve(self, token: str) -> UUID | None:
        """Return the Supabase user id for a token, if it is valid."""
        try:
            response = self.client.auth.get_user(token)
        except AuthError as exc:
            _logger.info("Rejected access token: %s", exc)
            return None
        user = getattr(response, "user", None)
        if user is None:
            return None
        return UUID(str(user.id))
