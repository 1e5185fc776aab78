"""Resolve bearer tokens to owner ids via Supabase Auth."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from supabase import AuthApiError, Client

_logger = logging.getLogger(__name__)


class IdentityProvider(Protocol):
    """Interface for verifying access tokens."""

    def resolve_owner(self, access_token: str) -> UUID | None:
        """Return the user id behind a token, or None if it is not valid."""


@dataclass
class SupabaseIdentityProvider(IdentityProvider):
    """Supabase Auth implementation of the identity provider."""

    client: Client

    def resolve_owner(self, access_token: str) -> UUID | None:
        """Validate the token with Supabase Auth and return the user id."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthApiError as exc:
            _logger.info("Rejected access token: %s", exc)
            return None
        if response is None or response.user is None:
            return None
        return UUID(str(response.user.id))
