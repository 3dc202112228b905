"""Authorization gate: resolve a request token to a user or to anonymous."""

import logging

from snippet_vault.errors import TokenError
from snippet_vault.schemas.auth import Principal
from snippet_vault.services.credentials import CredentialStore
from snippet_vault.services.tokens import TokenCodec

logger = logging.getLogger(__name__)


class AuthGate:
    """Single chokepoint that establishes who is making a request."""

    def __init__(self, codec: TokenCodec, store: CredentialStore):
        self.codec = codec
        self.store = store

    def authenticate(self, token: str | None) -> Principal | None:
        """Return the user behind ``token``, or None for anonymous.

        Malformed, forged and expired tokens all yield None; the caller is
        never told which. Storage failures are not swallowed.
        """
        if not token:
            return None

        try:
            claims = self.codec.decode(token)
        except TokenError as e:
            logger.debug(f"Rejected session token: {type(e).__name__}")
            return None

        user = self.store.get_by_id(claims.user_id)
        if user is None:
            logger.debug(f"Token subject {claims.user_id} no longer exists")
        return user
