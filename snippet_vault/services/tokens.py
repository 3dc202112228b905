"""Signed, time-bounded session tokens (JWT, HMAC)."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from jose.constants import ALGORITHMS
from jose.utils import base64url_decode, base64url_encode

from snippet_vault.errors import BadSignatureError, MalformedTokenError, TokenExpiredError

DEFAULT_TOKEN_TTL = timedelta(days=7)


def utc_now() -> datetime:
    """Current wall-clock time in UTC."""
    return datetime.now(UTC)


@dataclass(frozen=True)
class TokenClaims:
    """Decoded contents of a valid token."""

    user_id: int
    issued_at: datetime
    expires_at: datetime


def _timestamp_claim(claims: dict, name: str) -> int:
    value = claims.get(name)
    # bool is an int subclass
    if not isinstance(value, int) or isinstance(value, bool):
        raise MalformedTokenError(f"Missing or invalid '{name}' claim")
    return value


class TokenCodec:
    """Issue and decode session tokens.

    Decoding depends only on the token text, the signing secret and the clock;
    it never consults storage, so a token stays valid until it expires.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = ALGORITHMS.HS256,
        default_ttl: timedelta = DEFAULT_TOKEN_TTL,
        clock: Callable[[], datetime] = utc_now,
    ):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        if algorithm not in ALGORITHMS.HMAC:
            raise ValueError(f"Unsupported token algorithm: {algorithm}")
        self._secret = secret
        self.algorithm = algorithm
        self.default_ttl = default_ttl
        self._clock = clock

    def issue(self, user_id: int, ttl: timedelta | None = None) -> str:
        """Create a token for ``user_id`` valid for ``ttl`` (default TTL if omitted)."""
        if ttl is None:
            ttl = self.default_ttl
        if ttl < timedelta(0):
            raise ValueError("Token TTL must not be negative")

        issued_at = int(self._clock().timestamp())
        claims = {
            "sub": str(user_id),
            "iat": issued_at,
            "exp": issued_at + int(ttl.total_seconds()),
        }
        return jwt.encode(claims, self._secret, algorithm=self.algorithm)

    def decode(self, token: str) -> TokenClaims:
        """Validate a token and return its claims.

        Raises:
            MalformedTokenError: the token is not shaped like one of ours.
            BadSignatureError: the signature does not match.
            TokenExpiredError: the expiry time has passed.
        """
        self._check_structure(token)

        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                # Expiry is checked below against the injected clock
                options={"verify_exp": False, "verify_iat": False, "verify_sub": False},
            )
        except JWTError as e:
            raise BadSignatureError("Token signature mismatch") from e

        sub = claims.get("sub")
        if not isinstance(sub, str) or not sub.isdigit():
            raise MalformedTokenError("Missing or invalid 'sub' claim")
        issued_at = _timestamp_claim(claims, "iat")
        expires_at = _timestamp_claim(claims, "exp")

        if self._clock().timestamp() >= expires_at:
            raise TokenExpiredError("Token has expired")

        return TokenClaims(
            user_id=int(sub),
            issued_at=datetime.fromtimestamp(issued_at, UTC),
            expires_at=datetime.fromtimestamp(expires_at, UTC),
        )

    def _check_structure(self, token: str) -> None:
        """Reject anything that is not a three-segment JWT with our header."""
        if not isinstance(token, str):
            raise MalformedTokenError("Token must be a string")
        if token.count(".") != 2:
            raise MalformedTokenError("Token must have three segments")

        try:
            header = jwt.get_unverified_header(token)
        except JWTError as e:
            raise MalformedTokenError("Invalid token header") from e
        if header.get("alg") != self.algorithm:
            raise MalformedTokenError("Unexpected token algorithm")

        # Only one text form maps to each signature; any other is a forgery
        signature_segment = token.rsplit(".", 1)[1].encode("utf-8")
        if base64url_encode(base64url_decode(signature_segment)) != signature_segment:
            raise BadSignatureError("Token signature mismatch")
