"""JWT authentication adapter for self-issued tokens."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
from jwt.exceptions import InvalidTokenError

from ...logging import get_logger
from .base import AuthenticationError, Principal

logger = get_logger(__name__)


class JWTAuthAdapter:
    """Verifies and issues HMAC-signed tokens carrying a local user id."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        user_id_claim: str = "userId",
        token_expiry_hours: int = 24,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.user_id_claim = user_id_claim
        self.token_expiry_hours = token_expiry_hours

    async def verify_token(self, token: str) -> Principal:
        """Verify a JWT token and return the principal."""
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={
                    "verify_exp": True,
                    "verify_nbf": True,
                    "verify_iat": True,
                },
            )

            subject = payload.get(self.user_id_claim)
            if subject is None or subject == "":
                raise AuthenticationError(f"Missing '{self.user_id_claim}' claim in token")

            return Principal(provider="jwt", subject=str(subject), claims=payload)

        except AuthenticationError:
            raise
        except InvalidTokenError as e:
            logger.warning("JWT token validation failed", error=str(e))
            raise AuthenticationError("Invalid token") from e
        except Exception as e:
            logger.error(f"Unexpected error verifying JWT token: {e}")
            raise AuthenticationError("Token verification failed") from e

    async def issue_token(self, user_id: int, claims: dict | None = None) -> str:
        """Issue a new JWT token for the given user."""
        now = datetime.now(UTC)

        payload = {
            self.user_id_claim: user_id,
            "iat": now,
            "exp": now + timedelta(hours=self.token_expiry_hours),
        }

        if claims:
            payload.update(claims)

        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)
