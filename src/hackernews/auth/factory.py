"""Factory for creating the auth adapter from configuration."""

from __future__ import annotations

from ..config import settings
from .adapters.base import AuthAdapter
from .adapters.jwt import JWTAuthAdapter


def get_auth_adapter() -> AuthAdapter:
    """Create and return the configured auth adapter."""
    if not settings.jwt_secret:
        raise ValueError("JWT secret key is required. Set HACKERNEWS_JWT_SECRET.")

    return JWTAuthAdapter(
        secret_key=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        user_id_claim=settings.jwt_user_id_claim,
        token_expiry_hours=settings.token_expiry_hours,
    )
