"""Authentication for the Hacker News backend."""

from .adapters.base import AuthAdapter, AuthenticationError, Principal
from .factory import get_auth_adapter
from .middleware import authenticate_user, extract_bearer_token
from .passwords import hash_password, verify_password

__all__ = [
    "AuthAdapter",
    "AuthenticationError",
    "Principal",
    "authenticate_user",
    "extract_bearer_token",
    "get_auth_adapter",
    "hash_password",
    "verify_password",
]
