"""Unit tests for JWT authentication adapter (without database dependencies)."""

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from hackernews.auth.adapters.base import AuthenticationError
from hackernews.auth.adapters.jwt import JWTAuthAdapter


@pytest.fixture
def secret_key():
    return "test-secret-key-for-testing-only"


@pytest.fixture
def jwt_adapter(secret_key):
    return JWTAuthAdapter(secret_key=secret_key, algorithm="HS256")


@pytest.fixture
def valid_token(secret_key):
    now = datetime.now(UTC)
    payload = {
        "userId": 42,
        "iat": now,
        "exp": now + timedelta(hours=1),
    }
    return jwt.encode(payload, secret_key, algorithm="HS256")


class TestJWTAdapter:
    """Test JWT authentication adapter."""

    @pytest.mark.asyncio
    async def test_verify_valid_token(self, jwt_adapter, valid_token):
        """Test verifying a valid JWT token."""
        principal = await jwt_adapter.verify_token(valid_token)

        assert principal["provider"] == "jwt"
        assert principal["subject"] == "42"
        assert principal["claims"]["userId"] == 42

    @pytest.mark.asyncio
    async def test_verify_token_without_expiry(self, jwt_adapter, secret_key):
        """Tokens without exp are accepted, as issued by older clients."""
        token = jwt.encode({"userId": 3}, secret_key, algorithm="HS256")

        principal = await jwt_adapter.verify_token(token)

        assert principal["subject"] == "3"

    @pytest.mark.asyncio
    async def test_verify_expired_token(self, jwt_adapter, secret_key):
        """Test verifying an expired JWT token fails."""
        past_time = datetime.now(UTC) - timedelta(hours=2)
        payload = {"userId": 42, "exp": past_time + timedelta(minutes=30)}
        expired_token = jwt.encode(payload, secret_key, algorithm="HS256")

        with pytest.raises(AuthenticationError, match="Invalid token"):
            await jwt_adapter.verify_token(expired_token)

    @pytest.mark.asyncio
    async def test_verify_wrong_secret(self, jwt_adapter):
        """Test a token signed with another secret fails."""
        token = jwt.encode({"userId": 42}, "another-secret-entirely", algorithm="HS256")

        with pytest.raises(AuthenticationError, match="Invalid token"):
            await jwt_adapter.verify_token(token)

    @pytest.mark.asyncio
    async def test_verify_garbage_token(self, jwt_adapter):
        with pytest.raises(AuthenticationError, match="Invalid token"):
            await jwt_adapter.verify_token("not.a.jwt")

    @pytest.mark.asyncio
    async def test_verify_missing_user_claim(self, jwt_adapter, secret_key):
        """Test a token without the user id claim fails."""
        token = jwt.encode({"sub": "42"}, secret_key, algorithm="HS256")

        with pytest.raises(AuthenticationError, match="Missing 'userId' claim"):
            await jwt_adapter.verify_token(token)

    @pytest.mark.asyncio
    async def test_custom_user_id_claim(self, secret_key):
        adapter = JWTAuthAdapter(secret_key=secret_key, user_id_claim="uid")
        token = jwt.encode({"uid": 9}, secret_key, algorithm="HS256")

        principal = await adapter.verify_token(token)

        assert principal["subject"] == "9"

    @pytest.mark.asyncio
    async def test_issue_and_verify_token(self, jwt_adapter):
        """Test issuing and then verifying a token."""
        token = await jwt_adapter.issue_token(user_id=17, claims={"role": "admin"})
        principal = await jwt_adapter.verify_token(token)

        assert principal["subject"] == "17"
        assert principal["claims"]["role"] == "admin"
        assert principal["claims"]["exp"] > principal["claims"]["iat"]

    @pytest.mark.asyncio
    async def test_issued_token_honours_expiry_hours(self, secret_key):
        adapter = JWTAuthAdapter(secret_key=secret_key, token_expiry_hours=2)

        token = await adapter.issue_token(user_id=1)
        claims = jwt.decode(token, secret_key, algorithms=["HS256"])

        assert claims["exp"] - claims["iat"] == 2 * 60 * 60
