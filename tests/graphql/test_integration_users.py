"""
Integration tests for signup, login and the current user
"""

import pytest
from sqlalchemy import select

from hackernews.auth.adapters.jwt import JWTAuthAdapter
from hackernews.config import settings
from hackernews.database.connection import get_async_session
from hackernews.dbmodels import Users

SIGNUP = """
    mutation Signup($name: String!, $email: String!, $password: String!) {
        signup(name: $name, email: $email, password: $password) {
            token
            user { id name email }
        }
    }
"""

LOGIN = """
    mutation Login($email: String!, $password: String!) {
        login(email: $email, password: $password) {
            token
            user { id email }
        }
    }
"""


def token_adapter() -> JWTAuthAdapter:
    return JWTAuthAdapter(
        secret_key=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        user_id_claim=settings.jwt_user_id_claim,
    )


async def load_user(email: str) -> Users | None:
    async with get_async_session() as db:
        result = await db.execute(select(Users).where(Users.email == email))
        return result.scalar_one_or_none()


class TestSignup:
    @pytest.mark.asyncio
    async def test_signup_returns_token_for_new_user(self, execute):
        result = await execute(
            SIGNUP, {"name": "Ada", "email": "ada@example.com", "password": "s3cret"}
        )

        assert result.errors is None
        payload = result.data["signup"]
        assert payload["user"]["name"] == "Ada"
        assert payload["user"]["email"] == "ada@example.com"

        principal = await token_adapter().verify_token(payload["token"])
        assert principal["subject"] == payload["user"]["id"]

    @pytest.mark.asyncio
    async def test_password_is_stored_hashed(self, execute):
        await execute(SIGNUP, {"name": "Ada", "email": "ada@example.com", "password": "s3cret"})

        user = await load_user("ada@example.com")

        assert user is not None
        assert user.password != "s3cret"
        assert user.password.startswith("$2")

    @pytest.mark.asyncio
    async def test_duplicate_email_is_rejected(self, execute):
        variables = {"name": "Ada", "email": "ada@example.com", "password": "s3cret"}
        first = await execute(SIGNUP, variables)
        assert first.errors is None

        second = await execute(SIGNUP, variables)

        assert second.data == {"signup": None}
        assert second.errors[0].message == "User with email 'ada@example.com' already exists."
        assert second.errors[0].extensions["code"] == "CONSTRAINT_VIOLATION"

    @pytest.mark.asyncio
    async def test_missing_fields_are_rejected(self, execute):
        result = await execute(SIGNUP, {"name": "", "email": "ada@example.com", "password": "x"})

        assert result.errors[0].message == "All fields are required."
        assert await load_user("ada@example.com") is None


class TestLogin:
    @pytest.mark.asyncio
    async def test_login_with_valid_credentials(self, execute):
        signup = await execute(
            SIGNUP, {"name": "Ada", "email": "ada@example.com", "password": "s3cret"}
        )
        user_id = signup.data["signup"]["user"]["id"]

        result = await execute(LOGIN, {"email": "ada@example.com", "password": "s3cret"})

        assert result.errors is None
        assert result.data["login"]["user"] == {"id": user_id, "email": "ada@example.com"}
        principal = await token_adapter().verify_token(result.data["login"]["token"])
        assert principal["subject"] == user_id

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("email", "password"),
        [("ada@example.com", "wrong"), ("nobody@example.com", "s3cret")],
    )
    async def test_login_rejects_bad_credentials(self, execute, email, password):
        await execute(SIGNUP, {"name": "Ada", "email": "ada@example.com", "password": "s3cret"})

        result = await execute(LOGIN, {"email": email, "password": password})

        assert result.data == {"login": None}
        assert result.errors[0].message == "Invalid email or password."
        assert result.errors[0].extensions["code"] == "UNAUTHENTICATED"


class TestCurrentUser:
    @pytest.mark.asyncio
    async def test_me_is_null_without_user(self, execute):
        result = await execute("{ me { id } }")

        assert result.errors is None
        assert result.data == {"me": None}

    @pytest.mark.asyncio
    async def test_me_lists_links_posted_by_user(self, execute):
        await execute(SIGNUP, {"name": "Ada", "email": "ada@example.com", "password": "s3cret"})
        user = await load_user("ada@example.com")

        await execute(
            'mutation { postLink(description: "mine", url: "https://ada.example") { id } }',
            current_user=user,
        )
        await execute('mutation { postLink(description: "anon", url: "https://x.example") { id } }')

        result = await execute("{ me { name links { description } } }", current_user=user)

        assert result.errors is None
        assert result.data["me"] == {"name": "Ada", "links": [{"description": "mine"}]}
