"""
End-to-end tests for the HTTP surface: /graphql over GET, POST and OPTIONS
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient


@pytest.fixture
def app(database):
    from hackernews.api.app import create_app

    return create_app()


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


async def post_graphql(client, query, variables=None, token=None):
    headers = {"Accept": "application/json"}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return await client.post(
        "/graphql", json={"query": query, "variables": variables or {}}, headers=headers
    )


class TestGraphQLEndpoint:
    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_post_mutation_then_get_query(self, client):
        created = await post_graphql(
            client,
            "mutation ($d: String!, $u: String!) { postLink(description: $d, url: $u) { id } }",
            {"d": "Prisma", "u": "https://prisma.io"},
        )
        assert created.status_code == 200
        link_id = created.json()["data"]["postLink"]["id"]

        response = await client.get(
            "/graphql",
            params={"query": "{ linkFeed { id description comments { id } } }"},
            headers={"Accept": "application/json"},
        )

        assert response.status_code == 200
        assert response.json()["data"]["linkFeed"] == [
            {"id": link_id, "description": "Prisma", "comments": []}
        ]

    @pytest.mark.asyncio
    async def test_errors_carry_extension_codes(self, client):
        response = await post_graphql(client, "{ linkFeed(take: 999) { id } }")

        assert response.status_code == 200
        body = response.json()
        assert body["data"] is None
        assert body["errors"][0]["message"] == (
            "'take' argument value '999' is outside the valid range of 1 to 50"
        )
        assert body["errors"][0]["extensions"]["code"] == "BAD_USER_INPUT"

    @pytest.mark.asyncio
    async def test_bearer_token_identifies_current_user(self, client):
        signup = await post_graphql(
            client,
            'mutation { signup(name: "Ada", email: "ada@example.com", password: "pw") '
            "{ token user { id } } }",
        )
        payload = signup.json()["data"]["signup"]

        me = await post_graphql(client, "{ me { id name } }", token=payload["token"])
        anonymous = await post_graphql(client, "{ me { id } }")
        bad_token = await post_graphql(client, "{ me { id } }", token="garbage")

        assert me.json()["data"]["me"] == {"id": payload["user"]["id"], "name": "Ada"}
        assert anonymous.json()["data"]["me"] is None
        assert bad_token.status_code == 200
        assert bad_token.json()["data"]["me"] is None

    @pytest.mark.asyncio
    async def test_plain_options_request(self, client):
        response = await client.options("/graphql")

        assert response.status_code == 204
        assert response.headers["allow"] == "GET, POST, OPTIONS"

    @pytest.mark.asyncio
    async def test_cors_preflight(self, client):
        response = await client.options(
            "/graphql",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, client):
        supplied = await client.get("/health", headers={"X-Request-ID": "trace-42"})
        generated = await client.get("/health")

        assert supplied.headers["x-request-id"] == "trace-42"
        assert generated.headers["x-request-id"]
        assert generated.headers["x-request-id"] != "trace-42"
