"""
Tests for the GraphQL endpoint over HTTP.

Raw `{query, variables}` bodies are posted to /api/graphql exactly as the
form client sends them, and the JSON envelopes are checked by hand.
"""

from fastapi.testclient import TestClient

from roster_api.main import create_app
from roster_api.routes.graphql import GRAPHQL_PATH, TRY_QUERY
from roster_api.store import DEMO_USERS, UserStore
from roster_client.graphql import CREATE_USER_MUTATION, USERS_QUERY


def gql(http, query, variables=None):
    body = {"query": query}
    if variables is not None:
        body["variables"] = variables
    return http.post(GRAPHQL_PATH, json=body).json()


class TestUsersQuery:

    def test_no_users_returns_empty_list(self, http):
        result = gql(http, USERS_QUERY)
        assert result["data"] == {"users": []}
        assert "errors" not in result or not result["errors"]

    def test_users_in_insertion_order(self, http):
        for name in ("Ann", "Bo", "Cy"):
            gql(http, CREATE_USER_MUTATION, {"name": name, "role": "Student"})

        users = gql(http, USERS_QUERY)["data"]["users"]
        assert [u["name"] for u in users] == ["Ann", "Bo", "Cy"]

    def test_seeded_app_returns_demo_user(self):
        with TestClient(create_app(UserStore(seed=DEMO_USERS))) as http:
            users = gql(http, USERS_QUERY)["data"]["users"]
        assert users == [{"id": "1", "name": "Batbayar", "role": "Engineer"}]


class TestCreateUserMutation:

    def test_create_then_read_scenario(self, http):
        created = gql(http, CREATE_USER_MUTATION, {"name": "Bat", "role": "Engineer"})["data"]["createUser"]
        assert created["name"] == "Bat"
        assert created["role"] == "Engineer"
        assert created["id"]

        users = gql(http, USERS_QUERY)["data"]["users"]
        assert users[-1] == created

    def test_same_pair_twice_gives_two_records(self, http):
        first = gql(http, CREATE_USER_MUTATION, {"name": "Bat", "role": "Engineer"})["data"]["createUser"]
        second = gql(http, CREATE_USER_MUTATION, {"name": "Bat", "role": "Engineer"})["data"]["createUser"]

        assert first["id"] != second["id"]
        assert len(gql(http, USERS_QUERY)["data"]["users"]) == 2

    def test_role_is_not_restricted_server_side(self, http):
        created = gql(http, CREATE_USER_MUTATION, {"name": "Bat", "role": "Astronaut"})["data"]["createUser"]
        assert created["role"] == "Astronaut"

    def test_missing_variable_is_a_graphql_error(self, http, store):
        result = gql(http, CREATE_USER_MUTATION, {"name": "Bat"})

        assert result["errors"]
        assert "role" in result["errors"][0]["message"]
        assert len(store) == 0

    def test_missing_argument_in_document_is_a_graphql_error(self, http, store):
        result = gql(http, 'mutation { createUser(name: "Bat") { id } }')

        assert result["errors"]
        assert len(store) == 0

    def test_mutation_writes_to_injected_store(self, http, store):
        gql(http, CREATE_USER_MUTATION, {"name": "Bat", "role": "Engineer"})
        assert len(store) == 1


class TestAppRoutes:

    def test_get_graphql_is_liveness_document(self, http):
        resp = http.get(GRAPHQL_PATH)
        assert resp.status_code == 200
        assert resp.json() == {"message": "GraphQL API is live!", "tryQuery": TRY_QUERY}

    def test_health_counts_users(self, http):
        gql(http, CREATE_USER_MUTATION, {"name": "Bat", "role": "Engineer"})

        health = http.get("/health").json()
        assert health["status"] == "healthy"
        assert health["users_stored"] == 1

    def test_root_redirects_to_graphql(self, http):
        resp = http.get("/", follow_redirects=False)
        assert resp.status_code in (302, 307)
        assert resp.headers["location"] == GRAPHQL_PATH

    def test_apps_do_not_share_stores(self):
        with TestClient(create_app()) as a, TestClient(create_app()) as b:
            gql(a, CREATE_USER_MUTATION, {"name": "Bat", "role": "Engineer"})
            assert gql(b, USERS_QUERY)["data"]["users"] == []
