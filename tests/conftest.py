"""Shared fixtures: a fresh store and app per test, plus clients bound to it."""

import pytest
from fastapi.testclient import TestClient

from roster_api.main import create_app
from roster_api.routes.graphql import GRAPHQL_PATH
from roster_api.store import UserStore
from roster_client.form import RosterForm
from roster_client.graphql import RosterClient


@pytest.fixture
def store():
    return UserStore()


@pytest.fixture
def http(store):
    with TestClient(create_app(store)) as client:
        yield client


@pytest.fixture
def roster(http):
    """RosterClient that talks to the in-process app instead of the network."""
    return RosterClient(url=GRAPHQL_PATH, timeout=None, session=http)


@pytest.fixture
def form(roster):
    return RosterForm(roster)
