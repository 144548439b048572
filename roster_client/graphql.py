"""
Roster client -- GraphQL transport

Lightweight client for the roster GraphQL endpoint. Every operation is a
named document paired with the pydantic model that parses its `data`, so
callers get UserRecord objects instead of raw dicts.

Usage:

    from roster_client.graphql import RosterClient

    client = RosterClient("http://localhost:8000/api/graphql")
    bat = client.create_user("Bat", "Engineer")
    print([u.name for u in client.users()])

Requirements: requests, pydantic
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from roster_api.models.schemas import (
    CreateUserData,
    GraphQLError,
    GraphQLRequest,
    GraphQLResponse,
    UserRecord,
    UsersData,
)

logger = logging.getLogger(__name__)

DEFAULT_URL = os.getenv("ROSTER_API_URL", "http://localhost:8000/api/graphql")
DEFAULT_TIMEOUT = float(os.getenv("ROSTER_TIMEOUT", "30"))

DataT = TypeVar("DataT", bound=BaseModel)


# ── Operation documents ───────────────────────────────────────────────────

USERS_QUERY = """
query GetUsers {
  users {
    id
    name
    role
  }
}
"""

CREATE_USER_MUTATION = """
mutation CreateUser($name: String!, $role: String!) {
  createUser(name: $name, role: $role) {
    id
    name
    role
  }
}
"""


# ── Exceptions ────────────────────────────────────────────────────────────


class RosterClientError(Exception):
    """Base exception for anything that goes wrong talking to the endpoint."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class GraphQLResponseError(RosterClientError):
    """The server answered with a non-empty `errors` list."""

    def __init__(self, errors: List[GraphQLError], status_code: Optional[int] = None, body: Any = None):
        super().__init__(errors[0].message, status_code=status_code, body=body)
        self.errors = errors


# ── Client ────────────────────────────────────────────────────────────────


class RosterClient:
    """
    Client for the roster GraphQL endpoint.

    Args:
        url: Full URL of the GraphQL endpoint.
        timeout: Request timeout in seconds, or None to use the session default.
        session: Anything with a requests-style ``post(url, json=...)``.
            Defaults to a new ``requests.Session``.
    """

    def __init__(
        self,
        url: str = DEFAULT_URL,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        session: Any = None,
    ):
        self.url = url
        self.timeout = timeout
        if session is None:
            session = requests.Session()
            session.headers.update({"Content-Type": "application/json"})
        self._session = session

    def execute(
        self,
        query: str,
        data_model: Type[DataT],
        variables: Optional[Dict[str, Any]] = None,
    ) -> DataT:
        """POST one operation and parse its `data` into ``data_model``."""
        payload = GraphQLRequest(query=query, variables=variables)
        kwargs: Dict[str, Any] = {"json": payload.model_dump(by_alias=True, exclude_none=True)}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout

        try:
            resp = self._session.post(self.url, **kwargs)
        except requests.RequestException as e:
            raise RosterClientError(f"Cannot reach {self.url}: {e}") from e

        try:
            body = resp.json()
        except ValueError as e:
            raise RosterClientError(
                f"API error {resp.status_code}: response is not JSON",
                status_code=resp.status_code,
                body=resp.text,
            ) from e

        try:
            envelope = GraphQLResponse.model_validate(body)
        except ValidationError as e:
            raise RosterClientError(
                "Malformed GraphQL response",
                status_code=resp.status_code,
                body=body,
            ) from e

        if envelope.errors:
            logger.warning("GraphQL errors from %s: %s", self.url, envelope.errors[0].message)
            raise GraphQLResponseError(envelope.errors, status_code=resp.status_code, body=body)

        if resp.status_code >= 400:
            raise RosterClientError(
                f"API error {resp.status_code}: {body}",
                status_code=resp.status_code,
                body=body,
            )

        if envelope.data is None:
            raise RosterClientError("GraphQL response has no data", status_code=resp.status_code, body=body)

        try:
            return data_model.model_validate(envelope.data)
        except ValidationError as e:
            raise RosterClientError(
                f"Unexpected data shape for {data_model.__name__}",
                status_code=resp.status_code,
                body=body,
            ) from e

    # ── Operations ────────────────────────────────────────────────────

    def users(self) -> List[UserRecord]:
        """Fetch every user, oldest first."""
        return self.execute(USERS_QUERY, UsersData).users

    def create_user(self, name: str, role: str) -> UserRecord:
        """Create a user and return it as stored by the server."""
        data = self.execute(CREATE_USER_MUTATION, CreateUserData, {"name": name, "role": role})
        return data.create_user
