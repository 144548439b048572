"""
Roster API -- Pydantic data models

The record type stored by the API plus the JSON envelopes that travel
over the single GraphQL endpoint. The client package parses every
response through these same models, so both sides agree on one contract.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

class UserRecord(BaseModel):
    """A single user as stored by the API and returned by GraphQL."""

    id: str = Field(
        description="Server-assigned identifier (millisecond timestamp).",
        examples=["1760861520123"],
    )
    name: str = Field(
        description="Display name entered on the form.",
        examples=["Bat"],
    )
    role: str = Field(
        description="Role picked on the form. Not restricted server-side.",
        examples=["Engineer"],
    )


# ---------------------------------------------------------------------------
# GraphQL transport envelopes
# ---------------------------------------------------------------------------

class GraphQLRequest(BaseModel):
    """Body of a POST to the GraphQL endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    query: str
    variables: dict[str, Any] | None = None
    operation_name: str | None = Field(default=None, alias="operationName")


class GraphQLError(BaseModel):
    """One entry of the `errors` list. Unknown keys are kept."""

    model_config = ConfigDict(extra="allow")

    message: str
    path: list[str | int] | None = None


class GraphQLResponse(BaseModel):
    """Either a `data` payload, an `errors` list, or both."""

    data: dict[str, Any] | None = None
    errors: list[GraphQLError] | None = None


# ---------------------------------------------------------------------------
# Typed `data` payloads, one per operation
# ---------------------------------------------------------------------------

class UsersData(BaseModel):
    users: list[UserRecord]


class CreateUserData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    create_user: UserRecord = Field(alias="createUser")
