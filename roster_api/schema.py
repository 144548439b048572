"""
GraphQL schema for the roster API.

    type User { id: ID!  name: String!  role: String! }
    type Query { users: [User!]! }
    type Mutation { createUser(name: String!, role: String!): User! }

Resolvers never touch a global: the owning UserStore arrives in
`info.context["store"]` (see routes/graphql.py).
"""

import strawberry
from strawberry.types import Info

from roster_api.models.schemas import UserRecord
from roster_api.store import UserStore


@strawberry.type
class User:
    id: strawberry.ID
    name: str
    role: str

    @classmethod
    def from_record(cls, record: UserRecord) -> "User":
        return cls(id=strawberry.ID(record.id), name=record.name, role=record.role)


def _store(info: Info) -> UserStore:
    return info.context["store"]


@strawberry.type
class Query:
    @strawberry.field(description="Every user created so far, oldest first.")
    async def users(self, info: Info) -> list[User]:
        records = await _store(info).list_users()
        return [User.from_record(r) for r in records]


@strawberry.type
class Mutation:
    @strawberry.mutation(description="Append a new user and return it.")
    async def create_user(self, info: Info, name: str, role: str) -> User:
        record = await _store(info).create_user(name=name, role=role)
        return User.from_record(record)


schema = strawberry.Schema(query=Query, mutation=Mutation)
