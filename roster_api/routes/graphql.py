"""
/api/graphql -- The single data endpoint.

POST carries `{query, variables}` and is handled by Strawberry.
GET returns a short liveness document with a query to try.
"""

from fastapi import APIRouter
from strawberry.fastapi import GraphQLRouter

from roster_api.schema import schema
from roster_api.store import UserStore

GRAPHQL_PATH = "/api/graphql"

TRY_QUERY = "query { users { id name role } }"

router = APIRouter()


@router.get(
    GRAPHQL_PATH,
    summary="GraphQL liveness",
    description="Confirms the GraphQL endpoint is mounted and suggests a query to POST.",
    tags=["GraphQL"],
)
async def graphql_live() -> dict[str, str]:
    return {"message": "GraphQL API is live!", "tryQuery": TRY_QUERY}


def build_graphql_router(store: UserStore, graphiql: bool = False) -> GraphQLRouter:
    """Create the Strawberry router bound to one store instance."""

    async def get_context() -> dict:
        return {"store": store}

    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if graphiql else None,
    )
