"""
Roster API -- Application entry point.

Run with:
    uvicorn roster_api.main:app --reload

Then POST GraphQL to http://localhost:8000/api/graphql, or drive it with
the terminal form in demo/demo_form.py.

This file:
  1. Configures logging and reads the environment
  2. Creates the FastAPI application around one UserStore
  3. Adds CORS middleware (permissive, demo only)
  4. Mounts the GraphQL endpoint and its liveness route
  5. Defines the health check endpoint
"""

import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from roster_api.routes import graphql
from roster_api.store import DEMO_USERS, UserStore

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)

VERSION = "0.1.0"

# Start with the sample user the original form page showed
SEED_DEMO = os.getenv("ROSTER_SEED_DEMO", "false").lower() in ("1", "true", "yes")
# Serve the GraphiQL IDE on GET /api/graphql instead of the liveness document
GRAPHIQL = os.getenv("ROSTER_GRAPHIQL", "false").lower() in ("1", "true", "yes")


def create_app(store: UserStore | None = None, graphiql: bool = GRAPHIQL) -> FastAPI:
    """Build the application around `store` (a fresh empty one by default)."""
    if store is None:
        store = UserStore()

    app = FastAPI(
        title="Roster API",
        version=VERSION,
        description=(
            "A single GraphQL endpoint over an in-memory list of users.\n\n"
            "| Operation | Purpose |\n"
            "|-----------|--------|\n"
            "| `query { users }` | List every user, oldest first |\n"
            "| `mutation { createUser(name, role) }` | Append a user |\n\n"
            "**Status:** demo -- data lives in memory and is lost on restart."
        ),
    )
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],         # Allow any origin (demo only)
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # The liveness GET must be registered before Strawberry's router, which
    # also answers GET on the same path.
    if not graphiql:
        app.include_router(graphql.router)
    app.include_router(
        graphql.build_graphql_router(store, graphiql=graphiql),
        prefix=graphql.GRAPHQL_PATH,
        tags=["GraphQL"],
    )

    @app.get("/", include_in_schema=False)
    async def root():
        """Redirect root to the GraphQL endpoint."""
        return RedirectResponse(url=graphql.GRAPHQL_PATH)

    @app.get(
        "/health",
        summary="Health check",
        description="Returns the current status of the API. Use this for uptime monitoring.",
        tags=["System"],
    )
    async def health():
        return {
            "status": "healthy",
            "service": "roster-api",
            "version": VERSION,
            "users_stored": len(store),
        }

    logger.info("Roster API ready (%d seeded users, graphiql=%s)", len(store), graphiql)
    return app


app = create_app(UserStore(seed=DEMO_USERS if SEED_DEMO else None))
