"""
In-memory user store.

The store is created once per application and handed to the GraphQL
resolvers through the request context, so nothing reads a module-level
list. Data is lost on restart -- swap this class for a database-backed
one with the same two coroutines to add persistence.
"""

import asyncio
import logging
import time

from roster_api.models.schemas import UserRecord

logger = logging.getLogger(__name__)

# The record the demo page ships with (see ROSTER_SEED_DEMO in main.py).
DEMO_USERS = [UserRecord(id="1", name="Batbayar", role="Engineer")]


class UserStore:
    """Append-only collection of users, serialized by a single lock."""

    def __init__(self, seed: list[UserRecord] | None = None) -> None:
        self._lock = asyncio.Lock()
        self._users: list[UserRecord] = list(seed or [])
        self._last_id = max((_numeric(u.id) for u in self._users), default=0)

    def __len__(self) -> int:
        return len(self._users)

    async def list_users(self) -> list[UserRecord]:
        """Snapshot of every user, oldest first."""
        async with self._lock:
            return list(self._users)

    async def create_user(self, name: str, role: str) -> UserRecord:
        async with self._lock:
            user = UserRecord(id=self._next_id(), name=name, role=role)
            self._users.append(user)

        logger.info("Created user %s (%s, %s)", user.id, user.name, user.role)
        return user

    def _next_id(self) -> str:
        # Millisecond timestamp, bumped past the previous id when the clock
        # has not moved on (two appends in the same millisecond).
        now_ms = int(time.time() * 1000)
        self._last_id = max(now_ms, self._last_id + 1)
        return str(self._last_id)


def _numeric(user_id: str) -> int:
    return int(user_id) if user_id.isdigit() else 0
