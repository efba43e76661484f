"""Shared state behind the in-memory repositories.

All in-memory repositories of one container read and write the same store,
so a test sees one consistent "database" across services and requests.
"""

import asyncio
from typing import Any


class InMemoryStore:
    """Tables keyed by primary key, plus a lock that serialises transactions."""

    TABLES = (
        "trips",
        "users",
        "participants",
        "invites",
        "claims",
        "proposals",
        "votes",
        "gear_items",
        "gear_assignments",
    )

    def __init__(self) -> None:
        self.trips: dict[Any, Any] = {}
        self.users: dict[Any, Any] = {}
        self.participants: dict[Any, Any] = {}
        self.invites: dict[Any, Any] = {}
        self.claims: dict[Any, Any] = {}
        self.proposals: dict[Any, Any] = {}
        self.votes: dict[Any, Any] = {}
        self.gear_items: dict[Any, Any] = {}
        self.gear_assignments: dict[Any, Any] = {}
        self.lock = asyncio.Lock()

    def snapshot(self) -> dict[str, dict[Any, Any]]:
        """Copy every table. Rows are frozen models, so shallow copies suffice."""
        return {name: dict(getattr(self, name)) for name in self.TABLES}

    def restore(self, snapshot: dict[str, dict[Any, Any]]) -> None:
        for name, rows in snapshot.items():
            setattr(self, name, rows)
