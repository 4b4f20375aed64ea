"""Bug storage backends and the factory that picks one from configuration."""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app import config
from app.store.base import BugStore
from app.store.memory import InMemoryBugStore
from app.store.sql import SQLAlchemyBugStore

logger = logging.getLogger(__name__)

_memory_store: Optional[InMemoryBugStore] = None


def get_bug_store(session: AsyncSession) -> BugStore:
    """
    Factory function to get the configured bug store.

    Reads BUG_STORE_BACKEND from configuration:
    - "sql": SQLAlchemyBugStore bound to the given session
    - "memory": one InMemoryBugStore shared by the whole process

    Raises:
        ValueError: If the backend name is unknown
    """
    global _memory_store

    backend = config.BUG_STORE_BACKEND
    if backend == "sql":
        return SQLAlchemyBugStore(session)
    if backend == "memory":
        if _memory_store is None:
            logger.info("Using in-memory bug store, data will not survive a restart")
            _memory_store = InMemoryBugStore()
        return _memory_store
    raise ValueError(f"Unknown BUG_STORE_BACKEND: {backend}")


__all__ = ["BugStore", "InMemoryBugStore", "SQLAlchemyBugStore", "get_bug_store"]
