from __future__ import annotations

import logging

from app.core.config import settings
from app.data.catalog import seed_data
from app.db.session import SessionLocal
from app.repositories.store import InMemoryRepository, ResourceStore, SqlRepository

_LOG = logging.getLogger("app.store")

BACKEND_MEMORY = "memory"
BACKEND_SQL = "sql"

_cached_store: ResourceStore | None = None


def build_store(backend: str | None = None, session_factory=None) -> ResourceStore:
    kind = str(backend or settings.STORE_BACKEND or BACKEND_MEMORY).strip().lower()
    seeds = seed_data()
    if kind == BACKEND_SQL:
        _LOG.info("using SQL resource store")
        return ResourceStore(SqlRepository(name, session_factory or SessionLocal, rows) for name, rows in seeds.items())
    if kind != BACKEND_MEMORY:
        raise ValueError(f"Unsupported STORE_BACKEND: {kind}")
    return ResourceStore(InMemoryRepository(name, rows) for name, rows in seeds.items())


def get_store() -> ResourceStore:
    global _cached_store
    if _cached_store is None:
        _cached_store = build_store()
    return _cached_store


def reset_store_for_tests(store: ResourceStore | None = None) -> None:
    global _cached_store
    _cached_store = store
