"""FastAPI dependencies wiring a :class:`PersonService` per request."""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Iterator

from fastapi import Depends

from personapi.db.connect import get_session
from personapi.services.person import PersonService, StorePersonService
from personapi.services.store import InMemoryPersonStore, PersonStore, SqlPersonStore

STORE_BACKENDS = ("sqlite", "memory")


def store_backend() -> str:
    """Return the configured store backend (``PERSONAPI_STORE``)."""

    raw = (os.getenv("PERSONAPI_STORE") or "sqlite").strip().lower()
    if raw not in STORE_BACKENDS:
        raise ValueError(
            f"PERSONAPI_STORE must be one of {list(STORE_BACKENDS)}, got {raw!r}"
        )
    return raw


@lru_cache(maxsize=1)
def memory_store() -> InMemoryPersonStore:
    """Process-wide in-memory store shared by every request."""

    return InMemoryPersonStore()


def get_person_store() -> Iterator[PersonStore]:
    if store_backend() == "memory":
        yield memory_store()
        return
    with get_session() as session:
        yield SqlPersonStore(session)


def get_person_service(store: PersonStore = Depends(get_person_store)) -> PersonService:
    return StorePersonService(store)
