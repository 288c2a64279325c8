"""Person service: identifier assignment in front of a :class:`PersonStore`."""

from __future__ import annotations

import uuid
from typing import Callable, Protocol
from uuid import UUID

from personapi.api.models.person import Person, PersonIn
from personapi.logging import get_logger
from personapi.services.store import PersonStore

logger = get_logger(__file__)


class PersonService(Protocol):
    def add_person(self, person: PersonIn) -> None: ...

    def get_all_persons(self) -> list[Person]: ...

    def get_person_by_id(self, id: UUID) -> Person | None: ...

    def delete_person(self, id: UUID) -> int: ...

    def update_person(self, id: UUID, person: PersonIn) -> int: ...


class StorePersonService:
    """Default :class:`PersonService` implementation.

    Parameters
    ----------
    store:
        Where records live.
    id_factory:
        Callable producing new identifiers. Defaults to :func:`uuid.uuid4`.
    """

    def __init__(
        self,
        store: PersonStore,
        id_factory: Callable[[], UUID] = uuid.uuid4,
    ) -> None:
        self.store = store
        self.id_factory = id_factory

    def add_person(self, person: PersonIn) -> None:
        new_id = self.id_factory()
        self.store.insert_person(new_id, person)
        logger.info("added person %s", new_id)

    def get_all_persons(self) -> list[Person]:
        return self.store.select_all_people()

    def get_person_by_id(self, id: UUID) -> Person | None:
        return self.store.select_person_by_id(id)

    def delete_person(self, id: UUID) -> int:
        count = self.store.delete_person_by_id(id)
        logger.debug("delete person %s -> %d", id, count)
        return count

    def update_person(self, id: UUID, person: PersonIn) -> int:
        count = self.store.update_person_by_id(id, person)
        logger.debug("update person %s -> %d", id, count)
        return count
