"""Data access for person records.

Two stores share the :class:`PersonStore` protocol: a list-backed store kept
in process memory and a SQLAlchemy store bound to a single session.
"""

from __future__ import annotations

import threading
from typing import Protocol
from uuid import UUID

from sqlalchemy.orm import Session

from personapi.api.models.person import Person, PersonIn
from personapi.db.crud import PersonCRUD
from personapi.logging import get_logger

logger = get_logger(__file__)


class PersonStore(Protocol):
    def insert_person(self, id: UUID, person: PersonIn) -> int: ...

    def select_all_people(self) -> list[Person]: ...

    def select_person_by_id(self, id: UUID) -> Person | None: ...

    def delete_person_by_id(self, id: UUID) -> int: ...

    def update_person_by_id(self, id: UUID, person: PersonIn) -> int: ...


class InMemoryPersonStore:
    """Keep people in a list owned by the store instance."""

    def __init__(self) -> None:
        self._people: list[Person] = []
        self._lock = threading.Lock()

    def insert_person(self, id: UUID, person: PersonIn) -> int:
        with self._lock:
            self._people.append(Person(id=id, **person.model_dump()))
        return 1

    def select_all_people(self) -> list[Person]:
        with self._lock:
            return list(self._people)

    def select_person_by_id(self, id: UUID) -> Person | None:
        with self._lock:
            return next((p for p in self._people if p.id == id), None)

    def delete_person_by_id(self, id: UUID) -> int:
        with self._lock:
            for index, existing in enumerate(self._people):
                if existing.id == id:
                    del self._people[index]
                    return 1
        return 0

    def update_person_by_id(self, id: UUID, person: PersonIn) -> int:
        with self._lock:
            for index, existing in enumerate(self._people):
                if existing.id == id:
                    self._people[index] = Person(id=id, **person.model_dump())
                    return 1
        return 0


class SqlPersonStore:
    """Person store backed by the ``person`` table."""

    def __init__(self, session: Session, crud: PersonCRUD | None = None) -> None:
        self.session = session
        self.crud = crud or PersonCRUD()

    def insert_person(self, id: UUID, person: PersonIn) -> int:
        self.crud.create(self.session, {"id": id, **person.model_dump()})
        return 1

    def select_all_people(self) -> list[Person]:
        return [Person.model_validate(row) for row in self.crud.list(self.session)]

    def select_person_by_id(self, id: UUID) -> Person | None:
        row = self.crud.get(self.session, id)
        if row is None:
            return None
        return Person.model_validate(row)

    def delete_person_by_id(self, id: UUID) -> int:
        return 1 if self.crud.delete(self.session, id) else 0

    def update_person_by_id(self, id: UUID, person: PersonIn) -> int:
        row = self.crud.update(self.session, id, person.model_dump())
        return 0 if row is None else 1
