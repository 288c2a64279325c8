# personapi/api/routes/person.py
import re
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response, status

from personapi.api.deps import get_person_service
from personapi.api.models.person import Person, PersonIn
from personapi.services.person import PersonService

router = APIRouter(prefix="/api/v1/person", tags=["Person"])

CANONICAL_UUID = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.IGNORECASE
)


class PersonController:
    """Translate the person endpoints into :class:`PersonService` calls."""

    def __init__(self, person_service: PersonService):
        self.person_service = person_service

    def add_person(self, person: PersonIn) -> None:
        self.person_service.add_person(person)

    def get_all_persons(self) -> list[Person]:
        return self.person_service.get_all_persons()

    def get_person_by_id(self, id: UUID) -> Person | None:
        return self.person_service.get_person_by_id(id)

    def delete_person(self, id: UUID) -> int:
        return self.person_service.delete_person(id)

    def update_person(self, id: UUID, person: PersonIn) -> int:
        return self.person_service.update_person(id, person)


def get_person_controller(
    person_service: PersonService = Depends(get_person_service),
) -> PersonController:
    return PersonController(person_service)


def parse_person_id(id: str) -> UUID:
    """Parse the ``{id}`` path segment.

    Only the hyphenated 8-4-4-4-12 form is accepted; braces, ``urn:uuid:``
    prefixes and bare hex digits are rejected like any other malformed id.
    """

    if not CANONICAL_UUID.fullmatch(id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid person id: {id!r}",
        )
    return UUID(id)


@router.post("", status_code=status.HTTP_200_OK, response_class=Response)
@router.post("/", status_code=status.HTTP_200_OK, response_class=Response)
def add_person(
    person: PersonIn,
    controller: PersonController = Depends(get_person_controller),
):
    controller.add_person(person)


@router.get("", response_model=list[Person])
@router.get("/", response_model=list[Person])
def get_all_persons(controller: PersonController = Depends(get_person_controller)):
    return controller.get_all_persons()


@router.get("/{id}", response_model=Person | None)
def get_person_by_id(
    person_id: UUID = Depends(parse_person_id),
    controller: PersonController = Depends(get_person_controller),
):
    return controller.get_person_by_id(person_id)


@router.delete("/{id}", response_model=int)
def delete_person(
    person_id: UUID = Depends(parse_person_id),
    controller: PersonController = Depends(get_person_controller),
):
    return controller.delete_person(person_id)


@router.put("/{id}", response_model=int)
def update_person(
    person: PersonIn,
    person_id: UUID = Depends(parse_person_id),
    controller: PersonController = Depends(get_person_controller),
):
    return controller.update_person(person_id, person)
