# personapi/api/models/person.py
from uuid import UUID

from pydantic import BaseModel, Field


class PersonIn(BaseModel):
    """Request body for creating or replacing a person.

    Unknown keys (including a client supplied ``id``) are ignored; the
    identifier always comes from the service or the request path.
    """

    name: str = Field(min_length=1, max_length=200)

    model_config = {"str_strip_whitespace": True}


class Person(BaseModel):
    id: UUID
    name: str

    model_config = {"from_attributes": True}
