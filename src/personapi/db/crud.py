# crud.py
from typing import Any, List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from personapi.db.models import Person
from personapi.logging import get_logger

logger = get_logger(__file__)


class CRUDBase:

    def __init__(self, model, req_cols: Optional[List[str]] = None):
        self.model = model
        self.req_cols = req_cols

    def get_columns(self):
        return [col.name for col in self.model.__table__.columns]

    def validate_input(self, record: dict) -> dict:
        """Drop unknown keys and check that required columns are present."""

        allowed_keys = self.get_columns()
        cleaned_record = {}
        for k, v in record.items():
            if k in allowed_keys:
                cleaned_record[k] = v
            else:
                logger.warning("Key '%s' not in model columns, removing from record.", k)

        if self.req_cols is not None:
            for col in self.req_cols:
                if cleaned_record.get(col) is None:
                    raise ValueError(f"{col} not in input record")

        return cleaned_record

    def get(self, session: Session, id: Any):
        return session.get(self.model, id)

    def list(self, session: Session):
        return list(session.scalars(select(self.model)))

    def create(self, session: Session, record: dict):
        record = self.validate_input(record)
        obj = self.model(**record)
        session.add(obj)
        session.commit()
        session.refresh(obj)
        logger.info("Inserted into %s: %s", self.model.__tablename__, record)
        return obj

    def update(self, session: Session, id: Any, record: dict):
        """Replace every non-key column of the row ``id`` with ``record``.

        Returns the updated object, or ``None`` when no row matches.
        """

        obj = self.get(session, id)
        if obj is None:
            return None
        record = self.validate_input(record)
        for column in self.get_columns():
            if column == "id":
                continue
            setattr(obj, column, record.get(column))
        session.commit()
        session.refresh(obj)
        logger.info("Updated %s %s", self.model.__tablename__, id)
        return obj

    def delete(self, session: Session, id: Any) -> bool:
        obj = self.get(session, id)
        if obj:
            session.delete(obj)
            session.commit()
            logger.info("Deleted from %s: %s", self.model.__tablename__, id)
            return True
        return False


class PersonCRUD(CRUDBase):

    def __init__(self):
        super().__init__(Person, req_cols=["id", "name"])

    def update(self, session: Session, id: UUID, record: dict):
        record = {**record, "id": id}
        return super().update(session, id, record)
