from typing import Any

from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine

from personapi.db.connect import get_session, resolve_db_uri
from personapi.db.models import Person, initialize_db, sqlite_engine
from personapi.logging import get_logger

logger = get_logger(__file__)


def check_status(file_path: str | None = None) -> str | None:
    """Return the SQLite library version of the configured database."""
    with get_session(file_path=file_path) as session:
        version = session.execute(text("SELECT sqlite_version();")).scalar()
    logger.info("sqlite version: %s", version)
    return version


def describe_person_table(file_path: str | None = None) -> list[dict[str, Any]]:
    """Column metadata for the ``person`` table as stored in the database.

    Each entry has ``name``, ``type``, ``nullable`` and ``primary_key`` keys.
    """

    with get_session(file_path=file_path) as session:
        inspector = inspect(session.bind)
        primary_key = set(inspector.get_pk_constraint(Person.__tablename__)["constrained_columns"])
        return [
            {
                "name": column["name"],
                "type": str(column["type"]),
                "nullable": bool(column["nullable"]),
                "primary_key": column["name"] in primary_key,
            }
            for column in inspector.get_columns(Person.__tablename__)
        ]


def initialize(file_path: str | None = None) -> Engine:
    """Create the ``person`` table in ``file_path`` (or the configured database)."""
    engine = sqlite_engine(resolve_db_uri(file_path))
    initialize_db(engine)
    logger.info("initialized database at %s", engine.url)
    return engine
