import os

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from personapi.logging import get_logger

from .base import Base

_sql_logger = get_logger("personapi.sql")


def _on_connect(dbapi_connection, connection_record):
    dbapi_connection.execute("PRAGMA foreign_keys=ON")
    if os.getenv("PERSONAPI_SQL_TRACE"):
        dbapi_connection.set_trace_callback(_sql_logger.info)


def sqlite_engine(db_uri: str) -> Engine:
    """Engine for a SQLite URI, shareable across the API's worker threads."""

    engine = create_engine(db_uri, connect_args={"check_same_thread": False})
    event.listen(engine, "connect", _on_connect)
    return engine


def initialize_db(engine: Engine) -> None:
    # checkfirst: tables that already exist (e.g. from a migration) are kept
    Base.metadata.create_all(bind=engine, checkfirst=True)
