# personapi/db/connect.py
import os
from contextlib import contextmanager
from functools import lru_cache
from pathlib import Path
from typing import Callable, ContextManager, Iterator

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from personapi.db.models import initialize_db, sqlite_engine
from personapi.logging import get_logger

logger = get_logger(__file__)

SessionScope = Callable[[], ContextManager[Session]]


def get_db_path(file: str | Path | None = None) -> str:
    """SQLite URI for ``file``, or ``personapi.db`` in ``PERSONAPI_DB_DIR``."""

    if file is None:
        db_dir = Path(os.environ.get("PERSONAPI_DB_DIR", Path.home() / "personapi"))
        db_dir.mkdir(parents=True, exist_ok=True)
        file = db_dir / "personapi.db"
    return f"sqlite:///{file}"


def resolve_db_uri(file_path: str | Path | None = None) -> str:
    """Resolve ``file_path``, ``PERSONAPI_DB_PATH`` or the default into a URI.

    Bare filesystem paths are turned into ``sqlite:///`` URIs.
    """

    raw = os.getenv("PERSONAPI_DB_PATH") if file_path is None else file_path
    if raw is None:
        return get_db_path()
    raw = str(raw)
    return raw if raw.startswith("sqlite") else get_db_path(raw)


@contextmanager
def _session_scope(factory: sessionmaker) -> Iterator[Session]:
    session = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def make_session_factory(engine: Engine) -> SessionScope:
    """Create the tables on ``engine`` and return a transactional scope factory.

    Each call of the returned function opens a session that commits on
    success, rolls back on error and is always closed.
    """

    initialize_db(engine)
    factory = sessionmaker(bind=engine)
    return lambda: _session_scope(factory)


@lru_cache(maxsize=None)
def _scope_for(db_uri: str) -> SessionScope:
    logger.info("opening database %s", db_uri)
    return make_session_factory(sqlite_engine(db_uri))


def get_session(file_path: str | Path | None = None) -> ContextManager[Session]:
    """Transactional session for ``file_path`` (see :func:`resolve_db_uri`)."""

    return _scope_for(resolve_db_uri(file_path))()
